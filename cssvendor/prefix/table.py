"""Prefix lookups with user overrides layered over the built-in defaults."""
from __future__ import annotations

from collections import ChainMap
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TYPE_CHECKING, TypeVar

from cssvendor import log
from cssvendor.prefix.defaults import FALLBACKS, PROPERTIES, VALUES, PrefixList

if TYPE_CHECKING:
    from cssvendor.config import PrefixConfig

__all__ = ["PrefixTable", "apply_override", "WILDCARD"]

WILDCARD = "*"

# Names overrides are checked against, including the lists only the expanders use
KNOWN = ChainMap(PROPERTIES, FALLBACKS)

K = TypeVar("K", bound=Hashable)


def _resolve_(tokens: Iterable[str], known: PrefixList, preconfigured: bool) -> list[str]:
    resolved: list[str] = []
    for token in tokens:
        if token.endswith(WILDCARD):
            stem = token[: -len(WILDCARD)]
            matches = [name for name in known if name.startswith(stem)]
        elif preconfigured:
            matches = [token] if token in known else []
        else:
            matches = [token]
        resolved.extend(m for m in matches if m not in resolved)
    return resolved


def apply_override(
    overrides: Mapping[K, Iterable[str]],
    preconfigured: bool,
    defaults: Mapping[K, PrefixList],
    canonical: Callable[[K], str],
) -> dict[K, PrefixList]:
    """Resolve user overrides against the defaults.

    Each token is either a full prefixed name, kept as is (or only if it is in the defaults
    when `preconfigured` is set), or `prefix*` which keeps every default starting with
    `prefix`. The unprefixed form is always moved to the end.

    Args
        overrides (Mapping): The user supplied lists of tokens.
        preconfigured (bool): Only accept names that are already in the defaults.
        defaults (Mapping): The built-in table for the same keys.
        canonical (Callable): Gives the unprefixed name for a key.

    Returns
        The effective entries. Keys whose tokens all get rejected are left out so the
        default stays in effect.
    """
    effective: dict[K, PrefixList] = {}
    for key, tokens in overrides.items():
        plain = canonical(key)
        resolved = _resolve_(tokens, defaults.get(key, ()), preconfigured)
        if len(resolved) == 0:
            log.warn(f"Override for {key!r} accepted no prefixes, the defaults are used instead")
            continue
        effective[key] = (*(name for name in resolved if name != plain), plain)
    return effective


class PrefixTable:
    """Property and value prefix lookups.

    Args
        properties (Mapping[str, list[str]] | None): Overrides keyed by property.
        values (Mapping[str, Mapping[str, list[str]]] | None): Overrides keyed by property then value.
        preconfigured (bool): Only accept override names that are already in the defaults.
    """

    def __init__(
        self,
        properties: Mapping[str, Iterable[str]] | None = None,
        values: Mapping[str, Mapping[str, Iterable[str]]] | None = None,
        preconfigured: bool = False,
    ) -> None:
        self.preconfigured = preconfigured
        self._properties_ = ChainMap(
            apply_override(properties or {}, preconfigured, KNOWN, lambda key: key),
            PROPERTIES,
        )
        flat = {
            (prop, value): tokens
            for prop, by_value in (values or {}).items()
            for value, tokens in by_value.items()
        }
        self._values_ = ChainMap(
            apply_override(flat, preconfigured, VALUES, lambda key: key[1]),
            VALUES,
        )

    @staticmethod
    def from_config(config: PrefixConfig) -> PrefixTable:
        return PrefixTable(config.properties, config.values, config.preconfigured)

    def by_property(self, property: str) -> PrefixList | None:
        return self._properties_.get(property)

    def by_value(self, property: str, value: str) -> PrefixList | None:
        return self._values_.get((property, value))

    def __repr__(self) -> str:
        return (
            f"PrefixTable(properties={len(self._properties_.maps[0])}, "
            f"values={len(self._values_.maps[0])}, preconfigured={self.preconfigured})"
        )
