"""Prefix override configuration.

```json
{
    "preconfigured": true,
    "properties": {
        "transition": ["-webkit-*"],
        "user-select": ["-webkit-user-select", "-ms-user-select"]
    },
    "values": {
        "display": {"flex": ["-webkit-flex"]}
    }
}
```
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cssvendor.errors import ConfigError

__all__ = ["PrefixConfig"]


def _tokens_(where: str, tokens: Any) -> list[str]:
    if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
        raise ConfigError(f"Expected a list of prefixes for {where!r}, got {tokens!r}")
    return list(tokens)


def _mapping_(where: str, value: Any) -> dict:
    if not isinstance(value, dict):
        raise ConfigError(f"Expected an object for {where!r}, got {type(value).__name__}")
    return value


@dataclass
class PrefixConfig:
    """User overrides for the built-in prefix tables.

    properties => property -> prefixed names or `prefix*` wildcards,
    values => property -> value -> prefixed values or `prefix*` wildcards,
    preconfigured => only accept names that are already in the defaults,
    """

    properties: dict[str, list[str]] = field(default_factory=dict)
    values: dict[str, dict[str, list[str]]] = field(default_factory=dict)
    preconfigured: bool = False

    @staticmethod
    def from_dict(data: dict[str, Any]) -> PrefixConfig:
        data = _mapping_("config", data)
        unknown = set(data) - {"properties", "values", "preconfigured"}
        if len(unknown) > 0:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        properties = {
            prop: _tokens_(prop, tokens)
            for prop, tokens in _mapping_("properties", data.get("properties", {})).items()
        }
        values = {
            prop: {
                value: _tokens_(f"{prop}: {value}", tokens)
                for value, tokens in _mapping_(prop, by_value).items()
            }
            for prop, by_value in _mapping_("values", data.get("values", {})).items()
        }

        preconfigured = data.get("preconfigured", False)
        if not isinstance(preconfigured, bool):
            raise ConfigError(f"Expected true or false for 'preconfigured', got {preconfigured!r}")
        return PrefixConfig(properties, values, preconfigured)

    @staticmethod
    def from_path(path: str | Path) -> PrefixConfig:
        """Load the config from a json file."""
        try:
            with Path(path).open("r", encoding="utf-8") as file:
                data = json.load(file)
        except OSError as exc:
            raise ConfigError(f"Could not read config {str(path)!r}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid json in config {str(path)!r}: {exc}") from exc
        return PrefixConfig.from_dict(data)
