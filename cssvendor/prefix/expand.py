"""Expansion of a single declaration into its vendor prefixed variants.

Flexbox went through several drafts and every vendor shipped a different one, so some
properties need their values translated for the `-ms-` prefix and cannot be handled by
table lookups alone. Those properties have their own `Expander`.

References:
    - [flexbox drafts](https://css-tricks.com/old-flexbox-and-new-flexbox/)
    - [flexbugs #4](https://github.com/philipwalton/flexbugs#4-flex-shorthand-declarations-with-unitless-flex-basis-values-are-ignored)
"""
from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from typing_extensions import TypeAliasType

from cssvendor.css.declaration import Declaration
from cssvendor.prefix.defaults import FALLBACKS, PrefixList
from cssvendor.prefix.table import PrefixTable

__all__ = ["Expander", "Engine", "zip_declarations"]

Values = TypeAliasType("Values", str | list[str] | tuple[str, ...])

MS = "-ms-"
GRID_ALIGN = ("-ms-grid-row-align", "center")

FLEX_KEYWORDS = {"flex-start": "start", "flex-end": "end"}
JUSTIFY_KEYWORDS = {**FLEX_KEYWORDS, "space-between": "justify", "space-around": "distribute"}
WRAP_KEYWORDS = {"nowrap": "none"}
ZERO_BASIS = ("0", "0px")


def zip_declarations(properties: Values, values: Values, bang: str | None = None) -> list[Declaration]:
    """Pair up properties and values into declarations.

    A single property or value is repeated to match the other side. When both are lists of
    different lengths the shorter one is padded with its last item.
    """
    properties = [properties] if isinstance(properties, str) else list(properties)
    values = [values] if isinstance(values, str) else list(values)
    if len(properties) == 0 or len(values) == 0:
        return []

    size = max(len(properties), len(values))
    properties.extend(properties[-1] for _ in range(size - len(properties)))
    values.extend(values[-1] for _ in range(size - len(values)))
    return [Declaration(prop, value, bang) for prop, value in zip(properties, values)]


def _names_(table: PrefixTable, property: str) -> PrefixList:
    return table.by_property(property) or FALLBACKS.get(property, (property,))


def _ms_values_(names: PrefixList, value: str, keywords: dict[str, str]) -> list[str]:
    """The value for each name, translated through `keywords` for the `-ms-` names only.
    The last (unprefixed) name always keeps the value.
    """
    return [
        keywords.get(value, value) if name.startswith(MS) and i < len(names) - 1 else value
        for i, name in enumerate(names)
    ]


def _keywords_(keywords: dict[str, str]) -> Callable[[Declaration, PrefixTable], list[Declaration]]:
    def expand(decl: Declaration, table: PrefixTable) -> list[Declaration]:
        names = _names_(table, decl.property)
        return zip_declarations(names, _ms_values_(names, decl.value, keywords), decl.bang)
    return expand


def _flex_(decl: Declaration, table: PrefixTable) -> list[Declaration]:
    value = decl.value
    parts = value.split()
    # A unitless basis is ignored by IE 10/11, and 0px gets minified back to 0
    if len(parts) == 3 and parts[2] in ZERO_BASIS:
        parts[2] = "0%"
        value = " ".join(parts)
    return zip_declarations(_names_(table, decl.property), value, decl.bang)


def _align_(decl: Declaration, table: PrefixTable) -> list[Declaration]:
    names = _names_(table, decl.property)
    props: list[str] = []
    values: list[str] = []
    for name, value in zip(names, _ms_values_(names, decl.value, FLEX_KEYWORDS)):
        props.append(name)
        values.append(value)
        if name.startswith(MS) and name != names[-1] and value not in ("start", "end"):
            props.append(GRID_ALIGN[0])
            values.append(GRID_ALIGN[1])
    return zip_declarations(props, values, decl.bang)


class Expander(Enum):
    """Properties that need more than a name or value swap."""

    FLEX = "flex"
    FLEX_WRAP = "flex-wrap"
    JUSTIFY_CONTENT = "justify-content"
    ALIGN_ITEMS = "align-items"
    ALIGN_SELF = "align-self"
    ALIGN_CONTENT = "align-content"

    @staticmethod
    def lookup(property: str) -> Expander | None:
        for option in Expander:
            if option.value == property:
                return option
        return None

    def expand(self, decl: Declaration, table: PrefixTable) -> list[Declaration]:
        return _HANDLERS_[self](decl, table)


_HANDLERS_: dict[Expander, Callable[[Declaration, PrefixTable], list[Declaration]]] = {
    Expander.FLEX: _flex_,
    Expander.FLEX_WRAP: _keywords_(WRAP_KEYWORDS),
    Expander.JUSTIFY_CONTENT: _keywords_(JUSTIFY_KEYWORDS),
    Expander.ALIGN_ITEMS: _align_,
    Expander.ALIGN_SELF: _align_,
    Expander.ALIGN_CONTENT: _keywords_(FLEX_KEYWORDS),
}


class Engine:
    """Decides how a declaration is prefixed.

    Custom expanders win over value lookups, which win over property lookups. Declarations
    that match nothing expand to an empty list.
    """

    def __init__(self, table: PrefixTable | None = None) -> None:
        self.table = table or PrefixTable()

    def expand(self, decl: Declaration) -> list[Declaration]:
        if (expander := Expander.lookup(decl.property)) is not None:
            return expander.expand(decl, self.table)
        if (values := self.table.by_value(decl.property, decl.value)) is not None:
            return zip_declarations(decl.property, values, decl.bang)
        if (names := self.table.by_property(decl.property)) is not None:
            return zip_declarations(names, decl.value, decl.bang)
        return []
