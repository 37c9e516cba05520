"""Built-in prefix tables.

Every entry lists the replacements in output order, ending with the unprefixed form.
These tables are read only; per instance overrides are layered on top of them by
`cssvendor.prefix.table.PrefixTable`.
"""
from __future__ import annotations

from types import MappingProxyType

from typing_extensions import TypeAliasType

__all__ = ["PrefixList", "PROPERTIES", "VALUES", "FALLBACKS"]

PrefixList = TypeAliasType("PrefixList", tuple[str, ...])

# Properties where the property name is prefixed
PROPERTIES: MappingProxyType[str, PrefixList] = MappingProxyType({
    "flex": ("-webkit-flex", "-ms-flex", "flex"),
    "flex-wrap": ("-webkit-flex-wrap", "-ms-flex-wrap", "flex-wrap"),
    "flex-direction": ("-webkit-flex-direction", "-ms-flex-direction", "flex-direction"),
    "flex-grow": ("-webkit-flex-grow", "-ms-flex-positive", "flex-grow"),
    "flex-shrink": ("-webkit-flex-shrink", "-ms-flex-negative", "flex-shrink"),
    "flex-basis": ("-webkit-flex-basis", "-ms-flex-preferred-size", "flex-basis"),
    "order": ("-webkit-order", "-ms-flex-order", "order"),
    "justify-content": ("-webkit-justify-content", "-ms-flex-pack", "justify-content"),
    "transition": ("-webkit-transition", "-o-transition", "transition"),
    "box-sizing": ("-webkit-box-sizing", "box-sizing"),
    "column-count": ("-webkit-column-count", "column-count"),
    "column-gap": ("-webkit-column-gap", "column-gap"),
    "column-width": ("-webkit-column-width", "column-width"),
    "column-rule": ("-webkit-column-rule", "column-rule"),
    "user-select": ("-webkit-user-select", "-moz-user-select", "-ms-user-select", "user-select"),
    "transform": ("-webkit-transform", "-ms-transform", "transform"),
    "appearance": ("-webkit-appearance", "-moz-appearance", "appearance"),
    "filter": ("-webkit-filter", "filter"),
    "grid-template-columns": ("-ms-grid-columns", "grid-template-columns"),
    "grid-template-rows": ("-ms-grid-rows", "grid-template-rows"),
    "grid-row-start": ("-ms-grid-row", "grid-row-start"),
    "grid-column-start": ("-ms-grid-column", "grid-column-start"),
    "justify-self": ("-ms-grid-row-align", "justify-self"),
})

# Properties where the value is prefixed, keyed by (property, value)
VALUES: MappingProxyType[tuple[str, str], PrefixList] = MappingProxyType({
    ("display", "flex"): ("-webkit-flex", "-ms-flexbox", "flex"),
    # -webkit-inline-flex, not the 2009 -webkit-inline-box, to pair with -webkit-flex
    ("display", "inline-flex"): ("-webkit-inline-flex", "-ms-inline-flexbox", "inline-flex"),
})

# Used by the custom expanders when neither the defaults nor the overrides have an entry
FALLBACKS: MappingProxyType[str, PrefixList] = MappingProxyType({
    "align-items": ("-webkit-align-items", "-ms-flex-align", "align-items"),
    "align-self": ("-webkit-align-self", "-ms-flex-item-align", "align-self"),
    "align-content": ("-webkit-align-content", "-ms-flex-line-pack", "align-content"),
})
