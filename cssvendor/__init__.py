"""Vendor prefixing for CSS, SCSS, and LESS.

Declarations that older browsers only understand with a vendor prefix are expanded in
place, keeping the formatting they were written with.

```css
.row {
    display: flex;
}
```

becomes

```css
.row {
    display: -webkit-flex;
    display: -ms-flexbox;
    display: flex;
}
```
"""
from __future__ import annotations

from cssvendor.config import PrefixConfig
from cssvendor.css import Declaration, Scanner, extract
from cssvendor.errors import ConfigError, CSSVendorError, FilterError
from cssvendor.filters import Asset, FilterChain, MinifyFilter, PrefixFilter, TildeFilter
from cssvendor.prefix import Engine, Expander, PrefixTable
from cssvendor.rewrite import Rewriter

__version__ = "0.1.0"

__all__ = [
    "prefix_css",
    "PrefixConfig",
    "Declaration",
    "Scanner",
    "extract",
    "Engine",
    "Expander",
    "PrefixTable",
    "Rewriter",
    "Asset",
    "FilterChain",
    "PrefixFilter",
    "MinifyFilter",
    "TildeFilter",
    "CSSVendorError",
    "ConfigError",
    "FilterError",
]

EXTENSIONS = PrefixFilter.dump_extensions


def prefix_css(text: str, config: PrefixConfig | None = None, ext: str | None = None) -> str:
    """Add vendor prefixes to a stylesheet.

    Args
        text (str): The stylesheet source.
        config (PrefixConfig | None): Overrides for the built-in prefix tables.
        ext (str | None): Source extension. When given, only `css`, `scss`, and `less` are prefixed.
    """
    if ext is not None and ext.lstrip(".").lower() not in EXTENSIONS:
        return text
    table = PrefixTable.from_config(config) if config is not None else PrefixTable()
    return Rewriter(Engine(table)).rewrite(text)
