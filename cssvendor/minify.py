"""CSS minification that keeps license comments.

Comments mentioning a copyright, license, author, credit, url, or marked with `/*!` are
kept (reduced to their relevant lines) so that minified output still carries attribution.

References:
    - [minify css with regex](http://stackoverflow.com/questions/15195750/minify-compress-css-with-regex)
    - [shorten hex colors](http://stackoverflow.com/questions/2167793/how-to-convert-all-color-code-xxyyzz-to-shorter-3-character-version-xyz-of-who)
"""
from __future__ import annotations
import re

__all__ = ["minify", "preserve_comments"]

COMMENT = re.compile(r"/\*(?:[^*]|\*+[^*/])*\*+/")
LICENSE = re.compile(r"copyright|license|author|preserve|credit|http|/\*!", re.IGNORECASE)

WHITESPACE = re.compile(r"\s+")
AROUND_SYMBOLS = re.compile(r"\s*([*$~^|]?=|[{};,>~]|!important\b)\s*")
BEFORE_CLOSING = re.compile(r"\s+([\])])")
AFTER_OPENING = re.compile(r"([\[(:])\s+")
BEFORE_COLON = re.compile(r"\s+(:)(?![^}]*\{)")
HEX = re.compile(r"(?<!['\"])#([a-f0-9])\1([a-f0-9])\2([a-f0-9])\3(?![a-z0-9'\"])", re.IGNORECASE)
ZERO_UNITS = re.compile(r"((?<!\\):|\s)-?0(?:em|cm|mm|in|px|pt)(?![\w%])", re.IGNORECASE)
LEADING_ZERO = re.compile(r"(?<![\w.])0\.(\d+)")


def _marker_(index: int) -> str:
    return f"\x00{index}\x00"


def preserve_comments(text: str) -> tuple[str, list[str]]:
    """Remove comments, keeping the license like lines of each.

    Returns
        The text with comments removed and each kept comment replaced by a marker, along
        with the kept comments in marker order.
    """
    kept: list[str] = []

    def _replace_(match: re.Match) -> str:
        lines = match.group(0).split("\n")
        relevant = [line for line in lines if LICENSE.search(line)]
        if len(relevant) == 0:
            return ""
        if len(lines) > 1:
            comment = "/*!\n" + "\n".join(relevant) + "\n */"
        else:
            comment = relevant[0].replace("/* ", "/*! ")
        kept.append(comment)
        return _marker_(len(kept) - 1)

    return COMMENT.sub(_replace_, text), kept


def _restore_(text: str, comments: list[str]) -> str:
    for index, comment in enumerate(comments):
        marker = _marker_(index)
        text = text.replace(f"{marker} ", marker).replace(marker, comment + "\n")
    return text.replace("}/*", "}\n/*")


def minify(text: str) -> str:
    """Minify css by removing comments, whitespace, and redundant units."""
    output, comments = preserve_comments(text)

    output = WHITESPACE.sub(" ", output)
    output = AROUND_SYMBOLS.sub(r"\1", output)
    output = BEFORE_CLOSING.sub(r"\1", output)
    output = AFTER_OPENING.sub(r"\1", output)
    output = BEFORE_COLON.sub(r"\1", output)
    output = output.replace(";}", "}")

    output = HEX.sub(r"#\1\2\3", output)
    output = ZERO_UNITS.sub(r"\g<1>0", output)
    output = LEADING_ZERO.sub(r".\1", output)

    return _restore_(output.strip(), comments)
