""" CSS Block Scanning
Finds every declaration inside a stylesheet, including declarations in nested
(SCSS/LESS) blocks.

<ruleset>
    <selector/> {
        <declaration/>
        <selector/> {
            <declaration/>
        }
        <declaration/>
    }
</ruleset>

This is not a tokenizer. Blocks are found by counting braces, so braces inside strings
or comments are counted as well.
"""

from __future__ import annotations
import re

from cssvendor import log
from cssvendor.css.declaration import Declaration

__all__ = ["Scanner", "extract", "MAX_DEPTH", "LINE_BREAKS"]

MAX_DEPTH = 32
# CSS treats a lone \r and a form feed as newlines too
LINE_BREAKS = "\r\n\f"
LINE = re.compile(f"[{LINE_BREAKS}]")
SELECTOR_BREAKS = LINE_BREAKS + ";}"

Span = tuple[int, int]


class Scanner:
    """Extracts declarations from the blocks of a stylesheet.

    Args
        max_depth (int): How deep blocks may be nested before they are skipped. Defaults to `32`.
    """

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        self.max_depth = max_depth

    @staticmethod
    def spans(text: str) -> list[Span]:
        """Top level balanced `{...}` blocks in the text.

        Returns
            List of `(start, end)` offsets where `text[start] == "{"` and `text[end - 1] == "}"`.
        """
        spans: list[Span] = []
        index = 0
        while index < len(text):
            depth = 0
            opened = -1
            for i in range(index, len(text)):
                char = text[i]
                if char == "{":
                    if depth == 0:
                        opened = i
                    depth += 1
                elif char == "}" and depth > 0:
                    depth -= 1
                    if depth == 0:
                        spans.append((opened, i + 1))
            if depth == 0:
                break
            # Unclosed block, look for balanced blocks just inside of it
            index = opened + 1
        return spans

    def extract(self, text: str) -> list[Declaration]:
        """All declarations in the text in source order, deduplicated by their raw text.

        Text without any blocks, like a bare list of declarations, is read as a single block.
        """
        seen: set[str] = set()
        result: list[Declaration] = []
        blocks = [text[start + 1 : end - 1] for start, end in self.spans(text)]
        if len(blocks) == 0 and "{" not in text:
            blocks = [text]
        for block in blocks:
            for decl in self._block_(block, 1):
                if decl.raw not in seen:
                    seen.add(decl.raw)
                    result.append(decl)
        return result

    def _block_(self, inner: str, depth: int) -> list[Declaration]:
        if depth > self.max_depth:
            log.warn(f"Blocks nested deeper than {self.max_depth} levels were skipped")
            return []

        decls: list[Declaration] = []
        previous = 0
        for start, end in self.spans(inner):
            # The text right before a nested block is its selector
            segment = inner[previous:start]
            cut = max(segment.rfind(c) for c in SELECTOR_BREAKS)
            decls.extend(self._lines_(segment[: cut + 1] if cut >= 0 else ""))
            decls.extend(self._block_(inner[start + 1 : end - 1], depth + 1))
            previous = end
        decls.extend(self._lines_(inner[previous:]))
        return decls

    @staticmethod
    def _lines_(segment: str) -> list[Declaration]:
        return [
            decl
            for line in LINE.split(segment)
            if line.strip() != "" and (decl := Declaration.parse(line)) is not None
        ]


_default_ = Scanner()


def extract(text: str) -> list[Declaration]:
    """Extract declarations with the default scanner."""
    return _default_.extract(text)
