"""Substitutes the prefixed expansion of every declaration back into the stylesheet."""
from __future__ import annotations
import re

from cssvendor import log
from cssvendor.css.scanner import LINE_BREAKS, Scanner
from cssvendor.prefix.expand import Engine

__all__ = ["Rewriter"]


def _anchored_(raw: str) -> re.Pattern:
    """Occurrences of `raw` that span a whole line or block interior.

    The match has to start a line or follow `{`, `}` or `;`, and end a line or precede
    `{` or `}`. This keeps `display: flex;` from matching the tail of an already expanded
    `  display: flex;`, and `order: 1;` from matching the head of `order: 1; /* x */`.
    """
    breaks = re.escape(LINE_BREAKS)
    return re.compile(f"(?<![^{breaks}{{}};])" + re.escape(raw) + f"(?![^{breaks}{{}}])")


class Rewriter:
    """Rewrites stylesheets with vendor prefixed declarations.

    Args
        engine (Engine | None): Decides the expansion of each declaration. Defaults to the built-in tables.
        scanner (Scanner | None): Finds the declarations. Defaults to a `Scanner` with default depth.
    """

    def __init__(self, engine: Engine | None = None, scanner: Scanner | None = None) -> None:
        self.engine = engine or Engine()
        self.scanner = scanner or Scanner()

    def rewrite(self, text: str) -> str:
        """Expand every recognized declaration in place.

        Each distinct raw declaration is rewritten once, which covers every place it
        appears verbatim. Text that is not a recognized declaration is left as is.
        """
        replaced: set[str] = set()
        for decl in self.scanner.extract(text):
            if decl.raw in replaced or decl.raw not in text:
                continue

            expanded = self.engine.expand(decl)
            if len(expanded) == 0:
                continue

            rendered = "\n".join(
                variant.with_template(decl.template).render() for variant in expanded
            )
            updated = decl.raw.replace(decl.render(), rendered)
            text, count = _anchored_(decl.raw).subn(lambda _: updated, text)
            if count == 0:
                continue
            replaced.add(decl.raw)
            log.info(f"{decl.property}: {decl.value} -> {len(expanded)} declarations ({count}x)")
        return text
