"""Resolution of `~` import paths.

Bundlers let `@import "~package/file"` refer to `node_modules`. Compilers without that
convention need the path rewritten to something they can find.
"""
from __future__ import annotations

import re
from pathlib import Path

from cssvendor import log

__all__ = ["TildeResolver", "IMPORT"]

IMPORT = re.compile(
    r"^\s*@(?P<rule>import|use|forward)\s*(?P<kind>url|reference|inline)?[\"';\s(]+?"
    r"(?P<path>~[^'\";\s)]+)[\"';\s)]+?.*$"
)
TILDE = re.compile(r"^~/?")


class TildeResolver:
    """Rewrites `~` import paths to `node_modules` relative paths or to absolute project paths.

    Args
        project_dir (str | Path): The directory holding `node_modules`.
    """

    def __init__(self, project_dir: str | Path) -> None:
        self.project_dir = Path(project_dir)

    @staticmethod
    def is_valid(path: Path, ext: str) -> bool:
        """Whether the path points to a stylesheet, given with or without extension or as a partial."""
        return (
            path.is_file()
            or path.with_name(f"{path.name}.{ext}").is_file()
            or path.with_name(f"_{path.name}.{ext}").is_file()
        )

    def with_node(self, path: str, ext: str) -> str | None:
        """The path without its `~` if it exists inside of `node_modules`."""
        modules = self.project_dir / "node_modules"
        if not modules.is_dir():
            return None
        relative = TILDE.sub("", path)
        if self.is_valid(modules / relative, ext):
            return relative
        return None

    def with_root(self, path: str, ext: str) -> str | None:
        """The absolute path inside of the project if it exists there."""
        absolute = self.project_dir / TILDE.sub("", path)
        if self.is_valid(absolute, ext):
            return absolute.as_posix()
        return None

    def resolve(self, text: str, ext: str) -> str:
        """Rewrite every resolvable `~` import in the text."""
        for line in text.split("\n"):
            if line.lstrip().startswith("//"):
                continue
            if (match := IMPORT.match(line)) is None or match.group("kind") == "url":
                continue

            path = match.group("path")
            if (resolved := self.with_node(path, ext) or self.with_root(path, ext)) is None:
                log.warn(f"Could not resolve import {path!r}")
                continue
            text = text.replace(line, line.replace(path, resolved))
            log.info(f"Resolved import {path!r} to {resolved!r}")
        return text
