"""Asset pipeline filters.

An asset moves through every filter's load phase, then every filter's dump phase. Each
filter only touches assets whose source extension it knows, everything else passes
through unchanged.
"""
from __future__ import annotations

from pathlib import Path

from cssvendor import log
from cssvendor.config import PrefixConfig
from cssvendor.errors import FilterError
from cssvendor.minify import minify
from cssvendor.prefix.expand import Engine
from cssvendor.prefix.table import PrefixTable
from cssvendor.rewrite import Rewriter
from cssvendor.tilde import TildeResolver

__all__ = ["Asset", "Filter", "PrefixFilter", "MinifyFilter", "TildeFilter", "FilterChain"]


class Asset:
    """A text buffer and the path it was read from.

    Args
        content (str): The source text.
        source_path (str | Path | None): Where the content came from. Used to pick the filters that apply.
    """

    __slots__ = ("content", "source_path")

    def __init__(self, content: str, source_path: str | Path | None = None) -> None:
        self.content = content
        self.source_path = Path(source_path) if source_path is not None else None

    @staticmethod
    def from_path(path: str | Path) -> Asset:
        try:
            return Asset(Path(path).read_text(encoding="utf-8"), path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FilterError(f"Could not read {str(path)!r}: {exc}") from exc

    def write(self, path: str | Path | None = None):
        """Write the content back to `path`, or to the source path when no path is given."""
        target = Path(path) if path is not None else self.source_path
        if target is None:
            raise FilterError(f"{self!r} has no path to write to")
        try:
            target.write_text(self.content, encoding="utf-8")
        except OSError as exc:
            raise FilterError(f"Could not write {str(target)!r}: {exc}") from exc

    @property
    def extension(self) -> str | None:
        """Lowercase extension without the dot, if there is a source path with one."""
        if self.source_path is None or self.source_path.suffix == "":
            return None
        return self.source_path.suffix[1:].lower()

    def __repr__(self) -> str:
        return f"Asset({str(self.source_path)!r}, {len(self.content)} chars)"


class Filter:
    """Base filter. Subclasses override `load` and/or `dump` and list the extensions they handle."""

    load_extensions: frozenset[str] = frozenset()
    dump_extensions: frozenset[str] = frozenset()

    def filter_load(self, asset: Asset):
        if (ext := asset.extension) in self.load_extensions:
            asset.content = self.load(asset.content, ext)

    def filter_dump(self, asset: Asset):
        if (ext := asset.extension) in self.dump_extensions:
            asset.content = self.dump(asset.content, ext)

    def load(self, content: str, ext: str) -> str:
        return content

    def dump(self, content: str, ext: str) -> str:
        return content


class PrefixFilter(Filter):
    """Adds vendor prefixes to css, scss, and less.

    Args
        config (PrefixConfig | None): Overrides for the built-in prefix tables.
    """

    dump_extensions = frozenset({"css", "scss", "less"})

    def __init__(self, config: PrefixConfig | None = None) -> None:
        table = PrefixTable.from_config(config) if config is not None else PrefixTable()
        self.rewriter = Rewriter(Engine(table))

    def dump(self, content: str, ext: str) -> str:
        return self.rewriter.rewrite(content)


class MinifyFilter(Filter):
    """Minifies css and less, keeping license comments."""

    dump_extensions = frozenset({"css", "less"})

    def dump(self, content: str, ext: str) -> str:
        return minify(content)


class TildeFilter(Filter):
    """Resolves `~` imports in less, sass, and scss before compilation.

    Args
        project_dir (str | Path): The directory holding `node_modules`.
    """

    load_extensions = frozenset({"less", "sass", "scss"})

    def __init__(self, project_dir: str | Path) -> None:
        self.resolver = TildeResolver(project_dir)

    def load(self, content: str, ext: str) -> str:
        return self.resolver.resolve(content, ext)


class FilterChain:
    """Runs an asset through the load phase of every filter, then the dump phase."""

    def __init__(self, *filters: Filter) -> None:
        self.filters = list(filters)

    def run(self, asset: Asset) -> Asset:
        for _filter in self.filters:
            _filter.filter_load(asset)
        for _filter in self.filters:
            _filter.filter_dump(asset)
        log.info(f"Filtered {asset!r} with {len(self.filters)} filters")
        return asset
