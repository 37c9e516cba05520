from __future__ import annotations

import argparse
import sys

from conterm.pretty import Markup

from cssvendor import log
from cssvendor.config import PrefixConfig
from cssvendor.errors import CSSVendorError
from cssvendor.filters import Asset, FilterChain, MinifyFilter, PrefixFilter, TildeFilter


def build_chain(args: argparse.Namespace) -> FilterChain:
    config = PrefixConfig.from_path(args.config) if args.config else None
    filters = []
    if args.project_dir:
        filters.append(TildeFilter(args.project_dir))
    filters.append(PrefixFilter(config))
    if args.minify:
        filters.append(MinifyFilter())
    return FilterChain(*filters)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cssvendor",
        description="Add vendor prefixes to css, scss, and less files",
    )
    parser.add_argument("files", nargs="+", help="Stylesheets to prefix")
    parser.add_argument("-c", "--config", help="Json file with prefix overrides")
    parser.add_argument("--minify", action="store_true", help="Minify css and less output")
    parser.add_argument("--project-dir", help="Resolve ~ imports against this directory")
    parser.add_argument("-i", "--in-place", action="store_true", help="Write results back to the files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every expanded declaration")
    args = parser.parse_args(argv)

    log.configure(log.LogLevel.Info if args.verbose else log.LogLevel.Warn)

    try:
        chain = build_chain(args)
    except CSSVendorError as exc:
        log.error(str(exc))
        return 2

    failed = 0
    for path in args.files:
        try:
            asset = chain.run(Asset.from_path(path))
            if args.in_place:
                asset.write()
        except CSSVendorError as exc:
            log.error(str(exc))
            failed += 1
            continue

        if args.in_place:
            Markup.print(f"[green]prefixed[/fg] {path}", file=sys.stderr)
        else:
            sys.stdout.write(asset.content)
    return 1 if failed > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
