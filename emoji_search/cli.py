"""Command line entry point for emoji lookups and icon generation."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from emoji_search.app.app import EmojiSearchApp
from emoji_search.app.services.icon_assets import generate_icons
from emoji_search.core import DatasetLoadError, EmojibaseLoader
from emoji_search.utils import configure_logging


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data",
        metavar="PATH",
        help="Emojibase-format emoji JSON (defaults to the bundled dataset).",
    )
    parser.add_argument(
        "--shortcodes",
        metavar="PATH",
        help="Hexcode to shortcode JSON mapping (defaults to the bundled table).",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides EMOJI_SEARCH_LOG_LEVEL).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emoji-search",
        description="Search emojis by name, tag, shortcode or emoticon.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser(
        "search",
        help="Print script-filter JSON for a query.",
    )
    search.add_argument(
        "query",
        nargs="*",
        help="Search terms; omit for the popular-emoji fallback list.",
    )
    _add_common_arguments(search)
    search.add_argument(
        "--icon-dir",
        metavar="DIR",
        help="Directory holding <hexcode>.svg icons to reference from each item.",
    )
    search.add_argument(
        "--compact",
        action="store_true",
        help="Emit JSON on a single line instead of indenting it.",
    )
    search.add_argument(
        "--explain",
        action="store_true",
        help="Print the per-field score breakdown instead of launcher items.",
    )

    icons = subparsers.add_parser(
        "icons",
        help="Generate SVG icons and an icon index for every emoji.",
    )
    icons.add_argument("out_dir", metavar="OUT_DIR", help="Output directory.")
    _add_common_arguments(icons)

    return parser


def _dump(payload: Any, *, compact: bool) -> None:
    json.dump(payload, sys.stdout, indent=None if compact else 2, ensure_ascii=False)
    sys.stdout.write("\n")


def _run_search(args: argparse.Namespace) -> int:
    app = EmojiSearchApp(args.data, args.shortcodes, icon_dir=args.icon_dir)
    query = " ".join(args.query)
    if args.explain:
        _dump(app.search_service.explain(query), compact=args.compact)
    else:
        _dump(app.search(query), compact=args.compact)
    return 0


def _run_icons(args: argparse.Namespace) -> int:
    records = EmojibaseLoader(args.data, args.shortcodes).load()
    written = generate_icons(records, args.out_dir)
    print(f"Generated {written} emoji icons in {args.out_dir}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, force=args.log_level is not None)

    try:
        if args.command == "icons":
            return _run_icons(args)
        return _run_search(args)
    except DatasetLoadError:
        # The loader has already logged the failure.
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
