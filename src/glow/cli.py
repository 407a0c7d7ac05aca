"""Command-line interface: highlight Clojure files to stdout.

Usage:
    glow src/app/core.clj
    cat core.clj | glow --max-matches 5000
    glow --no-color core.clj     # plain passthrough
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from glow.chain import highlight
from glow.colorscheme import DEFAULT_COLORSCHEME, NO_COLOR
from glow.config import HighlightConfig
from glow.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glow",
        description="Syntax-highlight Clojure source for the terminal",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Files to highlight (default: stdin)")
    parser.add_argument("--no-color", action="store_true", help="Emit source without colors")
    parser.add_argument(
        "--max-matches",
        type=int,
        default=None,
        metavar="N",
        help="Stop coloring after N spans per input",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = HighlightConfig(
            colorscheme=NO_COLOR if args.no_color else DEFAULT_COLORSCHEME,
            max_matches=args.max_matches,
        )
    except ValueError as e:
        print(f"glow: {e}", file=sys.stderr)
        return 2

    status = 0
    if not args.files:
        sys.stdout.write(highlight(sys.stdin.read(), config=config))
        return status

    for path in args.files:
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"glow: {path}: {e.strerror or e}", file=sys.stderr)
            status = 1
            continue
        except UnicodeDecodeError as e:
            print(f"glow: {path}: not valid UTF-8 ({e.reason} at byte {e.start})", file=sys.stderr)
            status = 1
            continue
        logger.debug("Highlighting %s", path)
        sys.stdout.write(highlight(source, config=config))
    return status


__all__ = ["build_parser", "main"]
