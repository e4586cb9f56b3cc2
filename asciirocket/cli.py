"""
cli.py

Responsibility: CLI entrypoint for asciirocket.

High-level flow:
1) Parse and validate `--height` / `--palette`
2) Render the rocket -> list of rows
3) Write the rows to stdout, one per line

Rendering lives in `renderer.py`; this module only orchestrates and reports.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from asciirocket import __version__
from asciirocket.errors import InvalidInput, RocketError
from asciirocket.renderer import DEFAULT_PALETTE, parse_height, render

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _setup_logging(level: str) -> None:
    # stdout carries the rocket; diagnostics go to stderr.
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr, force=True)


def _build_parser() -> argparse.ArgumentParser:
    # `-h` is taken by --height, so help is registered by hand.
    p = argparse.ArgumentParser(
        prog="rocket",
        description="Print an ASCII-art rocket of the requested height",
        add_help=False,
    )
    p.add_argument("-h", "--height", required=True, help="Rocket height in rows (positive integer)")
    p.add_argument(
        "-p",
        "--palette",
        default=DEFAULT_PALETTE,
        help=f"Color palette name (default: {DEFAULT_PALETTE}; currently has no effect)",
    )
    p.add_argument("--log-level", default="warning", choices=LOG_LEVELS, help="Log level (default: warning)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--help", action="help", help="Show this help message and exit")
    return p


def rocket_cmd(args: argparse.Namespace, *, out: TextIO) -> int:
    height = parse_height(args.height)
    rows = render(height, args.palette)
    out.write("".join(f"{row}\n" for row in rows))
    out.flush()
    logger.info("Rendered %d rows for height %d", len(rows), height)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    try:
        return rocket_cmd(args, out=sys.stdout)
    except InvalidInput as e:
        parser.error(str(e))
    except RocketError as e:
        print(f"rocket: error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
