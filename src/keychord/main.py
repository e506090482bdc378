"""Top-level CLI entrypoint dispatcher."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from . import __version__, cli
from .notation import normalize, parse
from .sequence import parse_sequence
from .tui import run_tui

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keychord")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    normalize_cmd = sub.add_parser("normalize", help="print the canonical form of each key")
    normalize_cmd.add_argument("keys", nargs="+", metavar="KEY")

    parse_cmd = sub.add_parser("parse", help="print each key as JSON")
    parse_cmd.add_argument("keys", nargs="+", metavar="KEY")

    split_cmd = sub.add_parser("split", help="print the notation units of TEXT")
    split_cmd.add_argument("text", metavar="TEXT")

    sub.add_parser("shell", help="interactive notation shell")
    sub.add_parser("inspect", help="show the notation of pressed keys (default)")
    return parser


def _run_normalize(keys: Sequence[str]) -> int:
    status = 0
    for key in keys:
        result = normalize(key)
        if result.ok:
            print(result.value)
        else:
            print(result.value.message, file=sys.stderr)
            status = 1
    return status


def _run_parse(keys: Sequence[str]) -> int:
    status = 0
    for key in keys:
        result = parse(key)
        print(json.dumps(result.value.as_dict()))
        if not result.ok:
            status = 1
    return status


def _run_split(text: str) -> int:
    for token in parse_sequence(text):
        print(json.dumps(token))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("running command %s", args.command or "inspect")

    if args.command == "normalize":
        return _run_normalize(args.keys)
    if args.command == "parse":
        return _run_parse(args.keys)
    if args.command == "split":
        return _run_split(args.text)
    if args.command == "shell":
        cli.main()
        return 0

    run_tui()
    return 0


if __name__ == "__main__":
    sys.exit(main())
