"""Command-line entry point: print the character count of every section."""

import argparse
import json
import logging
import sys
from typing import Optional

from . import __version__, config
from .parser import ParseError, parse
from .report import report_dict, report_lines

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sectioncount",
        description="Count the characters of each section in a bracketed section document.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Document file to read (default: standard input, also '-')",
    )
    parser.add_argument("--json", action="store_true", help="Emit the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


class _Fatal(Exception):
    """Input could not be acquired; the message is shown as is."""


def read_input(path: Optional[str]) -> str:
    """Read the whole document from ``path`` or from stdin."""
    if path is None or path == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise _Fatal("error: can't read a string from stdin") from e

    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise _Fatal(f"error: can't open a file {path}") from e


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging("DEBUG" if args.verbose else None)

    try:
        text = read_input(args.path)
        document = parse(text)
    except _Fatal as e:
        logger.debug("Input failure", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"error: failed to parse: {e.msg}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report_dict(document), indent=2, ensure_ascii=False))
    else:
        for line in report_lines(document):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
