"""
Command line front end: print a JSON document as a Python literal.

Usage:
    python -m litprint data.json
    curl -s https://api.example.com/items | python -m litprint --sort-keys --indent 2
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import json
import logging
import sys
from typing import Any, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import Printer
from .io import WriteError


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a JSON document as a Python literal", prog="python -m litprint"
    )
    parser.add_argument("file", nargs="?", default="-", help="JSON file to read (default: stdin)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Write fields equal to their default")
    parser.add_argument("--sort-keys", action="store_true", help="Sort dict keys instead of keeping document order")
    parser.add_argument(
        "--indent", type=indent_unit, default="4", help="Spaces per indentation level, or 'tab' (default: 4)"
    )
    parser.add_argument("--debug", action="store_true", help="Log debug messages to stderr")
    return parser


def indent_unit(text: str) -> str:
    """Parse an --indent value: a number of spaces or the word 'tab'."""
    if text == "tab":
        return "\t"
    try:
        width = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number of spaces or 'tab', got {text!r}") from None
    if width < 0:
        raise argparse.ArgumentTypeError(f"indent must not be negative, got {width}")
    return " " * width


def printer_from_args(args: argparse.Namespace) -> Printer:
    return Printer(indent=args.indent, sort_keys=args.sort_keys)


def load(path: str) -> Any:
    """Read and decode the JSON document at path, or stdin for '-'."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit status: 0 on success, 1 when the input cannot be read or decoded
        or stdout fails. Argument errors exit with status 2.
    """
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        document = load(args.file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        print(f"litprint: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    printer = printer_from_args(args)
    try:
        if args.verbose:
            printer.format_verbose(sys.stdout, document)
        else:
            printer.format(sys.stdout, document)
        sys.stdout.write("\n")
    except WriteError as exc:
        print(f"litprint: {exc} ({exc.written} written)", file=sys.stderr)
        return 1
    return 0
