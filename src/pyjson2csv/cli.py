"""Command line entry point: ``pyjson2csv INPUT -f PATH[=HEADER] ...``."""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from typing import IO, Any

from pyjson2csv import convert
from pyjson2csv._constants import DEFAULT_DELIMITER
from pyjson2csv._errors import ConversionError
from pyjson2csv.schema import Field, Options

logger = logging.getLogger(__name__)


def parse_delimiter(s: str) -> str:
    """Parse delimiter from CLI; support \\t for tab."""
    if s == "\\t" or s == "tab":
        return "\t"
    return s


def parse_field(spec: str) -> Field:
    """Parse ``PATH`` or ``PATH=HEADER`` into a :class:`Field`."""
    path, sep, header = spec.partition("=")
    if not path:
        raise argparse.ArgumentTypeError(f"invalid field {spec!r}: empty path")
    return Field(path=path, header=header if sep else "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyjson2csv",
        description="Convert a JSON array of objects to CSV, one row per element of a nested array.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input JSON file path or '-' for stdin.")
    parser.add_argument(
        "-f",
        "--field",
        dest="fields",
        action="append",
        type=parse_field,
        required=True,
        metavar="PATH[=HEADER]",
        help="Output column; repeat for each column. Mark the flattened array with [*], e.g. items[*].id.",
    )
    parser.add_argument("-o", "--output", default="-", help="Output CSV file path or '-' for stdout.")
    parser.add_argument(
        "-d", "--delimiter", default=DEFAULT_DELIMITER, help="Field delimiter (use \\t or 'tab' for tab)."
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write the header row.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def _run(args: argparse.Namespace) -> None:
    options = Options(
        fields=tuple(args.fields),
        delimiter=parse_delimiter(args.delimiter),
        add_header=not args.no_header,
    )
    with contextlib.ExitStack() as stack:
        if args.input == "-":
            source: IO[Any] = sys.stdin.buffer
        else:
            source = stack.enter_context(open(args.input, "rb"))
        if args.output == "-":
            sink: IO[str] = sys.stdout
        else:
            sink = stack.enter_context(open(args.output, "w", newline="", encoding="utf-8"))
        result = convert(source, sink, options)
    logger.info("wrote %d rows from %d records", result.rows, result.records)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _run(args)
    except ConversionError as exc:
        logger.debug("conversion failed: %s", exc.internal())
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
