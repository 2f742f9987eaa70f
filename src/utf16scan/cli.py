"""Command-line interface for utf16scan."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

import utf16scan
from utf16scan._utils import (
    DEFAULT_FALLBACK_ORDER,
    DEFAULT_MAX_LINE_BYTES,
)
from utf16scan.enums import CODEC_NAMES
from utf16scan.reader import LineReader

_ORDER_CHOICES = ["big", "little"]


def _write_lines(reader: LineReader, out: BinaryIO) -> None:
    for line in reader:
        out.write(line.encode("utf-8") + b"\n")
    out.flush()


def _report_order(name: str, reader: LineReader) -> None:
    codec = CODEC_NAMES.get(reader.byte_order, "unknown")
    print(f"{name}: {codec}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Run the ``utf16lines`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Decode UTF-16 text files of any byte order to UTF-8 lines."
    )
    parser.add_argument("files", nargs="*", help="Files to decode")
    parser.add_argument(
        "-b",
        "--byte-order",
        default=None,
        choices=_ORDER_CHOICES,
        help="Byte order of the input (detected when omitted)",
    )
    parser.add_argument(
        "--fallback",
        default=DEFAULT_FALLBACK_ORDER.name.lower(),
        choices=_ORDER_CHOICES,
        help="Byte order assumed when the input gives no clue",
    )
    parser.add_argument(
        "--show-byte-order",
        action="store_true",
        help="Report the resolved byte order of each input on stderr",
    )
    parser.add_argument(
        "--max-line-bytes",
        type=int,
        default=DEFAULT_MAX_LINE_BYTES,
        help="Longest line accepted, in bytes",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"utf16scan {utf16scan.__version__}"
    )

    args = parser.parse_args(argv)

    if args.max_line_bytes < 1:
        parser.error("--max-line-bytes must be a positive integer")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    out = sys.stdout.buffer
    failed = False

    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    reader = LineReader(
                        f,
                        args.byte_order,
                        fallback=args.fallback,
                        max_line_bytes=args.max_line_bytes,
                    )
                    _write_lines(reader, out)
            except (OSError, utf16scan.LineTooLongError) as e:
                print(f"utf16lines: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            if args.show_byte_order:
                _report_order(filepath, reader)
    else:
        reader = LineReader(
            sys.stdin.buffer,
            args.byte_order,
            fallback=args.fallback,
            max_line_bytes=args.max_line_bytes,
        )
        try:
            _write_lines(reader, out)
        except utf16scan.LineTooLongError as e:
            print(f"utf16lines: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        if args.show_byte_order:
            _report_order("stdin", reader)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
