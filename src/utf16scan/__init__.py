"""Incremental UTF-16 line scanner with automatic byte-order detection."""

from __future__ import annotations

from utf16scan._utils import DEFAULT_FALLBACK_ORDER
from utf16scan.decoder import LineDecoder, LineTooLongError
from utf16scan.enums import ByteOrder
from utf16scan.pipeline.orchestrator import scan_utf16_lines
from utf16scan.reader import LineReader, aiter_lines, iter_lines

__version__ = "1.0.0"
__all__ = [
    "ByteOrder",
    "LineDecoder",
    "LineReader",
    "LineTooLongError",
    "aiter_lines",
    "decode_lines",
    "iter_lines",
    "scan_utf16_lines",
]


def decode_lines(
    byte_str: bytes | bytearray,
    byte_order: ByteOrder | str | None = None,
    fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
) -> list[str]:
    """Decode every line of a complete UTF-16 byte string.

    The whole input is treated as one stream: a leading BOM is honoured and
    the final line is returned even without a newline.
    """
    decoder = LineDecoder(
        byte_order=byte_order, fallback=fallback, max_line_bytes=max(len(byte_str), 1)
    )
    return decoder.feed(byte_str) + decoder.close()
