"""Internal shared utilities for utf16scan."""

from __future__ import annotations

from utf16scan.enums import ByteOrder

#: Order assumed when a stream ends without a BOM, newline or trailing CR
#: revealing its byte order.  UTF-16 without a BOM is big-endian by convention.
DEFAULT_FALLBACK_ORDER: ByteOrder = ByteOrder.BIG

#: Default number of bytes requested from a source per read.
DEFAULT_CHUNK_SIZE: int = 4096

#: Default limit on the unterminated bytes buffered while looking for a newline.
DEFAULT_MAX_LINE_BYTES: int = 65_536

_BYTE_ORDER_NAMES: dict[str, ByteOrder] = {
    "big": ByteOrder.BIG,
    "be": ByteOrder.BIG,
    "utf-16-be": ByteOrder.BIG,
    "little": ByteOrder.LITTLE,
    "le": ByteOrder.LITTLE,
    "utf-16-le": ByteOrder.LITTLE,
}


def _resolve_byte_order(byte_order: ByteOrder | str | None) -> ByteOrder:
    """Normalize a caller-supplied byte order; ``None`` means detect it."""
    if byte_order is None:
        return ByteOrder.UNKNOWN
    if isinstance(byte_order, ByteOrder):
        return byte_order
    if isinstance(byte_order, str):
        resolved = _BYTE_ORDER_NAMES.get(byte_order.lower())
        if resolved is not None:
            return resolved
    msg = f"unknown byte order: {byte_order!r}"
    raise ValueError(msg)


def _validate_fallback(fallback: ByteOrder | str) -> ByteOrder:
    """Return *fallback* as a concrete byte order or raise ValueError."""
    resolved = _resolve_byte_order(fallback)
    if resolved is ByteOrder.UNKNOWN:
        msg = "fallback byte order must be big or little"
        raise ValueError(msg)
    return resolved


def _validate_positive(name: str, value: int) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)
