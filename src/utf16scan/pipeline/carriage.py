"""Stage 3: trailing carriage return removal."""

from __future__ import annotations

from utf16scan.enums import ByteOrder

_CARRIAGE_RETURNS: dict[ByteOrder, bytes] = {
    ByteOrder.BIG: b"\x00\r",
    ByteOrder.LITTLE: b"\r\x00",
}


def trim_carriage_return(line: bytes, byte_order: ByteOrder) -> bytes:
    """Drop one trailing CR code unit encoded in *byte_order*.

    An UNKNOWN order leaves the line untouched.
    """
    cr = _CARRIAGE_RETURNS.get(byte_order)
    if cr is not None and line.endswith(cr):
        return line[: -len(cr)]
    return line


def infer_byte_order(line: bytes) -> ByteOrder:
    """Guess the byte order from which CR pattern would trim *line*.

    Weaker evidence than a newline, used only when a stream ends before any
    other clue was seen.
    """
    for byte_order in (ByteOrder.LITTLE, ByteOrder.BIG):
        if len(trim_carriage_return(line, byte_order)) != len(line):
            return byte_order
    return ByteOrder.UNKNOWN
