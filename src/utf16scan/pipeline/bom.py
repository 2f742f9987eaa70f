"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from utf16scan.enums import BYTE_ORDER_MARKS, ByteOrder

BOM_LENGTH = 2


def detect_bom(data: bytes | bytearray) -> ByteOrder | None:
    """Check for a UTF-16 BOM at the start of data. Returns its order or None."""
    head = bytes(data[:BOM_LENGTH])
    for byte_order, mark in BYTE_ORDER_MARKS.items():
        if head == mark:
            return byte_order
    return None
