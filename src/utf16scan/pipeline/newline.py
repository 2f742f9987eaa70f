"""Stage 2: newline detection by code-unit parity.

A newline is the code unit 0x000A.  Its 0x0A byte sits at an odd offset in
big-endian data (``00 0A``) and at an even offset in little-endian data
(``0A 00``).  The parity of a 0x0A byte together with a null neighbour
therefore reveals the byte order of a stream that carries no BOM.
"""

from __future__ import annotations

from typing import NamedTuple

from utf16scan.enums import ByteOrder

_NEWLINE = 0x0A


class Terminator(NamedTuple):
    """A newline found in the buffer."""

    byte_order: ByteOrder
    end: int
    advance: int


def find_newline(
    data: bytes | bytearray, byte_order: ByteOrder = ByteOrder.UNKNOWN
) -> Terminator | None:
    """Find the first newline code unit consistent with *byte_order*.

    *data* must start on a code-unit boundary.  With an UNKNOWN order both
    patterns are accepted and the first one in byte position wins.

    :param data: Buffered bytes, not yet consumed.
    :param byte_order: The order fixed so far, or UNKNOWN.
    :returns: The order the newline implies, the end of the line body and the
        number of bytes to consume, or ``None`` if no newline is complete yet.
    """
    size = len(data)
    pos = data.find(_NEWLINE)
    while pos >= 0:
        if pos % 2:
            if byte_order is not ByteOrder.LITTLE and data[pos - 1] == 0:
                return Terminator(ByteOrder.BIG, pos - 1, pos + 1)
        elif (
            byte_order is not ByteOrder.BIG and pos + 1 < size and data[pos + 1] == 0
        ):
            return Terminator(ByteOrder.LITTLE, pos, pos + 2)
        pos = data.find(_NEWLINE, pos + 1)
    return None
