"""Enumerations for utf16scan."""

import enum


class ByteOrder(enum.IntEnum):
    """Byte order of the 16-bit code units in a UTF-16 stream."""

    UNKNOWN = 0
    BIG = 1
    LITTLE = 2


# Python codec used to decode each resolved byte order.
CODEC_NAMES: dict[ByteOrder, str] = {
    ByteOrder.BIG: "utf-16-be",
    ByteOrder.LITTLE: "utf-16-le",
}

# U+FEFF as it appears at the start of a stream in each byte order.
BYTE_ORDER_MARKS: dict[ByteOrder, bytes] = {
    ByteOrder.BIG: b"\xfe\xff",
    ByteOrder.LITTLE: b"\xff\xfe",
}
