"""Stage 4: UTF-16 line decoding."""

from __future__ import annotations

from utf16scan.enums import CODEC_NAMES, ByteOrder

REPLACEMENT_CHARACTER = "\ufffd"


def decode_line(line: bytes | bytearray, byte_order: ByteOrder) -> str:
    """Decode the raw code units of one line.

    Unpaired surrogates decode to U+FFFD.  An odd trailing byte cannot form a
    code unit and also becomes U+FFFD.  Never raises for any byte content.

    :param line: Raw line body in the source encoding.
    :param byte_order: A resolved byte order, BIG or LITTLE.
    :returns: The decoded text.
    :raises ValueError: If *byte_order* is UNKNOWN.
    """
    codec = CODEC_NAMES.get(byte_order)
    if codec is None:
        msg = "byte order must be resolved before decoding"
        raise ValueError(msg)
    whole = len(line) - len(line) % 2
    text = bytes(line[:whole]).decode(codec, errors="replace")
    if whole != len(line):
        text += REPLACEMENT_CHARACTER
    return text
