import enum

from utf16scan.enums import BYTE_ORDER_MARKS, CODEC_NAMES, ByteOrder


def test_byte_order_is_int_enum():
    assert issubclass(ByteOrder, enum.IntEnum)


def test_byte_order_members_exist():
    assert set(ByteOrder.__members__.keys()) == {"UNKNOWN", "BIG", "LITTLE"}


def test_unknown_is_falsy():
    assert not ByteOrder.UNKNOWN
    assert ByteOrder.BIG
    assert ByteOrder.LITTLE


def test_codec_names_cover_resolved_orders():
    assert CODEC_NAMES == {
        ByteOrder.BIG: "utf-16-be",
        ByteOrder.LITTLE: "utf-16-le",
    }


def test_byte_order_marks_decode_to_feff():
    for byte_order, mark in BYTE_ORDER_MARKS.items():
        assert mark.decode(CODEC_NAMES[byte_order]) == "\ufeff"
