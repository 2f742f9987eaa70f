from __future__ import annotations

import asyncio
import io
from collections.abc import AsyncIterator

import pytest

from utf16scan.decoder import LineTooLongError
from utf16scan.enums import ByteOrder
from utf16scan.reader import LineReader, aiter_lines, iter_lines

_DATA = b"\xff\xfe" + "first\r\nsecond\nthird".encode("utf-16-le")
_LINES = ["first", "second", "third"]


class _FailingStream(io.RawIOBase):
    """Serves *data* once, then raises on every read."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if self._data:
            data, self._data = self._data, b""
            return data
        msg = "device not ready"
        raise OSError(msg)


@pytest.mark.parametrize("chunk_size", [1, 3, 4096])
def test_reads_binary_file(chunk_size):
    reader = LineReader(io.BytesIO(_DATA), chunk_size=chunk_size)
    assert list(reader) == _LINES
    assert reader.byte_order is ByteOrder.LITTLE


def test_reads_chunk_iterable(split_into):
    assert list(iter_lines(split_into(_DATA, 5))) == _LINES


def test_reads_generator_of_chunks():
    chunks = (bytes([b]) for b in _DATA)
    assert list(iter_lines(chunks)) == _LINES


def test_reads_real_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes("x\ny\n".encode("utf-16-be"))
    with path.open("rb") as f:
        assert list(iter_lines(f, chunk_size=2)) == ["x", "y"]


def test_lines_are_lazy():
    lines = iter_lines(io.BytesIO(_DATA), chunk_size=2)
    assert next(lines) == "first"
    assert next(lines) == "second"


def test_empty_source():
    reader = LineReader(io.BytesIO(b""))
    assert list(reader) == []
    assert reader.byte_order is ByteOrder.UNKNOWN


def test_byte_order_before_iteration():
    assert LineReader(io.BytesIO(_DATA)).byte_order is ByteOrder.UNKNOWN
    assert LineReader(io.BytesIO(_DATA), "big").byte_order is ByteOrder.BIG


def test_fallback_option():
    data = "no newline".encode("utf-16-le")
    assert list(iter_lines(io.BytesIO(data), fallback="little")) == ["no newline"]


def test_read_fault_propagates_after_earlier_lines():
    lines = iter_lines(_FailingStream("ok\npartial".encode("utf-16-be")))
    assert next(lines) == "ok"
    with pytest.raises(OSError, match="device not ready"):
        next(lines)


def test_line_too_long():
    data = "x" * 100
    with pytest.raises(LineTooLongError):
        list(iter_lines(io.BytesIO(data.encode("utf-16-be")), max_line_bytes=64))


def test_line_too_long_yields_earlier_lines():
    data = "ok\n".encode("utf-16-be") + ("x" * 100).encode("utf-16-be")
    lines = iter_lines(io.BytesIO(data), max_line_bytes=64)
    assert next(lines) == "ok"
    with pytest.raises(LineTooLongError):
        next(lines)


def test_reader_iterates_once(split_into):
    reader = LineReader(split_into(_DATA, 4))
    assert list(reader) == _LINES
    with pytest.raises(ValueError, match="only be iterated once"):
        iter(reader)


@pytest.mark.parametrize("chunk_size", [0, -4])
def test_invalid_chunk_size(chunk_size):
    with pytest.raises(ValueError, match="chunk_size"):
        LineReader(io.BytesIO(_DATA), chunk_size=chunk_size)


async def _chunks(data: bytes, size: int) -> AsyncIterator[bytes]:
    for i in range(0, len(data), size):
        await asyncio.sleep(0)
        yield data[i : i + size]


async def _collect(source: AsyncIterator[bytes], **kwargs) -> list[str]:
    return [line async for line in aiter_lines(source, **kwargs)]


@pytest.mark.parametrize("chunk_size", [1, 7, 1024])
def test_aiter_lines(chunk_size):
    assert asyncio.run(_collect(_chunks(_DATA, chunk_size))) == _LINES


def test_aiter_lines_known_order():
    data = "a\nb".encode("utf-16-le")
    lines = asyncio.run(_collect(_chunks(data, 3), byte_order=ByteOrder.LITTLE))
    assert lines == ["a", "b"]


def test_aiter_lines_empty():
    assert asyncio.run(_collect(_chunks(b"", 4))) == []


async def _collect_until_error(source: AsyncIterator[bytes], **kwargs) -> list[str]:
    lines: list[str] = []
    with pytest.raises(LineTooLongError):
        async for line in aiter_lines(source, **kwargs):
            lines.append(line)
    return lines


def test_aiter_lines_yields_lines_before_overlong_one():
    data = "ok\n".encode("utf-16-le") + ("x" * 100).encode("utf-16-le")
    lines = asyncio.run(_collect_until_error(_chunks(data, 1024), max_line_bytes=64))
    assert lines == ["ok"]
