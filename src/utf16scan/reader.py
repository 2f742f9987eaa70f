"""Pull-style line readers over files, chunk iterables and async streams."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import BinaryIO

from utf16scan._utils import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_FALLBACK_ORDER,
    DEFAULT_MAX_LINE_BYTES,
    _validate_positive,
)
from utf16scan.decoder import LineDecoder, LineTooLongError
from utf16scan.enums import ByteOrder

Source = BinaryIO | Iterable[bytes]


def _iter_chunks(source: Source, chunk_size: int) -> Iterator[bytes]:
    """Yield the chunks of *source*, reading *chunk_size* bytes at a time from files."""
    read = getattr(source, "read", None)
    if read is None:
        yield from source
        return
    while True:
        chunk = read(chunk_size)
        if not chunk:
            return
        yield chunk


def _decode_chunks(decoder: LineDecoder, chunks: Iterable[bytes]) -> Iterator[str]:
    try:
        for chunk in chunks:
            yield from decoder.feed(chunk)
        yield from decoder.close()
    except LineTooLongError as e:
        yield from e.lines
        raise


class LineReader:
    """Iterate over the decoded lines of a UTF-16 byte source.

    *source* is a binary file object or any iterable of ``bytes`` chunks.
    Errors raised while reading it are not caught; they end the iteration.
    A reader consumes its source and can be iterated only once.
    """

    def __init__(  # noqa: PLR0913
        self,
        source: Source,
        byte_order: ByteOrder | str | None = None,
        *,
        fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
    ) -> None:
        _validate_positive("chunk_size", chunk_size)
        self._source = source
        self._chunk_size = chunk_size
        self._iterated = False
        self._decoder = LineDecoder(
            byte_order=byte_order, fallback=fallback, max_line_bytes=max_line_bytes
        )

    def __iter__(self) -> Iterator[str]:
        if self._iterated:
            msg = "LineReader can only be iterated once"
            raise ValueError(msg)
        self._iterated = True
        return _decode_chunks(
            self._decoder, _iter_chunks(self._source, self._chunk_size)
        )

    @property
    def byte_order(self) -> ByteOrder:
        """The byte order resolved so far."""
        return self._decoder.byte_order


def iter_lines(
    source: Source,
    byte_order: ByteOrder | str | None = None,
    *,
    fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
) -> Iterator[str]:
    """Yield the decoded lines of *source* one at a time, in stream order."""
    return iter(
        LineReader(
            source,
            byte_order,
            fallback=fallback,
            chunk_size=chunk_size,
            max_line_bytes=max_line_bytes,
        )
    )


async def aiter_lines(
    async_chunks: AsyncIterable[bytes],
    byte_order: ByteOrder | str | None = None,
    *,
    fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
    max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
) -> AsyncIterator[str]:
    """Decode lines from an async stream of byte chunks.

    Args:
        async_chunks: Async iterable yielding bytes chunks in stream order.
        byte_order: Byte order of the stream if known.
        fallback: Byte order assumed if the stream never reveals its own.
        max_line_bytes: Longest line body accepted, in bytes.

    Yields:
        str: Decoded lines
    """
    decoder = LineDecoder(
        byte_order=byte_order, fallback=fallback, max_line_bytes=max_line_bytes
    )
    try:
        async for chunk in async_chunks:
            for line in decoder.feed(chunk):
                yield line
        for line in decoder.close():
            yield line
    except LineTooLongError as e:
        for line in e.lines:
            yield line
        raise
