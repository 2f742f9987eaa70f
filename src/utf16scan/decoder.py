"""LineDecoder — streaming UTF-16 line decoding."""

from __future__ import annotations

import logging

from utf16scan._utils import (
    DEFAULT_FALLBACK_ORDER,
    DEFAULT_MAX_LINE_BYTES,
    _validate_positive,
)
from utf16scan.enums import ByteOrder
from utf16scan.pipeline import Outcome
from utf16scan.pipeline.decode import decode_line
from utf16scan.pipeline.orchestrator import new_state, split_line

# A CR/LF pair split across reads leaves at most this many terminator bytes
# at the end of the buffer.
_PENDING_TERMINATOR = 4


class LineTooLongError(ValueError):
    """A line body outgrew the configured limit.

    *lines* holds the lines completed before the offending one, in stream
    order, so a caller can still hand them on before giving up.
    """

    def __init__(self, msg: str, lines: list[str] | None = None) -> None:
        super().__init__(msg)
        self.lines = lines if lines is not None else []


class LineDecoder:
    """Incremental UTF-16 line decoder.

    Implements a feed/close pattern: bytes go in as they arrive, decoded
    lines come out as soon as their newline has been seen.

    .. code::

            decoder = LineDecoder()
            for chunk in chunks:
                for line in decoder.feed(chunk):
                    handle(line)
            for line in decoder.close():
                handle(line)

    """

    def __init__(
        self,
        byte_order: ByteOrder | str | None = None,
        fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
        max_line_bytes: int = DEFAULT_MAX_LINE_BYTES,
    ) -> None:
        """Initialize the decoder.

        :param byte_order: Byte order of the stream if known.  ``None`` (the
            default) detects it from a BOM or from the first newline.
        :param fallback: Byte order assumed if the stream ends without
            revealing its own.
        :param max_line_bytes: Longest line body accepted, in bytes,
            terminator excluded.
        """
        _validate_positive("max_line_bytes", max_line_bytes)
        self.logger = logging.getLogger(__name__)
        self._byte_order = byte_order
        self._fallback = fallback
        self._max_line_bytes = max_line_bytes
        self._state = new_state(byte_order, fallback)
        self._buffer = bytearray()
        self._closed = False
        self._lines_decoded = 0

    def feed(self, byte_str: bytes | bytearray) -> list[str]:
        """Feed the next chunk of the stream.

        :param byte_str: The next chunk of bytes, in stream order.
        :returns: The lines completed by this chunk, possibly none.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        :raises LineTooLongError: If a line body is longer than
            *max_line_bytes*.  Lines completed earlier in the same chunk are
            carried on the exception.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        self._buffer.extend(byte_str)
        lines = self._drain(at_eof=False)
        if len(self._buffer) - _PENDING_TERMINATOR > self._max_line_bytes:
            raise LineTooLongError(self._too_long_message(), lines)
        return lines

    def close(self) -> list[str]:
        """Flush the final, unterminated line if any.

        :returns: The remaining lines.  Empty on repeated calls.
        :raises LineTooLongError: If the final line body is longer than
            *max_line_bytes*.
        """
        if self._closed:
            return []
        self._closed = True
        lines = self._drain(at_eof=True)
        self.logger.debug(
            "closed after %d lines, byte order %s",
            self._lines_decoded,
            self._state.byte_order.name,
        )
        return lines

    def reset(self) -> None:
        """Reset the decoder to its initial state for reuse."""
        self._state = new_state(self._byte_order, self._fallback)
        self._buffer = bytearray()
        self._closed = False
        self._lines_decoded = 0

    def _drain(self, at_eof: bool) -> list[str]:
        lines: list[str] = []
        while True:
            result = split_line(self._buffer, at_eof, self._state)
            if result.line is not None and len(result.line) > self._max_line_bytes:
                raise LineTooLongError(self._too_long_message(), lines)
            if result.advance:
                del self._buffer[: result.advance]
            if result.line is not None:
                lines.append(decode_line(result.line, self._state.byte_order))
                self._lines_decoded += 1
            if result.outcome in (Outcome.NEED_MORE, Outcome.FINAL):
                return lines

    def _too_long_message(self) -> str:
        return f"line exceeds {self._max_line_bytes} bytes"

    @property
    def byte_order(self) -> ByteOrder:
        """The byte order resolved so far, UNKNOWN until there is evidence."""
        return self._state.byte_order

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called since the last reset."""
        return self._closed

    @property
    def lines_decoded(self) -> int:
        """Number of lines emitted since the last reset."""
        return self._lines_decoded
