"""Line splitter: runs the BOM, newline and carriage return stages in order."""

from __future__ import annotations

import logging
from collections.abc import Callable

from utf16scan._utils import (
    DEFAULT_FALLBACK_ORDER,
    _resolve_byte_order,
    _validate_fallback,
)
from utf16scan.enums import ByteOrder
from utf16scan.pipeline import (
    END_OF_STREAM,
    NEED_MORE,
    Outcome,
    ScannerState,
    ScanResult,
)
from utf16scan.pipeline.bom import BOM_LENGTH, detect_bom
from utf16scan.pipeline.carriage import infer_byte_order, trim_carriage_return
from utf16scan.pipeline.newline import find_newline

logger = logging.getLogger(__name__)

SplitFunc = Callable[[bytes | bytearray, bool], ScanResult]
OrderFunc = Callable[[], ByteOrder]


def new_state(
    byte_order: ByteOrder | str | None = None,
    fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
) -> ScannerState:
    """Create the state for one stream.

    BOM detection is only armed when the caller does not know the byte order.
    """
    resolved = _resolve_byte_order(byte_order)
    return ScannerState(
        byte_order=resolved,
        check_bom=resolved is ByteOrder.UNKNOWN,
        fallback=_validate_fallback(fallback),
    )


def split_line(
    data: bytes | bytearray, at_eof: bool, state: ScannerState
) -> ScanResult:
    """Decide whether *data* holds a complete line.

    Safe to call again with the same unconsumed bytes plus newly read data
    appended; every advance is a whole number of code units, so newline
    parity stays aligned with the stream.

    :param data: Bytes buffered so far and not yet consumed.
    :param at_eof: True once the source has no more bytes.
    :param state: Per-stream state, updated in place.
    :returns: A :class:`ScanResult` telling the caller how many bytes to drop
        and which line body, if any, to emit.
    """
    if at_eof and not data:
        return END_OF_STREAM

    if state.check_bom:
        if len(data) < BOM_LENGTH and not at_eof:
            return NEED_MORE
        state.check_bom = False
        bom_order = detect_bom(data)
        if bom_order is not None:
            state.byte_order = bom_order
            logger.debug("byte order %s from byte-order mark", bom_order.name)
            return ScanResult(outcome=Outcome.MARK, advance=BOM_LENGTH, line=None)

    terminator = find_newline(data, state.byte_order)
    if terminator is not None:
        if state.byte_order is ByteOrder.UNKNOWN:
            logger.debug("byte order %s from newline", terminator.byte_order.name)
        state.byte_order = terminator.byte_order
        line = trim_carriage_return(bytes(data[: terminator.end]), state.byte_order)
        return ScanResult(outcome=Outcome.LINE, advance=terminator.advance, line=line)

    if at_eof:
        return _flush(data, state)

    return NEED_MORE


def _flush(data: bytes | bytearray, state: ScannerState) -> ScanResult:
    """Emit the unterminated remainder of the stream as the final line."""
    line = bytes(data)
    if state.byte_order is ByteOrder.UNKNOWN:
        inferred = infer_byte_order(line)
        if inferred is ByteOrder.UNKNOWN:
            state.byte_order = state.fallback
            logger.debug("no byte order evidence, using %s", state.fallback.name)
        else:
            state.byte_order = inferred
            logger.debug("byte order %s from trailing CR", inferred.name)
    return ScanResult(
        outcome=Outcome.FINAL,
        advance=len(data),
        line=trim_carriage_return(line, state.byte_order),
    )


def scan_utf16_lines(
    byte_order: ByteOrder | str | None = None,
    fallback: ByteOrder | str = DEFAULT_FALLBACK_ORDER,
) -> tuple[SplitFunc, OrderFunc]:
    """Build a split function for one UTF-16 stream.

    The returned ``split(data, at_eof)`` behaves like :func:`split_line` over
    a private :class:`ScannerState`; ``order()`` reports the byte order
    resolved so far (UNKNOWN until some evidence or the fallback applies).

    :param byte_order: The stream's byte order if already known, else
        ``None`` to detect it.
    :param fallback: Order used when the stream ends without any evidence.
    """
    state = new_state(byte_order, fallback)

    def split(data: bytes | bytearray, at_eof: bool) -> ScanResult:
        return split_line(data, at_eof, state)

    def order() -> ByteOrder:
        return state.byte_order

    return split, order
