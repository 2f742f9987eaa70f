"""Line scanning stages and shared types."""

from __future__ import annotations

import dataclasses
import enum

from utf16scan._utils import DEFAULT_FALLBACK_ORDER
from utf16scan.enums import ByteOrder


class Outcome(enum.Enum):
    """What a single call of the line splitter produced."""

    NEED_MORE = "need_more"
    MARK = "mark"
    LINE = "line"
    FINAL = "final"


@dataclasses.dataclass(frozen=True, slots=True)
class ScanResult:
    """Tagged result of one :func:`~utf16scan.pipeline.orchestrator.split_line` call.

    *advance* is the number of bytes the caller must drop from the front of
    its buffer.  *line* holds the raw line body, newline and trailing
    carriage return already removed, or ``None`` when nothing is emitted.
    """

    outcome: Outcome
    advance: int
    line: bytes | None


@dataclasses.dataclass(slots=True)
class ScannerState:
    """Per-stream mutable state for the line splitter.

    Owned by the caller and passed into every splitter call.  Independent
    streams each need their own instance.
    """

    byte_order: ByteOrder = ByteOrder.UNKNOWN
    check_bom: bool = True
    fallback: ByteOrder = DEFAULT_FALLBACK_ORDER


NEED_MORE = ScanResult(outcome=Outcome.NEED_MORE, advance=0, line=None)
END_OF_STREAM = ScanResult(outcome=Outcome.FINAL, advance=0, line=None)
