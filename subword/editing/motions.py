"""Sub-word motions in (text, row, col) form.

These wrap the offset-based scanner for hosts that track the cursor as a
row/column pair. Every motion accepts the same arguments as the word motions
it complements, plus an optional repeat count.
"""

from __future__ import annotations

from ..scanner import Direction, scan
from .common import offset_to_position, position_to_offset
from .types import MotionResult, MotionType, Position, Range


def _scan_from(
    text: str, row: int, col: int, direction: Direction, count: int
) -> tuple[Position, Position, bool]:
    offset = position_to_offset(text, row, col)
    result = scan(text, offset, direction, count)
    return offset_to_position(text, offset), offset_to_position(text, result.offset), result.clamped


def motion_subword(
    text: str, row: int, col: int, char: str | None = None, count: int = 1
) -> MotionResult:
    """Move to start of next sub-word."""
    start_pos, end_pos, clamped = _scan_from(text, row, col, Direction.NEXT_START, count)
    return MotionResult(
        position=end_pos,
        range=Range(start_pos, end_pos, MotionType.CHARWISE, inclusive=False),
        clamped=clamped,
    )


def motion_subword_back(
    text: str, row: int, col: int, char: str | None = None, count: int = 1
) -> MotionResult:
    """Move to start of previous sub-word."""
    end_pos, start_pos, clamped = _scan_from(text, row, col, Direction.PREV_START, count)
    return MotionResult(
        position=start_pos,
        range=Range(start_pos, end_pos, MotionType.CHARWISE, inclusive=False),
        clamped=clamped,
    )


def motion_subword_end(
    text: str, row: int, col: int, char: str | None = None, count: int = 1
) -> MotionResult:
    """Move to end of current/next sub-word.

    The range is inclusive and its end is the sub-word's last character, so
    an operator covers the whole sub-word even at the end of the buffer.
    """
    start_pos, end_pos, clamped = _scan_from(text, row, col, Direction.NEXT_END, count)
    return MotionResult(
        position=end_pos,
        range=Range(start_pos, end_pos, MotionType.CHARWISE, inclusive=True),
        clamped=clamped,
    )


def motion_subword_end_back(
    text: str, row: int, col: int, char: str | None = None, count: int = 1
) -> MotionResult:
    """Move to end of previous sub-word."""
    end_pos, start_pos, clamped = _scan_from(text, row, col, Direction.PREV_END, count)
    return MotionResult(
        position=start_pos,
        range=Range(start_pos, end_pos, MotionType.CHARWISE, inclusive=True),
        clamped=clamped,
    )
