"""Delete and yank operators over motion ranges."""

from __future__ import annotations

from .common import offset_to_position, position_to_offset
from .types import OperatorResult, Range


def _range_offsets(text: str, range_obj: Range) -> tuple[int, int]:
    """Convert a range into a half-open [start, end) offset span."""
    ordered = range_obj.ordered()
    start = position_to_offset(text, ordered.start.row, ordered.start.col)
    end = position_to_offset(text, ordered.end.row, ordered.end.col)
    if ordered.inclusive:
        end = min(end + 1, len(text))
    return start, end


def operator_yank(text: str, range_obj: Range) -> OperatorResult:
    """Copy the text covered by range without modifying the buffer."""
    start, end = _range_offsets(text, range_obj)
    return OperatorResult(
        text=text,
        cursor=offset_to_position(text, start),
        yanked=text[start:end],
    )


def operator_delete(text: str, range_obj: Range) -> OperatorResult:
    """Delete the text covered by range."""
    start, end = _range_offsets(text, range_obj)
    new_text = text[:start] + text[end:]
    return OperatorResult(
        text=new_text,
        cursor=offset_to_position(new_text, start),
        yanked=text[start:end],
    )


OPERATORS = {
    "d": operator_delete,
    "y": operator_yank,
}
