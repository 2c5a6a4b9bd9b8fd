"""Sub-word text object (inner / around sub-word)."""

from __future__ import annotations

from ..scanner import find_next_end, subword_at, validate_count
from .common import offset_to_position, position_to_offset
from .types import MotionType, Range


def get_subword_object(
    text: str, row: int, col: int, around: bool = False, count: int = 1
) -> Range | None:
    """Get the range of the sub-word under the cursor.

    Args:
        text: Buffer text.
        row: Cursor row.
        col: Cursor column.
        around: Also take the underscores that delimit the sub-word, trailing
            ones first, leading ones if there are none trailing.
        count: Number of sub-words to cover, starting with the one under the
            cursor.

    Returns:
        Inclusive charwise range, or None if the cursor is not on a sub-word.
    """
    validate_count(count)
    offset = position_to_offset(text, row, col)
    word = subword_at(text, offset)
    if word is None:
        return None

    start, last = word.start, word.last
    for _ in range(count - 1):
        next_last = find_next_end(text, last)
        if next_last is None:
            break
        last = next_last

    if around:
        trailing = last
        while trailing + 1 < len(text) and text[trailing + 1] == "_":
            trailing += 1
        if trailing != last:
            last = trailing
        else:
            while start > 0 and text[start - 1] == "_":
                start -= 1

    return Range(
        offset_to_position(text, start),
        offset_to_position(text, last),
        MotionType.CHARWISE,
        inclusive=True,
    )
