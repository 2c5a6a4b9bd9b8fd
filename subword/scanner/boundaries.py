"""Sub-word boundary search.

Single-step finders return ``None`` when no boundary exists in the requested
direction. ``scan`` repeats a finder ``count`` times and clamps to the buffer
edge instead of failing.

All finders exclude a match at the starting offset, so repeating a single
step N times is the same as one scan with ``count=N``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .classify import classify, is_subword_end, is_subword_start
from .exceptions import InvalidCountError
from .types import Direction, ScanResult, Subword

BoundaryFinder = Callable[[str, int], "int | None"]


def find_next_start(stream: str, offset: int) -> int | None:
    """Find the smallest offset greater than offset that starts a sub-word."""
    pos = max(offset + 1, 0)
    while pos < len(stream):
        if is_subword_start(stream, pos):
            return pos
        pos += 1
    return None


def find_prev_start(stream: str, offset: int) -> int | None:
    """Find the largest offset less than offset that starts a sub-word."""
    pos = min(offset - 1, len(stream) - 1)
    while pos >= 0:
        if is_subword_start(stream, pos):
            return pos
        pos -= 1
    return None


def find_next_end(stream: str, offset: int) -> int | None:
    """Find the smallest offset greater than offset that ends a sub-word.

    The end is inclusive: the returned offset is the sub-word's last
    character, never one past it. It can be used directly as the inclusive
    endpoint of a selection or deletion, including when the sub-word ends
    at the last character of the stream.
    """
    pos = max(offset + 1, 0)
    while pos < len(stream):
        if is_subword_end(stream, pos):
            return pos
        pos += 1
    return None


def find_prev_end(stream: str, offset: int) -> int | None:
    """Find the largest offset less than offset that ends a sub-word (inclusive)."""
    pos = min(offset - 1, len(stream) - 1)
    while pos >= 0:
        if is_subword_end(stream, pos):
            return pos
        pos -= 1
    return None


FINDERS: dict[Direction, BoundaryFinder] = {
    Direction.NEXT_START: find_next_start,
    Direction.PREV_START: find_prev_start,
    Direction.NEXT_END: find_next_end,
    Direction.PREV_END: find_prev_end,
}


def buffer_edge(stream: str, direction: Direction) -> int:
    """Offset a scan clamps to when it runs out of boundaries.

    Forward start scans stop one past the last character (a valid cursor
    rest), forward end scans stop on the last character, backward scans
    stop at 0.
    """
    if direction is Direction.NEXT_START:
        return len(stream)
    if direction is Direction.NEXT_END:
        return max(len(stream) - 1, 0)
    return 0


def validate_count(count: int) -> int:
    """Return count if it is a usable repeat count, raise InvalidCountError otherwise."""
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidCountError(count)
    return count


def scan(
    stream: str,
    offset: int,
    direction: Direction,
    count: int = 1,
) -> ScanResult:
    """Find the count-th sub-word boundary from offset in the given direction.

    Each step searches from the boundary found by the previous one. When a
    step finds nothing, the result is the buffer edge for the direction with
    ``clamped`` set. This holds for a partial run too: if only some of the
    count steps match (``steps < count``), the offset is the edge and not
    the last boundary that was matched.

    Args:
        stream: Text to scan.
        offset: Starting offset (the cursor).
        direction: Which boundary to look for.
        count: Number of steps, at least 1.

    Returns:
        ScanResult with the final offset and the number of matched steps.

    Raises:
        InvalidCountError: If count is not an integer >= 1.
    """
    validate_count(count)
    finder = FINDERS[direction]

    pos = offset
    for step in range(count):
        found = finder(stream, pos)
        if found is None:
            return ScanResult(
                offset=buffer_edge(stream, direction),
                direction=direction,
                steps=step,
                clamped=True,
            )
        pos = found
    return ScanResult(offset=pos, direction=direction, steps=count)


def next_start(stream: str, offset: int, count: int = 1) -> ScanResult:
    """Move to the start of the count-th next sub-word."""
    return scan(stream, offset, Direction.NEXT_START, count)


def prev_start(stream: str, offset: int, count: int = 1) -> ScanResult:
    """Move to the start of the count-th previous sub-word."""
    return scan(stream, offset, Direction.PREV_START, count)


def next_end(stream: str, offset: int, count: int = 1) -> ScanResult:
    """Move to the inclusive end of the count-th next sub-word."""
    return scan(stream, offset, Direction.NEXT_END, count)


def prev_end(stream: str, offset: int, count: int = 1) -> ScanResult:
    """Move to the inclusive end of the count-th previous sub-word."""
    return scan(stream, offset, Direction.PREV_END, count)


def subword_at(stream: str, offset: int) -> Subword | None:
    """Return the sub-word containing offset, or None on a separator."""
    if not 0 <= offset < len(stream) or classify(stream[offset]).is_separator:
        return None
    # Every identifier character belongs to exactly one sub-word, so both
    # walks stop before leaving the current token.
    start = offset
    while not is_subword_start(stream, start):
        start -= 1
    end = offset
    while not is_subword_end(stream, end):
        end += 1
    return Subword(start, end + 1, stream[start : end + 1])


def iter_subwords(stream: str) -> Iterator[Subword]:
    """Iterate over the sub-words of stream, left to right."""
    pos = find_next_start(stream, -1)
    while pos is not None:
        end = pos
        while not is_subword_end(stream, end):
            end += 1
        yield Subword(pos, end + 1, stream[pos : end + 1])
        pos = find_next_start(stream, end)


def split_subwords(stream: str) -> list[str]:
    """Split stream into its sub-word strings."""
    return [word.text for word in iter_subwords(stream)]
