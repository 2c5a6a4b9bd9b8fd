"""Shared helpers for converting between cursor positions and buffer offsets."""

from __future__ import annotations

from .types import Position


def _normalize(text: str, row: int, col: int) -> tuple[list[str], int, int]:
    """Normalize text and cursor position."""
    lines = text.split("\n")
    if not lines:
        lines = [""]
    row = max(0, min(row, len(lines) - 1))
    col = max(0, min(col, len(lines[row])))
    return lines, row, col


def position_to_offset(text: str, row: int, col: int) -> int:
    """Convert a (row, col) cursor into an offset in text.

    The cursor is clamped into the buffer first, so the result is always in
    ``[0, len(text)]``.
    """
    lines, row, col = _normalize(text, row, col)
    return sum(len(line) + 1 for line in lines[:row]) + col


def offset_to_position(text: str, offset: int) -> Position:
    """Convert an offset in text into a (row, col) cursor."""
    offset = max(0, min(offset, len(text)))
    row = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(row, offset - line_start)
