"""Types shared by the row/column motion adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class MotionType(Enum):
    """How an operator applies a motion's range."""

    CHARWISE = "charwise"


@dataclass(frozen=True, order=True)
class Position:
    """A cursor position (row, col) in a multi-line buffer."""

    row: int
    col: int


@dataclass(frozen=True)
class Range:
    """A span between two positions.

    When ``inclusive`` is True the character at ``end`` belongs to the range.
    """

    start: Position
    end: Position
    motion_type: MotionType = MotionType.CHARWISE
    inclusive: bool = False

    def ordered(self) -> Range:
        """Return the range with start <= end."""
        if self.end < self.start:
            return Range(self.end, self.start, self.motion_type, self.inclusive)
        return self


@dataclass(frozen=True)
class MotionResult:
    """Result of a motion: where the cursor goes and the range an operator would use."""

    position: Position
    range: Range | None = None
    clamped: bool = False  # True if no sub-word boundary was left to move to


@dataclass(frozen=True)
class OperatorResult:
    """Result of applying an operator to a range."""

    text: str
    cursor: Position
    yanked: str = ""


# Motion signature: (text, row, col, char) -> MotionResult
MotionFunc = Callable[[str, int, int, "str | None"], MotionResult]
