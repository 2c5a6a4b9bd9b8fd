"""Core types for the sub-word boundary scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharCategory(Enum):
    """Category of a single character in a text stream."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    UNDERSCORE = "underscore"
    OTHER = "other"

    @property
    def is_separator(self) -> bool:
        """True for characters that never belong to a sub-word."""
        return self in (CharCategory.UNDERSCORE, CharCategory.OTHER)


class Direction(Enum):
    """Direction of a boundary scan."""

    NEXT_START = "next-start"
    PREV_START = "prev-start"
    NEXT_END = "next-end"
    PREV_END = "prev-end"


@dataclass(frozen=True)
class Subword:
    """A sub-word span in a text stream.

    ``end`` is exclusive, like a slice. ``last`` is the inclusive end, the
    offset ``find_next_end`` reports.
    """

    start: int
    end: int
    text: str

    @property
    def last(self) -> int:
        return self.end - 1

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ScanResult:
    """Result of a repeated boundary scan."""

    offset: int
    direction: Direction
    steps: int = 0  # Number of steps that found a boundary
    clamped: bool = False  # True if the scan ran out of boundaries

    @property
    def moved(self) -> bool:
        return self.steps > 0
