"""subword - CamelCase and snake_case aware cursor motions."""

from .scanner import (
    CharCategory,
    Direction,
    InvalidCountError,
    ScanResult,
    Subword,
    find_next_end,
    find_next_start,
    find_prev_end,
    find_prev_start,
    iter_subwords,
    scan,
    split_subwords,
)

__version__ = "0.1.0"

__all__ = [
    "CharCategory",
    "Direction",
    "InvalidCountError",
    "ScanResult",
    "Subword",
    "find_next_end",
    "find_next_start",
    "find_prev_end",
    "find_prev_start",
    "iter_subwords",
    "scan",
    "split_subwords",
]
