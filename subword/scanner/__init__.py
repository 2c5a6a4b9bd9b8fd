"""Sub-word boundary scanner for CamelCase and snake_case identifiers."""

from .boundaries import (
    FINDERS,
    buffer_edge,
    find_next_end,
    find_next_start,
    find_prev_end,
    find_prev_start,
    iter_subwords,
    next_end,
    next_start,
    prev_end,
    prev_start,
    scan,
    split_subwords,
    subword_at,
    validate_count,
)
from .classify import classify, is_subword_end, is_subword_start
from .exceptions import InvalidCountError
from .types import CharCategory, Direction, ScanResult, Subword

__all__ = [
    # Types
    "CharCategory",
    "Direction",
    "ScanResult",
    "Subword",
    # Errors
    "InvalidCountError",
    # Classification
    "classify",
    "is_subword_end",
    "is_subword_start",
    # Single-step finders
    "FINDERS",
    "find_next_end",
    "find_next_start",
    "find_prev_end",
    "find_prev_start",
    # Repeated scans
    "buffer_edge",
    "next_end",
    "next_start",
    "prev_end",
    "prev_start",
    "scan",
    "validate_count",
    # Segmentation
    "iter_subwords",
    "split_subwords",
    "subword_at",
]
