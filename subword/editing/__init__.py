"""Row/column adapters that let a text editing host use the sub-word scanner."""

from .common import offset_to_position, position_to_offset
from .motions import (
    motion_subword,
    motion_subword_back,
    motion_subword_end,
    motion_subword_end_back,
)
from .operators import OPERATORS, operator_delete, operator_yank
from .registry import MOTIONS
from .text_objects import get_subword_object
from .types import MotionFunc, MotionResult, MotionType, OperatorResult, Position, Range

__all__ = [
    # Types
    "MotionFunc",
    "MotionResult",
    "MotionType",
    "OperatorResult",
    "Position",
    "Range",
    # Offsets
    "offset_to_position",
    "position_to_offset",
    # Motions
    "MOTIONS",
    "motion_subword",
    "motion_subword_back",
    "motion_subword_end",
    "motion_subword_end_back",
    # Operators
    "OPERATORS",
    "operator_delete",
    "operator_yank",
    # Text objects
    "get_subword_object",
]
