"""Motion registry for sub-word motions."""

from __future__ import annotations

from .motions import (
    motion_subword,
    motion_subword_back,
    motion_subword_end,
    motion_subword_end_back,
)
from .types import MotionFunc

# Keyed by motion name; binding keys to these is up to the host
MOTIONS: dict[str, MotionFunc] = {
    "subword": motion_subword,
    "subword_back": motion_subword_back,
    "subword_end": motion_subword_end,
    "subword_end_back": motion_subword_end_back,
}
