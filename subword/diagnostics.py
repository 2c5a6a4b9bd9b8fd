"""Debug diagnostics written to stderr when SUBWORD_DEBUG is set."""

from __future__ import annotations

import os
import sys
from typing import Any


def debug_enabled() -> bool:
    return os.environ.get("SUBWORD_DEBUG", "").strip() not in {"", "0"}


def debug(event: str, **fields: Any) -> None:
    """Print a ``[subword] event key=value ...`` line to stderr if debugging is on."""
    if not debug_enabled():
        return
    parts = [event]
    parts.extend(f"{key}={value}" for key, value in fields.items())
    print(f"[subword] {' '.join(parts)}", file=sys.stderr)
