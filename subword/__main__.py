"""Allow running as ``python -m subword``."""

import sys

from .cli import main

sys.exit(main())
