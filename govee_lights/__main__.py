"""Allow running as ``python -m govee_lights``."""
from __future__ import annotations

import sys

from .cli import main

sys.exit(main())
