"""Command-line control of Govee lights over the legacy and OpenAPI backends."""
from __future__ import annotations

__version__ = "0.1.0"
