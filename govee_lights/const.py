"""Constants for the Govee light command line tools."""
from __future__ import annotations

ENV_API_KEY = "GOVEE_API_KEY"
ENV_LOG_LEVEL = "GOVEE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

PROG_NAME = "govee-lights"
DEFAULT_DEVICE_INDEX = 0
