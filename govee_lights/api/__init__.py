"""Govee cloud API client package."""
from __future__ import annotations

from .client import GoveeApiClient
from .const import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    CAPABILITY_COLOR_SETTING,
    CAPABILITY_ON_OFF,
    CAPABILITY_RANGE,
    COLOR_TEMP_MAX,
    COLOR_TEMP_MIN,
    INSTANCE_BRIGHTNESS,
    INSTANCE_COLOR_RGB,
    INSTANCE_COLOR_TEMP,
    INSTANCE_POWER_SWITCH,
    LEGACY_BASE_URL,
    OPENAPI_BASE_URL,
    PROTOCOL_LEGACY,
    PROTOCOL_OPENAPI,
)
from .exceptions import (
    GoveeApiError,
    GoveeAuthError,
    GoveeConnectionError,
    GoveeRateLimitError,
)

__all__ = [
    # Client
    "GoveeApiClient",
    # Exceptions
    "GoveeApiError",
    "GoveeAuthError",
    "GoveeConnectionError",
    "GoveeRateLimitError",
    # Constants - API
    "LEGACY_BASE_URL",
    "OPENAPI_BASE_URL",
    "PROTOCOL_LEGACY",
    "PROTOCOL_OPENAPI",
    # Constants - Capabilities
    "CAPABILITY_COLOR_SETTING",
    "CAPABILITY_ON_OFF",
    "CAPABILITY_RANGE",
    # Constants - Instances
    "INSTANCE_BRIGHTNESS",
    "INSTANCE_COLOR_RGB",
    "INSTANCE_COLOR_TEMP",
    "INSTANCE_POWER_SWITCH",
    # Constants - Ranges
    "BRIGHTNESS_MAX",
    "BRIGHTNESS_MIN",
    "COLOR_TEMP_MAX",
    "COLOR_TEMP_MIN",
]
