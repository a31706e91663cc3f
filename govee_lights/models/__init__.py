"""Govee models."""
from __future__ import annotations

from .capability import DeviceCapability, find_capability_range
from .color import (
    RGBColor,
    clamp_byte,
    clamp_int,
    kelvin_to_rgb,
    rgb_to_packed_int,
)
from .commands import (
    BrightnessCommand,
    ColorCommand,
    ColorTempCommand,
    DeviceCommand,
    PowerCommand,
)
from .device import (
    Device,
    LegacyDevice,
    OpenApiDevice,
    supports_color_temperature,
    supports_rgb,
)

__all__ = [
    "BrightnessCommand",
    "ColorCommand",
    "ColorTempCommand",
    "Device",
    "DeviceCapability",
    "DeviceCommand",
    "LegacyDevice",
    "OpenApiDevice",
    "PowerCommand",
    "RGBColor",
    "clamp_byte",
    "clamp_int",
    "find_capability_range",
    "kelvin_to_rgb",
    "rgb_to_packed_int",
    "supports_color_temperature",
    "supports_rgb",
]
