"""Device control actions.

Each action builds one command and sends it through the device variant,
which picks the backend. Transport errors propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import Any

from .api.const import BRIGHTNESS_MAX, BRIGHTNESS_MIN, COLOR_TEMP_MAX, COLOR_TEMP_MIN
from .models.color import clamp_int
from .models.commands import (
    BrightnessCommand,
    ColorCommand,
    ColorTempCommand,
    PowerCommand,
)
from .models.device import Device
from .protocols import IApiClient

_LOGGER = logging.getLogger(__name__)


def brightness_command(brightness: Any) -> BrightnessCommand:
    """Build a brightness command, silently rounded and clamped to 1-100."""
    return BrightnessCommand(
        brightness=clamp_int(brightness, BRIGHTNESS_MIN, BRIGHTNESS_MAX)
    )


def color_temperature_command(device: Device, kelvin: Any) -> ColorTempCommand:
    """Build a color temperature command clamped to the device's range."""
    minimum, maximum = device.color_temp_range(COLOR_TEMP_MIN, COLOR_TEMP_MAX)
    return ColorTempCommand(kelvin=clamp_int(kelvin, minimum, maximum))


async def turn_on(client: IApiClient, device: Device) -> Any:
    """Turn device on."""
    _LOGGER.debug("Turning on %s", device.identity_key)
    return await device.execute(client, PowerCommand(power_on=True))


async def turn_off(client: IApiClient, device: Device) -> Any:
    """Turn device off."""
    _LOGGER.debug("Turning off %s", device.identity_key)
    return await device.execute(client, PowerCommand(power_on=False))


async def set_brightness(client: IApiClient, device: Device, brightness: Any) -> Any:
    """Set brightness, silently rounded and clamped to 1-100."""
    return await device.execute(client, brightness_command(brightness))


async def set_color(client: IApiClient, device: Device, r: Any, g: Any, b: Any) -> Any:
    """Set RGB color.

    OpenAPI devices get a clamped packed integer; legacy devices get the
    channels exactly as passed.
    """
    return await device.execute(client, ColorCommand(r=r, g=g, b=b))


async def set_color_temperature(client: IApiClient, device: Device, kelvin: Any) -> Any:
    """Set color temperature, clamped to the device's declared range."""
    return await device.execute(client, color_temperature_command(device, kelvin))
