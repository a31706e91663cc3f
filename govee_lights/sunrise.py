"""Sunrise animation.

Drives a light from a dim amber glow to warm daylight over a fixed
duration. Each step sends a color command, waits briefly for the light to
settle, then sends a brightness command. At two requests per 15 second
step the animation stays under the Govee per-device limit of 10 requests
per minute.

The warm phase (first 35% of elapsed time) forces an RGB amber ramp on
devices that support RGB. After that native color temperature is
preferred, with an RGB approximation of the Kelvin value as fallback.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .controller import color_temperature_command, set_brightness, turn_on
from .models.color import kelvin_to_rgb, round_half_up
from .models.commands import ColorCommand, DeviceCommand
from .models.device import Device
from .protocols import IApiClient

_LOGGER = logging.getLogger(__name__)

KELVIN_EXPONENT = 1.7

# Amber ramp used during the warm phase: deep amber -> golden
WARM_RED = 255
WARM_GREEN = (60, 210)
WARM_BLUE = (0, 20)


@dataclass(frozen=True)
class SunriseConfig:
    """Timing and range parameters for a sunrise run."""

    duration: float = 5 * 60
    step_interval: float = 15
    settle_delay: float = 0.15
    start_kelvin: int = 2000
    end_kelvin: int = 5200
    min_brightness: int = 1
    max_brightness: int = 100
    warm_phase: float = 0.35


@dataclass(frozen=True)
class SunriseStep:
    """Computed values for one step of a sunrise run."""

    index: int
    total: int
    t: float
    brightness: float
    kelvin: float

    @property
    def percent(self) -> int:
        return round_half_up(self.t * 100)

    @property
    def is_last(self) -> bool:
        return self.index >= self.total - 1


def ease_in_out_cubic(t: float) -> float:
    """Cubic S-curve: slow start, fast middle, slow finish."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def step_count(config: SunriseConfig) -> int:
    return int(config.duration // config.step_interval) + 1


def compute_step(index: int, total: int, config: SunriseConfig) -> SunriseStep:
    """Compute brightness and Kelvin for step index of total."""
    t = 1.0 if total == 1 else index / (total - 1)

    brightness = config.min_brightness + (
        config.max_brightness - config.min_brightness
    ) * ease_in_out_cubic(t)

    # Stay warm for longer, then shift faster near the end
    kelvin = config.start_kelvin + (
        config.end_kelvin - config.start_kelvin
    ) * t**KELVIN_EXPONENT

    return SunriseStep(
        index=index, total=total, t=t, brightness=brightness, kelvin=kelvin
    )


def plan_sunrise(config: SunriseConfig) -> list[SunriseStep]:
    total = step_count(config)
    return [compute_step(index, total, config) for index in range(total)]


def sunrise_color_command(
    device: Device, step: SunriseStep, config: SunriseConfig
) -> DeviceCommand:
    """Pick the color command to send for step on device."""
    if device.supports_rgb and step.t <= config.warm_phase:
        u = step.t / config.warm_phase if config.warm_phase else 1.0
        return ColorCommand(
            r=WARM_RED,
            g=round_half_up(WARM_GREEN[0] + (WARM_GREEN[1] - WARM_GREEN[0]) * u),
            b=round_half_up(WARM_BLUE[0] + (WARM_BLUE[1] - WARM_BLUE[0]) * u),
        )

    if device.supports_color_temp:
        return color_temperature_command(device, step.kelvin)

    color = kelvin_to_rgb(step.kelvin)
    return ColorCommand(r=color.r, g=color.g, b=color.b)


async def run_sunrise(
    client: IApiClient,
    device: Device,
    config: SunriseConfig | None = None,
    on_step: Callable[[SunriseStep], None] | None = None,
) -> None:
    """Run the sunrise animation on device to completion.

    Raises:
        GoveeApiError: Any transport failure aborts the remaining steps.
    """
    config = config or SunriseConfig()
    steps = plan_sunrise(config)

    _LOGGER.info(
        "Starting sunrise on %s (%s): %d steps every %ss",
        device.display_name,
        device.identity_key,
        len(steps),
        config.step_interval,
    )

    await turn_on(client, device)

    for step in steps:
        await device.execute(client, sunrise_color_command(device, step, config))
        await asyncio.sleep(config.settle_delay)
        await set_brightness(client, device, step.brightness)

        _LOGGER.info(
            "Sunrise %d%% | ~%dK | %d%%",
            step.percent,
            round_half_up(step.kelvin),
            round_half_up(step.brightness),
        )
        if on_step is not None:
            on_step(step)

        if not step.is_last:
            await asyncio.sleep(config.step_interval)

    _LOGGER.info("Sunrise complete on %s", device.display_name)
