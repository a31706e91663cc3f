"""Color math shared by the dispatcher and the sunrise animation.

Rounding is half-up (``floor(x + 0.5)``) rather than Python's
round-half-to-even so packed values match what the Govee apps send.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

KELVIN_MIN = 1000
KELVIN_MAX = 40000
KELVIN_DEFAULT = 3000


def _to_finite(value: Any) -> float | None:
    """Return value as a finite float, or None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def clamp_int(value: Any, minimum: int, maximum: int) -> int:
    """Round and bound value to [minimum, maximum]; non-finite gives minimum."""
    number = _to_finite(value)
    if number is None:
        return minimum
    return max(minimum, min(maximum, round_half_up(number)))


def clamp_byte(value: Any) -> int:
    """Round and bound value to a color channel; non-finite gives 0."""
    number = _to_finite(value)
    if number is None:
        return 0
    return max(0, min(255, round_half_up(number)))


def rgb_to_packed_int(r: Any, g: Any, b: Any) -> int:
    """Pack clamped channels as (R << 16) | (G << 8) | B, 0..16777215."""
    return (clamp_byte(r) << 16) | (clamp_byte(g) << 8) | clamp_byte(b)


@dataclass(frozen=True)
class RGBColor:
    """Immutable RGB color representation."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Clamp channels into byte range."""
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "r", clamp_byte(self.r))
        object.__setattr__(self, "g", clamp_byte(self.g))
        object.__setattr__(self, "b", clamp_byte(self.b))

    @property
    def as_tuple(self) -> tuple[int, int, int]:
        """Return as (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    @property
    def as_packed_int(self) -> int:
        """Return as packed integer for Govee API."""
        return rgb_to_packed_int(self.r, self.g, self.b)


def kelvin_to_rgb(kelvin: Any) -> RGBColor:
    """Approximate the RGB color of a black body at the given temperature.

    Tanner Helland's curve fit, evaluated on a kelvin/100 scale. Input is
    clamped to 1000..40000 K; non-finite input is treated as 3000 K.
    """
    k = _to_finite(kelvin)
    if k is None:
        k = KELVIN_DEFAULT
    k = max(KELVIN_MIN, min(KELVIN_MAX, k))

    temp = k / 100

    if temp <= 66:
        r = 255.0
        g = 99.4708025861 * math.log(temp) - 161.1195681661
        if temp <= 19:
            b = 0.0
        else:
            b = 138.5177312231 * math.log(temp - 10) - 305.0447927307
    else:
        r = 329.698727446 * math.pow(temp - 60, -0.1332047592)
        g = 288.1221695283 * math.pow(temp - 60, -0.0755148492)
        b = 255.0

    return RGBColor(r=r, g=g, b=b)
