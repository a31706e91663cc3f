"""Command pattern models for device control.

Each command encapsulates a single control action and knows how to
serialize itself for both Govee backends: a named ``cmd`` for the legacy
API and a capability/instance/value triple for the OpenAPI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..api.const import (
    CAPABILITY_COLOR_SETTING,
    CAPABILITY_ON_OFF,
    CAPABILITY_RANGE,
    CMD_BRIGHTNESS,
    CMD_COLOR,
    CMD_COLOR_TEM,
    CMD_TURN,
    INSTANCE_BRIGHTNESS,
    INSTANCE_COLOR_RGB,
    INSTANCE_COLOR_TEMP,
    INSTANCE_POWER_SWITCH,
)
from ..api.types import CapabilityCommandDict, LegacyCommandDict
from .color import rgb_to_packed_int


@dataclass(frozen=True)
class DeviceCommand(ABC):
    """Base class for device commands.

    Commands are immutable value objects, built for one dispatch and
    discarded afterwards.
    """

    @property
    @abstractmethod
    def capability_type(self) -> str:
        """Get the capability type for this command."""
        ...

    @property
    @abstractmethod
    def instance(self) -> str:
        """Get the instance for this command."""
        ...

    @property
    @abstractmethod
    def legacy_name(self) -> str:
        """Get the legacy API command name."""
        ...

    @abstractmethod
    def get_value(self) -> Any:
        """Get the value to send to the OpenAPI."""
        ...

    def get_legacy_value(self) -> Any:
        """Get the value to send to the legacy API."""
        return self.get_value()

    def to_api_payload(self) -> CapabilityCommandDict:
        """Convert to the OpenAPI /device/control capability object."""
        return {
            "type": self.capability_type,
            "instance": self.instance,
            "value": self.get_value(),
        }

    def to_legacy_cmd(self) -> LegacyCommandDict:
        """Convert to the legacy /devices/control ``cmd`` object."""
        return {
            "name": self.legacy_name,
            "value": self.get_legacy_value(),
        }


@dataclass(frozen=True)
class PowerCommand(DeviceCommand):
    """Command to turn device on or off."""

    power_on: bool

    @property
    def capability_type(self) -> str:
        return CAPABILITY_ON_OFF

    @property
    def instance(self) -> str:
        return INSTANCE_POWER_SWITCH

    @property
    def legacy_name(self) -> str:
        return CMD_TURN

    def get_value(self) -> int:
        return 1 if self.power_on else 0

    def get_legacy_value(self) -> str:
        return "on" if self.power_on else "off"


@dataclass(frozen=True)
class BrightnessCommand(DeviceCommand):
    """Command to set device brightness."""

    brightness: int  # already clamped to 1-100

    @property
    def capability_type(self) -> str:
        return CAPABILITY_RANGE

    @property
    def instance(self) -> str:
        return INSTANCE_BRIGHTNESS

    @property
    def legacy_name(self) -> str:
        return CMD_BRIGHTNESS

    def get_value(self) -> int:
        return self.brightness


@dataclass(frozen=True)
class ColorCommand(DeviceCommand):
    """Command to set device RGB color.

    Channels are kept as given. The OpenAPI value is packed (and thereby
    clamped); the legacy value is sent through unchanged.
    """

    r: Any
    g: Any
    b: Any

    @property
    def capability_type(self) -> str:
        return CAPABILITY_COLOR_SETTING

    @property
    def instance(self) -> str:
        return INSTANCE_COLOR_RGB

    @property
    def legacy_name(self) -> str:
        return CMD_COLOR

    def get_value(self) -> int:
        """Return packed RGB integer."""
        return rgb_to_packed_int(self.r, self.g, self.b)

    def get_legacy_value(self) -> dict[str, Any]:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class ColorTempCommand(DeviceCommand):
    """Command to set device color temperature."""

    kelvin: int

    @property
    def capability_type(self) -> str:
        return CAPABILITY_COLOR_SETTING

    @property
    def instance(self) -> str:
        return INSTANCE_COLOR_TEMP

    @property
    def legacy_name(self) -> str:
        return CMD_COLOR_TEM

    def get_value(self) -> int:
        return self.kelvin
