"""Device models for the two Govee backends.

A device is either a ``LegacyDevice`` (v1 API, addressed by device id and
model, capabilities given as supported command names) or an
``OpenApiDevice`` (addressed by device id and SKU, capabilities given as
descriptors). Both are frozen: they are rebuilt on every listing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..api.const import (
    CMD_COLOR,
    CMD_COLOR_TEM,
    COLOR_TEMP_MAX,
    COLOR_TEMP_MIN,
    INSTANCE_COLOR_RGB,
    INSTANCE_COLOR_TEMP,
    PROTOCOL_LEGACY,
    PROTOCOL_OPENAPI,
)
from .capability import DeviceCapability, find_capability_range

if TYPE_CHECKING:
    from ..protocols import IApiClient
    from .commands import DeviceCommand


class Device(ABC):
    """Behaviour shared by both device variants."""

    device_id: str
    name: str | None

    @property
    @abstractmethod
    def protocol(self) -> str:
        """Backend this device was listed by."""
        ...

    @property
    @abstractmethod
    def model_or_sku(self) -> str:
        """Model (legacy) or SKU (OpenAPI)."""
        ...

    @property
    @abstractmethod
    def supports_rgb(self) -> bool:
        """Check if device supports RGB color."""
        ...

    @property
    @abstractmethod
    def supports_color_temp(self) -> bool:
        """Check if device supports color temperature."""
        ...

    @abstractmethod
    def color_temp_range(
        self,
        fallback_min: int = COLOR_TEMP_MIN,
        fallback_max: int = COLOR_TEMP_MAX,
    ) -> tuple[Any, Any]:
        """Get the color temperature range in Kelvin."""
        ...

    @abstractmethod
    async def execute(self, client: IApiClient, command: DeviceCommand) -> Any:
        """Send command to this device with a single request."""
        ...

    @property
    def identity_key(self) -> str:
        """Key used to de-duplicate listings: protocol, id and model/SKU."""
        return f"{self.protocol}:{self.device_id}:{self.model_or_sku or ''}"

    @property
    def display_name(self) -> str:
        return self.name or "(no name)"


@dataclass(frozen=True)
class LegacyDevice(Device):
    """Device listed by the legacy v1 API."""

    device_id: str
    model: str
    name: str | None = None
    supported_commands: frozenset[str] = field(default_factory=frozenset)
    properties: dict[str, Any] | None = None

    @property
    def protocol(self) -> str:
        return PROTOCOL_LEGACY

    @property
    def model_or_sku(self) -> str:
        return self.model

    @property
    def supports_rgb(self) -> bool:
        return CMD_COLOR in self.supported_commands

    @property
    def supports_color_temp(self) -> bool:
        return CMD_COLOR_TEM in self.supported_commands

    def color_temp_range(
        self,
        fallback_min: int = COLOR_TEMP_MIN,
        fallback_max: int = COLOR_TEMP_MAX,
    ) -> tuple[Any, Any]:
        """Read ``properties.colorTem.range``, falling back per bound."""
        color_tem = (self.properties or {}).get(CMD_COLOR_TEM)
        range_data = color_tem.get("range") if isinstance(color_tem, dict) else None
        if not isinstance(range_data, dict):
            range_data = {}
        minimum = range_data.get("min")
        maximum = range_data.get("max")
        return (
            fallback_min if minimum is None else minimum,
            fallback_max if maximum is None else maximum,
        )

    async def execute(self, client: IApiClient, command: DeviceCommand) -> Any:
        return await client.control_legacy(
            self.device_id, self.model, command.to_legacy_cmd()
        )

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> LegacyDevice:
        """Create LegacyDevice from a /v1/devices entry.

        Missing optional fields become None or empty.
        """
        properties = data.get("properties")
        return cls(
            device_id=data.get("device"),
            model=data.get("model"),
            name=data.get("deviceName"),
            supported_commands=frozenset(data.get("supportCmds") or ()),
            properties=properties if isinstance(properties, dict) else None,
        )


@dataclass(frozen=True)
class OpenApiDevice(Device):
    """Device listed by the capability-based OpenAPI."""

    device_id: str
    sku: str
    name: str | None = None
    capabilities: tuple[DeviceCapability, ...] = field(default_factory=tuple)

    @property
    def protocol(self) -> str:
        return PROTOCOL_OPENAPI

    @property
    def model_or_sku(self) -> str:
        return self.sku

    def has_instance(self, instance: str) -> bool:
        return any(cap.instance == instance for cap in self.capabilities)

    @property
    def supports_rgb(self) -> bool:
        return self.has_instance(INSTANCE_COLOR_RGB)

    @property
    def supports_color_temp(self) -> bool:
        return self.has_instance(INSTANCE_COLOR_TEMP)

    def color_temp_range(
        self,
        fallback_min: int = COLOR_TEMP_MIN,
        fallback_max: int = COLOR_TEMP_MAX,
    ) -> tuple[Any, Any]:
        return find_capability_range(
            self.capabilities, INSTANCE_COLOR_TEMP, fallback_min, fallback_max
        )

    async def execute(self, client: IApiClient, command: DeviceCommand) -> Any:
        return await client.control_device(
            self.device_id, self.sku, command.to_api_payload()
        )

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> OpenApiDevice:
        """Create OpenApiDevice from a /user/devices entry.

        Args:
            data: Device dict from the listing.

        Returns:
            OpenApiDevice instance.
        """
        raw_caps = data.get("capabilities") or []
        capabilities = tuple(
            DeviceCapability.from_api(raw_cap)
            for raw_cap in raw_caps
            if isinstance(raw_cap, dict)
        )
        return cls(
            device_id=data.get("device"),
            sku=data.get("sku"),
            name=data.get("deviceName"),
            capabilities=capabilities,
        )


def supports_rgb(device: Device | None) -> bool:
    """Check RGB support; None yields False."""
    return device is not None and device.supports_rgb


def supports_color_temperature(device: Device | None) -> bool:
    """Check color temperature support; None yields False."""
    return device is not None and device.supports_color_temp
