"""API layer protocol interfaces.

These protocols let the dispatcher, directory and sunrise animation run
against any transport, including mocks in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..api.types import CapabilityCommandDict, LegacyCommandDict


@runtime_checkable
class IApiClient(Protocol):
    """Protocol for Govee cloud operations on both backends."""

    async def get_legacy_devices(self) -> list[dict[str, Any]]:
        """Fetch the raw legacy device listing.

        Raises:
            GoveeApiError: If the listing fails.
        """
        ...

    async def get_devices(self) -> list[dict[str, Any]]:
        """Fetch the raw OpenAPI device listing.

        Raises:
            GoveeApiError: If the listing fails.
        """
        ...

    async def control_legacy(
        self,
        device_id: str,
        model: str,
        cmd: LegacyCommandDict,
    ) -> Any:
        """Send a named command through the legacy backend.

        Args:
            device_id: Device identifier.
            model: Device model.
            cmd: Command name and value.

        Returns:
            Parsed API response.
        """
        ...

    async def control_device(
        self,
        device_id: str,
        sku: str,
        capability: CapabilityCommandDict,
    ) -> Any:
        """Send a capability command through the OpenAPI backend.

        Args:
            device_id: Device identifier.
            sku: Device SKU.
            capability: Capability type, instance and value.

        Returns:
            Parsed API response.
        """
        ...

    async def close(self) -> None:
        """Close the API client and release resources."""
        ...
