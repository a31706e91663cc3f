"""Govee cloud API client covering the legacy v1 and OpenAPI backends."""
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import aiohttp
import async_timeout

from .const import (
    ENDPOINT_DEVICE_CONTROL,
    ENDPOINT_DEVICES,
    ENDPOINT_LEGACY_CONTROL,
    ENDPOINT_LEGACY_DEVICES,
    HEADER_API_KEY,
    HEADER_RETRY_AFTER,
    LEGACY_BASE_URL,
    OPENAPI_BASE_URL,
    REQUEST_TIMEOUT,
)
from .exceptions import (
    GoveeApiError,
    GoveeAuthError,
    GoveeConnectionError,
    GoveeRateLimitError,
)
from .types import (
    CapabilityCommandDict,
    ControlRequestPayload,
    LegacyCommandDict,
    LegacyControlRequest,
)

_LOGGER = logging.getLogger(__name__)


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, dict):
        message = data.get("message") or data.get("msg")
        if message:
            return str(message)
    return f"HTTP {status}"


def _parse_retry_after(value: str | None) -> float | None:
    """Parse a Retry-After header given as seconds or as an HTTP-date."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        _LOGGER.debug("Ignoring unparsable Retry-After header: %s", value)
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


def _extract_openapi_devices(response: Any) -> list[dict[str, Any]]:
    """Find the device list in an OpenAPI listing response.

    The listing has been observed under ``data``, ``payload.devices``,
    ``payload`` or as a bare top-level list.
    """
    if isinstance(response, list):
        return response
    if not isinstance(response, dict):
        return []

    devices = response.get("data")
    if devices is None:
        payload = response.get("payload")
        if isinstance(payload, dict) and payload.get("devices") is not None:
            devices = payload["devices"]
        else:
            devices = payload

    return devices if isinstance(devices, list) else []


class GoveeApiClient:
    """Govee cloud client for both the legacy and the OpenAPI backends."""

    def __init__(
        self,
        api_key: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize API client."""
        self._api_key = api_key
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    async def __aenter__(self) -> GoveeApiClient:
        """Async context manager entry."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session:
            await self._session.close()
            self._session = None

    def _headers(self) -> dict[str, str]:
        """Return request headers."""
        return {
            HEADER_API_KEY: self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        base_url: str,
        endpoint: str,
        json_data: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method (GET, PUT, POST)
            base_url: Backend base URL (legacy or OpenAPI)
            endpoint: API endpoint path
            json_data: Optional JSON payload

        Returns:
            Parsed JSON response body

        Raises:
            GoveeAuthError: Invalid API key
            GoveeRateLimitError: Rate limit exceeded
            GoveeConnectionError: Network error or timeout
            GoveeApiError: Other API errors, including malformed bodies
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        url = f"{base_url}/{endpoint}"
        _LOGGER.debug("%s %s", method, url)

        try:
            async with async_timeout.timeout(self._timeout):
                async with self._session.request(
                    method,
                    url,
                    headers=self._headers(),
                    json=json_data,
                ) as response:
                    parsed = True
                    try:
                        data = await response.json(content_type=None)
                    except ValueError:
                        parsed = False
                        data = {"message": await response.text()}

                    if response.status == 401:
                        raise GoveeAuthError()
                    if response.status == 429:
                        raise GoveeRateLimitError(
                            retry_after=_parse_retry_after(
                                response.headers.get(HEADER_RETRY_AFTER)
                            )
                        )
                    if response.status >= 400:
                        raise GoveeApiError(
                            _error_message(data, response.status),
                            code=response.status,
                        )
                    if not parsed:
                        raise GoveeApiError(
                            "Malformed JSON response", code=response.status
                        )

                    # API-level errors reported inside a 200 body
                    if isinstance(data, dict) and data.get("code") not in (None, 200):
                        raise GoveeApiError(
                            _error_message(data, response.status),
                            code=data.get("code"),
                        )

                    return data

        except asyncio.TimeoutError as err:
            raise GoveeConnectionError("Request timed out") from err
        except aiohttp.ClientError as err:
            raise GoveeConnectionError(str(err)) from err

    # === Legacy backend ===

    async def get_legacy_devices(self) -> list[dict[str, Any]]:
        """Fetch the raw device listing from the legacy backend."""
        response = await self._request("GET", LEGACY_BASE_URL, ENDPOINT_LEGACY_DEVICES)
        data = response.get("data") if isinstance(response, dict) else None
        devices = data.get("devices") if isinstance(data, dict) else None
        return devices if isinstance(devices, list) else []

    async def control_legacy(
        self,
        device_id: str,
        model: str,
        cmd: LegacyCommandDict,
    ) -> Any:
        """Send a named command to a legacy device.

        Args:
            device_id: Device MAC address / identifier
            model: Device model (e.g., "H6160")
            cmd: Command dict with ``name`` and ``value``

        Returns:
            API response
        """
        body: LegacyControlRequest = {
            "device": device_id,
            "model": model,
            "cmd": cmd,
        }

        _LOGGER.debug("Legacy control %s: %s = %s", device_id, cmd["name"], cmd["value"])

        return await self._request(
            "PUT", LEGACY_BASE_URL, ENDPOINT_LEGACY_CONTROL, dict(body)
        )

    # === OpenAPI backend ===

    async def get_devices(self) -> list[dict[str, Any]]:
        """Fetch the raw device listing from the OpenAPI backend."""
        response = await self._request("GET", OPENAPI_BASE_URL, ENDPOINT_DEVICES)
        return _extract_openapi_devices(response)

    async def control_device(
        self,
        device_id: str,
        sku: str,
        capability: CapabilityCommandDict,
    ) -> Any:
        """Send a capability command to an OpenAPI device.

        Args:
            device_id: Device MAC address / identifier
            sku: Device model
            capability: Dict with capability ``type``, ``instance`` and ``value``

        Returns:
            API response
        """
        body: ControlRequestPayload = {
            "requestId": str(uuid.uuid4()),
            "payload": {
                "sku": sku,
                "device": device_id,
                "capability": capability,
            },
        }

        _LOGGER.debug(
            "Control device %s: %s.%s = %s",
            device_id,
            capability["type"],
            capability["instance"],
            capability["value"],
        )

        return await self._request(
            "POST", OPENAPI_BASE_URL, ENDPOINT_DEVICE_CONTROL, dict(body)
        )
