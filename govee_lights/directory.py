"""Device directory merging both Govee backends."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from .models.device import Device, LegacyDevice, OpenApiDevice
from .protocols import IApiClient

_LOGGER = logging.getLogger(__name__)


async def list_legacy_devices(client: IApiClient) -> list[LegacyDevice]:
    """List devices known to the legacy backend."""
    raw_devices = await client.get_legacy_devices()
    return [
        LegacyDevice.from_api_response(raw)
        for raw in raw_devices
        if isinstance(raw, dict)
    ]


async def list_openapi_devices(client: IApiClient) -> list[OpenApiDevice]:
    """List devices known to the OpenAPI backend."""
    raw_devices = await client.get_devices()
    return [
        OpenApiDevice.from_api_response(raw)
        for raw in raw_devices
        if isinstance(raw, dict)
    ]


def dedupe_devices(devices: Iterable[Device]) -> list[Device]:
    """Drop repeated identity keys, keeping first-seen order."""
    seen: set[str] = set()
    unique: list[Device] = []
    for device in devices:
        key = device.identity_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(device)
    return unique


async def list_all_devices(client: IApiClient) -> list[Device]:
    """List devices from both backends, legacy first.

    Both listings run concurrently. A backend that fails contributes no
    devices instead of failing the whole listing.
    """
    legacy, openapi = await asyncio.gather(
        list_legacy_devices(client),
        list_openapi_devices(client),
        return_exceptions=True,
    )

    if isinstance(legacy, BaseException):
        _LOGGER.warning("Legacy device listing failed: %s", legacy)
        legacy = []
    if isinstance(openapi, BaseException):
        _LOGGER.warning("OpenAPI device listing failed: %s", openapi)
        openapi = []

    return dedupe_devices([*legacy, *openapi])
