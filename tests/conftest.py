"""Shared test fixtures for Govee light tests."""
from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from govee_lights.models import LegacyDevice, OpenApiDevice


# ==============================================================================
# Raw API Payload Fixtures
# ==============================================================================


@pytest.fixture
def legacy_device_data() -> dict[str, Any]:
    """Create a raw /v1/devices entry for an RGB + color temp bulb."""
    return {
        "device": "AA:BB:CC:DD:EE:FF:00:11",
        "model": "H6008",
        "deviceName": "Bedroom Bulb",
        "controllable": True,
        "retrievable": True,
        "supportCmds": ["turn", "brightness", "color", "colorTem"],
        "properties": {"colorTem": {"range": {"min": 2700, "max": 6500}}},
    }


@pytest.fixture
def openapi_device_data() -> dict[str, Any]:
    """Create a raw /user/devices entry for an RGB + color temp strip."""
    return {
        "sku": "H6160",
        "device": "11:22:33:44:55:66:77:88",
        "deviceName": "Desk Strip",
        "type": "devices.types.light",
        "capabilities": [
            {
                "type": "devices.capabilities.on_off",
                "instance": "powerSwitch",
                "parameters": {"dataType": "ENUM"},
            },
            {
                "type": "devices.capabilities.range",
                "instance": "brightness",
                "parameters": {
                    "dataType": "INTEGER",
                    "range": {"min": 1, "max": 100, "precision": 1},
                },
            },
            {
                "type": "devices.capabilities.color_setting",
                "instance": "colorRgb",
                "parameters": {
                    "dataType": "INTEGER",
                    "range": {"min": 0, "max": 16777215, "precision": 1},
                },
            },
            {
                "type": "devices.capabilities.color_setting",
                "instance": "colorTemperatureK",
                "parameters": {
                    "dataType": "INTEGER",
                    "range": {"min": 2000, "max": 9000, "precision": 1},
                },
            },
        ],
    }


# ==============================================================================
# Device Model Fixtures
# ==============================================================================


@pytest.fixture
def legacy_device(legacy_device_data: dict[str, Any]) -> LegacyDevice:
    """Create a legacy device with RGB and color temperature."""
    return LegacyDevice.from_api_response(legacy_device_data)


@pytest.fixture
def legacy_rgb_only_device() -> LegacyDevice:
    """Create a legacy device supporting only RGB color."""
    return LegacyDevice(
        device_id="AA:AA:AA:AA:AA:AA:AA:AA",
        model="H6001",
        name="Lamp",
        supported_commands=frozenset({"turn", "brightness", "color"}),
    )


@pytest.fixture
def openapi_device(openapi_device_data: dict[str, Any]) -> OpenApiDevice:
    """Create an OpenAPI device with RGB and color temperature."""
    return OpenApiDevice.from_api_response(openapi_device_data)


@pytest.fixture
def openapi_temp_only_device() -> OpenApiDevice:
    """Create an OpenAPI white-spectrum device (color temperature only)."""
    return OpenApiDevice.from_api_response(
        {
            "sku": "H6022",
            "device": "99:88:77:66:55:44:33:22",
            "deviceName": "Ceiling",
            "capabilities": [
                {"type": "devices.capabilities.on_off", "instance": "powerSwitch"},
                {"type": "devices.capabilities.range", "instance": "brightness"},
                {
                    "type": "devices.capabilities.color_setting",
                    "instance": "colorTemperatureK",
                    "parameters": {"range": {"min": 2700, "max": 6500}},
                },
            ],
        }
    )


@pytest.fixture
def openapi_brightness_only_device() -> OpenApiDevice:
    """Create an OpenAPI dimmable device without color control."""
    return OpenApiDevice.from_api_response(
        {
            "sku": "H5080",
            "device": "00:00:00:00:00:00:00:01",
            "capabilities": [
                {"type": "devices.capabilities.on_off", "instance": "powerSwitch"},
                {"type": "devices.capabilities.range", "instance": "brightness"},
            ],
        }
    )


# ==============================================================================
# Transport Fixtures
# ==============================================================================


@pytest.fixture
def mock_api_client() -> MagicMock:
    """Create a mock transport for both backends."""
    client = MagicMock()
    client.get_legacy_devices = AsyncMock(return_value=[])
    client.get_devices = AsyncMock(return_value=[])
    client.control_legacy = AsyncMock(return_value={"code": 200, "message": "Success"})
    client.control_device = AsyncMock(return_value={"code": 200, "message": "success"})
    client.close = AsyncMock()
    return client
