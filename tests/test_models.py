"""Test Govee device and capability models."""
from __future__ import annotations

import dataclasses

import pytest

from govee_lights.models import (
    DeviceCapability,
    LegacyDevice,
    OpenApiDevice,
    find_capability_range,
    supports_color_temperature,
    supports_rgb,
)


# ==============================================================================
# DeviceCapability Tests
# ==============================================================================


class TestDeviceCapability:
    """Test DeviceCapability model."""

    def test_from_api_simple_capability(self):
        """Test parsing a capability without parameters."""
        cap = DeviceCapability.from_api(
            {"type": "devices.capabilities.on_off", "instance": "powerSwitch"}
        )

        assert cap.type == "devices.capabilities.on_off"
        assert cap.instance == "powerSwitch"
        assert cap.parameters == {}
        assert cap.range is None
        assert cap.min_value is None
        assert cap.max_value is None

    def test_from_api_capability_with_range(self):
        """Test parsing a capability with a declared range."""
        cap = DeviceCapability.from_api(
            {
                "type": "devices.capabilities.color_setting",
                "instance": "colorTemperatureK",
                "parameters": {
                    "dataType": "INTEGER",
                    "range": {"min": 2700, "max": 6500, "precision": 1},
                },
            }
        )

        assert cap.min_value == 2700
        assert cap.max_value == 6500

    def test_from_api_missing_fields(self):
        """Test parsing tolerates missing fields."""
        cap = DeviceCapability.from_api({})

        assert cap.type == ""
        assert cap.instance == ""
        assert cap.range is None


class TestFindCapabilityRange:
    """Test find_capability_range()."""

    def test_declared_range(self, openapi_device):
        """Test the declared range is used."""
        assert find_capability_range(
            openapi_device.capabilities, "colorTemperatureK", 1, 2
        ) == (2000, 9000)

    def test_fallback_when_instance_missing(self, openapi_brightness_only_device):
        """Test fallback is used when no capability matches."""
        assert find_capability_range(
            openapi_brightness_only_device.capabilities, "colorTemperatureK", 2000, 9000
        ) == (2000, 9000)

    def test_skips_capability_without_range(self):
        """Test a matching capability without range is skipped."""
        caps = [
            DeviceCapability(type="x", instance="colorTemperatureK"),
            DeviceCapability(
                type="x",
                instance="colorTemperatureK",
                parameters={"range": {"min": 3000, "max": 5000}},
            ),
        ]

        assert find_capability_range(caps, "colorTemperatureK", 2000, 9000) == (
            3000,
            5000,
        )

    def test_partial_range_falls_back_per_bound(self):
        """Test a missing bound falls back on its own."""
        caps = [
            DeviceCapability(
                type="x",
                instance="colorTemperatureK",
                parameters={"range": {"max": 6000}},
            ),
        ]

        assert find_capability_range(caps, "colorTemperatureK", 2000, 9000) == (
            2000,
            6000,
        )


# ==============================================================================
# LegacyDevice Tests
# ==============================================================================


class TestLegacyDevice:
    """Test LegacyDevice model."""

    def test_from_api_basic(self, legacy_device_data):
        """Test creating a legacy device from a listing entry."""
        device = LegacyDevice.from_api_response(legacy_device_data)

        assert device.device_id == "AA:BB:CC:DD:EE:FF:00:11"
        assert device.model == "H6008"
        assert device.name == "Bedroom Bulb"
        assert device.protocol == "legacy"
        assert device.model_or_sku == "H6008"
        assert device.supported_commands == frozenset(
            {"turn", "brightness", "color", "colorTem"}
        )

    def test_from_api_missing_optional_fields(self):
        """Test missing optional fields default to None or empty."""
        device = LegacyDevice.from_api_response({"device": "id", "model": "H6001"})

        assert device.name is None
        assert device.supported_commands == frozenset()
        assert device.properties is None
        assert device.supports_rgb is False
        assert device.supports_color_temp is False

    def test_supports_rgb_without_color_temp(self):
        """Test a device with only the color command."""
        device = LegacyDevice.from_api_response(
            {"device": "id", "model": "H6001", "supportCmds": ["color"]}
        )

        assert supports_color_temperature(device) is False
        assert supports_rgb(device) is True

    def test_exact_command_match(self):
        """Test support requires an exact command name."""
        device = LegacyDevice.from_api_response(
            {"device": "id", "model": "H6001", "supportCmds": ["Color", "colorTemp"]}
        )

        assert device.supports_rgb is False
        assert device.supports_color_temp is False

    def test_color_temp_range_from_properties(self, legacy_device):
        """Test range is read from properties.colorTem.range."""
        assert legacy_device.color_temp_range() == (2700, 6500)

    def test_color_temp_range_fallback(self, legacy_rgb_only_device):
        """Test range falls back without properties."""
        assert legacy_rgb_only_device.color_temp_range() == (2000, 9000)
        assert legacy_rgb_only_device.color_temp_range(1, 2) == (1, 2)

    def test_identity_key(self, legacy_device):
        """Test identity key combines protocol, id and model."""
        assert legacy_device.identity_key == "legacy:AA:BB:CC:DD:EE:FF:00:11:H6008"

    def test_is_frozen(self, legacy_device):
        """Test devices cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            legacy_device.name = "Other"

    def test_display_name_fallback(self):
        """Test unnamed devices get a placeholder."""
        device = LegacyDevice(device_id="id", model="H6001")
        assert device.display_name == "(no name)"


# ==============================================================================
# OpenApiDevice Tests
# ==============================================================================


class TestOpenApiDevice:
    """Test OpenApiDevice model."""

    def test_from_api_basic(self, openapi_device_data):
        """Test creating an OpenAPI device from a listing entry."""
        device = OpenApiDevice.from_api_response(openapi_device_data)

        assert device.device_id == "11:22:33:44:55:66:77:88"
        assert device.sku == "H6160"
        assert device.name == "Desk Strip"
        assert device.protocol == "openapi"
        assert device.model_or_sku == "H6160"
        assert len(device.capabilities) == 4
        assert device.capabilities[0].instance == "powerSwitch"

    def test_from_api_missing_optional_fields(self):
        """Test missing optional fields default to None or empty."""
        device = OpenApiDevice.from_api_response({"device": "id", "sku": "H6160"})

        assert device.name is None
        assert device.capabilities == ()

    def test_supports_rgb_and_color_temp(self, openapi_device):
        """Test support is detected by instance name."""
        assert supports_rgb(openapi_device) is True
        assert supports_color_temperature(openapi_device) is True

    def test_brightness_only(self, openapi_brightness_only_device):
        """Test a device without color capabilities."""
        assert supports_rgb(openapi_brightness_only_device) is False
        assert supports_color_temperature(openapi_brightness_only_device) is False

    def test_color_temp_range(self, openapi_temp_only_device):
        """Test range comes from the capability descriptor."""
        assert openapi_temp_only_device.color_temp_range() == (2700, 6500)

    def test_identity_key(self, openapi_device):
        """Test identity key combines protocol, id and SKU."""
        assert openapi_device.identity_key == "openapi:11:22:33:44:55:66:77:88:H6160"


class TestSupportHelpers:
    """Test module-level support helpers."""

    def test_none_device(self):
        """Test None yields False instead of raising."""
        assert supports_rgb(None) is False
        assert supports_color_temperature(None) is False
