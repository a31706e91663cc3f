from __future__ import annotations

LEGACY_BASE_URL = "https://developer-api.govee.com/v1"
OPENAPI_BASE_URL = "https://openapi.api.govee.com/router/api/v1"

# Legacy (v1) endpoints
ENDPOINT_LEGACY_DEVICES = "devices"
ENDPOINT_LEGACY_CONTROL = "devices/control"

# OpenAPI endpoints
ENDPOINT_DEVICES = "user/devices"
ENDPOINT_DEVICE_CONTROL = "device/control"

HEADER_API_KEY = "Govee-API-Key"
HEADER_RETRY_AFTER = "Retry-After"

PROTOCOL_LEGACY = "legacy"
PROTOCOL_OPENAPI = "openapi"

# Legacy command names
CMD_TURN = "turn"
CMD_BRIGHTNESS = "brightness"
CMD_COLOR = "color"
CMD_COLOR_TEM = "colorTem"

CAPABILITY_ON_OFF = "devices.capabilities.on_off"
CAPABILITY_RANGE = "devices.capabilities.range"
CAPABILITY_COLOR_SETTING = "devices.capabilities.color_setting"

INSTANCE_POWER_SWITCH = "powerSwitch"
INSTANCE_BRIGHTNESS = "brightness"
INSTANCE_COLOR_RGB = "colorRgb"
INSTANCE_COLOR_TEMP = "colorTemperatureK"

COLOR_TEMP_MIN = 2000
COLOR_TEMP_MAX = 9000

BRIGHTNESS_MIN = 1
BRIGHTNESS_MAX = 100

REQUEST_TIMEOUT = 10
