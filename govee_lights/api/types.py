from __future__ import annotations

from typing import Any, TypedDict

from typing_extensions import NotRequired


class RangeDict(TypedDict):
    min: int
    max: int
    precision: NotRequired[int]


class ParametersDict(TypedDict):
    # dataType can be "INTEGER", "ENUM", "STRUCT", etc.
    dataType: NotRequired[str]
    range: NotRequired[RangeDict]


class DeviceCapabilityDict(TypedDict):
    type: str
    instance: str
    parameters: NotRequired[ParametersDict]


class CapabilityCommandDict(TypedDict):
    type: str
    instance: str
    value: Any


class OpenApiDeviceDict(TypedDict):
    # GET /user/devices
    device: str
    sku: str
    deviceName: NotRequired[str]
    type: NotRequired[str]
    capabilities: NotRequired[list[DeviceCapabilityDict]]


class LegacyRangeProperty(TypedDict):
    range: RangeDict


class LegacyPropertiesDict(TypedDict):
    colorTem: NotRequired[LegacyRangeProperty]


class LegacyDeviceDict(TypedDict):
    # GET /v1/devices
    device: str
    model: str
    deviceName: NotRequired[str]
    controllable: NotRequired[bool]
    retrievable: NotRequired[bool]
    supportCmds: NotRequired[list[str]]
    properties: NotRequired[LegacyPropertiesDict]


class LegacyCommandDict(TypedDict):
    name: str
    value: Any


class LegacyControlRequest(TypedDict):
    # PUT /v1/devices/control
    device: str
    model: str
    cmd: LegacyCommandDict


class ControlRequestInnerPayload(TypedDict):
    sku: str
    device: str
    capability: CapabilityCommandDict


class ControlRequestPayload(TypedDict):
    # POST /device/control
    requestId: str
    payload: ControlRequestInnerPayload
