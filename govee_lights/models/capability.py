from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DeviceCapability:
    """A controllable property declared by an OpenAPI device."""

    type: str
    instance: str
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def range(self) -> dict[str, Any] | None:
        """Declared numeric range, if any."""
        range_data = self.parameters.get("range")
        return range_data if isinstance(range_data, dict) and range_data else None

    @property
    def min_value(self) -> Any:
        return self.range.get("min") if self.range else None

    @property
    def max_value(self) -> Any:
        return self.range.get("max") if self.range else None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DeviceCapability:
        params = data.get("parameters")
        return cls(
            type=data.get("type") or "",
            instance=data.get("instance") or "",
            parameters=params if isinstance(params, dict) else {},
        )


def find_capability_range(
    capabilities: Iterable[DeviceCapability],
    instance: str,
    fallback_min: int,
    fallback_max: int,
) -> tuple[Any, Any]:
    """Return the (min, max) range declared for instance.

    The first capability with a matching instance and a declared range
    wins; missing bounds fall back individually.
    """
    for cap in capabilities:
        if cap.instance == instance and cap.range:
            minimum = cap.min_value
            maximum = cap.max_value
            return (
                fallback_min if minimum is None else minimum,
                fallback_max if maximum is None else maximum,
            )
    return (fallback_min, fallback_max)
