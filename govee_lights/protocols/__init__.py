"""Protocol interfaces for the Govee light tools.

Defines the contract between the device layer and the HTTP transport.
"""

from .api import IApiClient

__all__ = [
    "IApiClient",
]
