"""Exceptions for the Govee cloud API clients."""
from __future__ import annotations


class GoveeApiError(Exception):
    """Base exception for Govee API errors."""

    def __init__(self, message: str, code: int | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self.code = code


class GoveeAuthError(GoveeApiError):
    """Authentication failure - invalid or expired API key."""

    def __init__(self, message: str = "Invalid API key") -> None:
        """Initialize auth error."""
        super().__init__(message, code=401)


class GoveeRateLimitError(GoveeApiError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: float | None = None,
    ) -> None:
        """Initialize rate limit error."""
        super().__init__(message, code=429)
        self.retry_after = retry_after


class GoveeConnectionError(GoveeApiError):
    """Connection error - network issues."""

    def __init__(self, message: str = "Failed to connect to Govee API") -> None:
        """Initialize connection error."""
        super().__init__(message)
