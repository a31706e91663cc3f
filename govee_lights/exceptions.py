"""Exceptions raised outside the API transport."""
from __future__ import annotations


class GoveeConfigError(Exception):
    """Configuration is missing or invalid.

    Raised at startup, before any request is sent, when:
    - GOVEE_API_KEY is not set (in the environment or a .env file)
    - GOVEE_API_KEY is blank
    """
