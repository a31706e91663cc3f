"""Settings loaded from the environment and an optional .env file."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .const import DEFAULT_LOG_LEVEL, ENV_API_KEY, ENV_LOG_LEVEL
from .exceptions import GoveeConfigError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime settings."""

    api_key: str
    log_level: str = DEFAULT_LOG_LEVEL


def load_log_level(env_file: str | Path | None = None) -> str:
    """Read the configured log level without requiring an API key."""
    load_dotenv(env_file or find_dotenv(usecwd=True))
    return (os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Load settings, reading a .env file first when one is found.

    Variables already set in the environment win over the .env file.

    Raises:
        GoveeConfigError: GOVEE_API_KEY is missing or blank.
    """
    log_level = load_log_level(env_file)

    api_key = (os.environ.get(ENV_API_KEY) or "").strip()
    if not api_key:
        raise GoveeConfigError(f"Missing {ENV_API_KEY} in environment or .env")

    _LOGGER.debug("Loaded settings (log level %s)", log_level)
    return Settings(api_key=api_key, log_level=log_level)
