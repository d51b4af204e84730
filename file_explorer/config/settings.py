"""
Configuration settings for the application.

Settings only tune logging and rendering; command behavior never depends on them.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
_ = load_dotenv()

_FALSE_VALUES = ("0", "false", "no", "off")

logger = logging.getLogger(__name__)


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("EXPLORER_LOG_LEVEL", "WARNING")
        self.log_file: Optional[str] = os.getenv("EXPLORER_LOG_FILE") or None
        self.color: bool = self._get_flag("EXPLORER_COLOR", True)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_flag(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() not in _FALSE_VALUES

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, falling back to the default if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown log level in {key}: {name}, using {default}")
            return logging.getLevelName(default)
        return level

