"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from myshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_FALSE_VALUES = ("0", "false", "no", "off")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.prompt_name: str = self._get_env("MYSHELL_PROMPT_NAME", "myshell")
        self.chunk_size: int = self._get_positive_int("MYSHELL_CHUNK_SIZE", 256)
        self.log_level: str = self.validate_log_level(
            self._get_env("MYSHELL_LOG_LEVEL", "WARNING")
        )
        self.color: bool = self._get_bool("MYSHELL_COLOR", True) and not os.getenv(
            "NO_COLOR"
        )

    @staticmethod
    def validate_log_level(value: str) -> str:
        """Return the upper-cased level name, raise if logging does not know it."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {value}")
        return level

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return raw.strip().lower() not in _FALSE_VALUES


# Global settings instance
settings = Settings()
