"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from taminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("TAMINAL_LOG_LEVEL", "WARNING")
        self.output_limit: int = self._get_positive_int("TAMINAL_OUTPUT_LIMIT", 1000)
        self.ui_theme: str = self._get_env("TAMINAL_UI_THEME", "dark").lower()
        self.farewell: str = self._get_env("TAMINAL_FAREWELL", "さようなら!")
        self.show_banner: bool = self._get_flag("TAMINAL_CLI_BANNER", True)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a strictly positive integer, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_log_level(self, key: str, default: str) -> str:
        level = self._get_env(key, default).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    def _get_flag(self, key: str, default: bool) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return raw.strip().lower() not in ("0", "false", "no", "off")


# Global settings instance
settings = Settings()
