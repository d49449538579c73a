"""Centralized configuration with environment-variable overrides."""
from dataclasses import dataclass, field
import os

from vultr_api.utils.constants import DEFAULT_API_BASE_URL


def _env(key: str, default: str) -> str:
    """Read an environment variable with a fallback."""
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    """Read an integer env var with fallback."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Client settings (override via env vars)."""
    app_name: str
    log_level: str
    request_timeout_seconds: int

    api_base_url: str
    api_key: str = field(repr=False, default="")

    @staticmethod
    def from_env() -> "Settings":
        """Build settings from environment variables."""
        return Settings(
            app_name=_env("APP_NAME", "vultr-api-client"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            request_timeout_seconds=_env_int("REQUEST_TIMEOUT_SECONDS", 60),

            api_base_url=_env("VULTR_API_BASE_URL", DEFAULT_API_BASE_URL),
            api_key=_env("VULTR_API_KEY", ""),
        )
