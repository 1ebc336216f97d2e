"""
Suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local workstation, CI). Values are loaded from
environment variables with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "JUPITER_BASE_URL", "http://jupiter.cloud.planittesting.com"
    ).rstrip("/")

    # Playwright timeouts are in milliseconds
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("JUPITER_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("JUPITER_NAVIGATION_TIMEOUT_MS", "15000"))
    SUCCESS_MESSAGE_TIMEOUT_MS: int = int(
        os.environ.get("JUPITER_SUCCESS_TIMEOUT_MS", "20000")
    )

    # Short pauses that let the single-page app re-render
    CLICK_SETTLE_MS: int = 300
    FORM_SETTLE_MS: int = 500

    # Two currency values closer than this are considered equal
    CURRENCY_TOLERANCE: float = 0.01

    SCREENSHOT_DIR: str = os.environ.get(
        "JUPITER_SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )
    LOG_LEVEL: str = os.environ.get("JUPITER_LOG_LEVEL", "INFO")

    HEADLESS: bool = True
    # When set, an unreachable live site fails the run instead of skipping it
    REQUIRE_LIVE_SITE: bool = _env_flag("JUPITER_REQUIRE_SITE")


class LocalConfig(Config):
    """Local workstation configuration."""

    HEADLESS: bool = _env_flag("JUPITER_HEADLESS", "1")


class CIConfig(Config):
    """Continuous integration configuration."""

    HEADLESS: bool = True
    # CI runners are slower than workstations
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("JUPITER_TIMEOUT_MS", "20000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("JUPITER_NAVIGATION_TIMEOUT_MS", "30000"))
    REQUIRE_LIVE_SITE: bool = _env_flag("JUPITER_REQUIRE_SITE", "1")


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses the JUPITER_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("JUPITER_ENV", "local")
    return config.get(env, config["default"])
