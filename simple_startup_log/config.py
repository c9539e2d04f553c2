"""Central configuration for simple_startup_log."""

from __future__ import annotations

import logging
import os

from .models.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME_RESOLVE_THRESHOLD_MS = 200


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Returns:
        Settings object with all configuration values.

    Note:
        Invalid numeric values fall back to sensible defaults.
        Boolean values accept: 1/true/yes (case-insensitive) as True.
    """
    log_level = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()

    threshold_raw = (os.environ.get("HOSTNAME_RESOLVE_THRESHOLD_MS") or "").strip()
    try:
        threshold = (
            int(threshold_raw)
            if threshold_raw
            else DEFAULT_HOSTNAME_RESOLVE_THRESHOLD_MS
        )
    except ValueError:
        threshold = DEFAULT_HOSTNAME_RESOLVE_THRESHOLD_MS

    print_banner = os.environ.get("PRINT_BANNER", "true").lower() in {
        "1",
        "true",
        "yes",
    }

    return Settings(
        LOG_LEVEL=log_level,
        HOSTNAME_RESOLVE_THRESHOLD_MS=threshold,
        PRINT_BANNER=print_banner,
    )


settings = _read_settings()


def validate_settings() -> None:
    """Log warnings for configuration values that will be ignored or clamped."""
    if not isinstance(logging.getLevelName(settings.LOG_LEVEL), int):
        logger.warning(
            "LOG_LEVEL %r is not a known level; falling back to INFO",
            settings.LOG_LEVEL,
        )
    if settings.HOSTNAME_RESOLVE_THRESHOLD_MS < 0:
        logger.warning(
            "HOSTNAME_RESOLVE_THRESHOLD_MS is negative; every lookup will be reported as slow"
        )


# Exported constants
LOG_LEVEL: str = settings.LOG_LEVEL
HOSTNAME_RESOLVE_THRESHOLD_MS: int = settings.HOSTNAME_RESOLVE_THRESHOLD_MS
PRINT_BANNER: bool = settings.PRINT_BANNER

validate_settings()
