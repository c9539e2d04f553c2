"""Configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for simple_startup_log."""

    LOG_LEVEL: str
    HOSTNAME_RESOLVE_THRESHOLD_MS: int
    PRINT_BANNER: bool
