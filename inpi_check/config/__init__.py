"""Configuration module."""

from .settings import (
    AvailabilityConfig,
    FamousMarksConfig,
    InfosimplesConfig,
    LLMConfig,
    LoggingConfig,
    Settings,
    load_settings,
)

__all__ = [
    "AvailabilityConfig",
    "FamousMarksConfig",
    "InfosimplesConfig",
    "LLMConfig",
    "LoggingConfig",
    "Settings",
    "load_settings",
]
