"""Configuration models and loaders."""

from curvekit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from curvekit.core.config.models import AppConfig, CurveDefaults, LoggingConfig

__all__ = [
    "AppConfig",
    "CurveDefaults",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
