"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from curvekit.core.config.models import AppConfig
from curvekit.core.utils import logging as logging_utils

logger = logging.getLogger(__name__)

ENV_PERCENT_INSET = "CURVEKIT_PERCENT_INSET"
ENV_LOG_LEVEL = "CURVEKIT_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("curves.json")
        'json'
        >>> detect_format("curves.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    with path.open("r", encoding="utf-8") as f:
        if fmt == "json":
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                content = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Values from the environment override the file:
    CURVEKIT_PERCENT_INSET sets curves.percent_inset and CURVEKIT_LOG_LEVEL
    sets logging.level.

    Args:
        path: Path to config file. If None, starts from defaults.

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ValidationError: If config (after overrides) is invalid
    """
    raw: dict[str, Any] = load_config(path) if path is not None else {}

    percent_inset = os.getenv(ENV_PERCENT_INSET)
    if percent_inset is not None:
        raw.setdefault("curves", {})["percent_inset"] = percent_inset

    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level is not None:
        raw.setdefault("logging", {})["level"] = log_level.upper()

    config = AppConfig.model_validate(raw)
    logger.debug("Loaded app config from %s", path or "defaults")
    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads defaults if None)
    """
    if config is None:
        config = load_app_config()

    logging_utils.configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )
