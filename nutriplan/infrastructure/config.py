"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv

from nutriplan.domain.nutrition_targets.core.constants import (
    DEFAULT_CALORIE_DEFICIT,
    DEFAULT_TARGET_BODY_FAT_PERCENT,
)

logger = structlog.get_logger(__name__)

LOG_FORMATS = ("console", "json")


def load_environment(env_file: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the environment.

    Args:
        env_file: Explicit path, defaults to ``.env`` in the working directory

    Returns:
        True if a file was found and loaded
    """
    path = env_file or Path.cwd() / ".env"
    if not path.exists():
        return False
    return load_dotenv(path)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid numeric setting, using default", name=name, value=raw, default=default)
        return default


def get_default_deficit() -> float:
    """
    Get the daily calorie deficit used when a request does not set one.

    Environment Variables:
        NUTRIPLAN_DEFAULT_DEFICIT: kcal per day (default 500)
    """
    return _get_float("NUTRIPLAN_DEFAULT_DEFICIT", DEFAULT_CALORIE_DEFICIT)


def get_target_body_fat() -> float:
    """
    Get the target body fat percentage used for goal projections.

    Environment Variables:
        NUTRIPLAN_TARGET_BODY_FAT: percent (default 13)
    """
    return _get_float("NUTRIPLAN_TARGET_BODY_FAT", DEFAULT_TARGET_BODY_FAT_PERCENT)


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get log renderer name.

    Unknown values fall back to ``console``.
    """
    fmt = os.getenv("LOG_FORMAT", "console").lower()
    if fmt not in LOG_FORMATS:
        return "console"
    return fmt
