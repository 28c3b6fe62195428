"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_FORMATS = ("console", "json")


def load_settings_env(env_path: Optional[Path] = None) -> bool:
    """
    Load environment variables from a .env file.

    Existing environment variables are not overridden.

    Args:
        env_path: Path to .env file, defaults to .env in the working directory

    Returns:
        True if a file was found and loaded
    """
    return load_dotenv(env_path or Path.cwd() / ".env", override=False)


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased EDIBLE_LOG_LEVEL, defaults to "INFO"
    """
    return os.getenv("EDIBLE_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_format() -> str:
    """
    Get log renderer.

    Returns:
        "console" or "json" from EDIBLE_LOG_FORMAT, defaults to "console".
        Unknown values fall back to "console".
    """
    value = os.getenv("EDIBLE_LOG_FORMAT", "console").strip().lower()
    return value if value in LOG_FORMATS else "console"
