"""Configuration file loader for tmux-scratch."""

import json
import os
from pathlib import Path
from typing import Any

from tmux_scratch.logging_config import get_logger
from tmux_scratch.models.config import Config

logger = get_logger("tmux_scratch.services.config_loader")

# Keys accepted in the config file, with the type each value must have
FILE_KEYS: dict[str, type] = {
    "tmux_path": str,
    "session": str,
    "popup_width": str,
    "popup_height": str,
}


def get_config_file() -> Path:
    """Return the path of the user config file."""
    return Path.home() / ".tmux-scratch" / "config.json"


def load_config() -> Config:
    """Load configuration from the config file and environment.

    Environment variables override file config:
    - TMUX_SCRATCH_TMUX_PATH: tmux binary to run
    - TMUX_SCRATCH_SESSION: default session name

    Returns:
        Config with values from file, environment or defaults.
    """
    config = Config(**_load_from_file(get_config_file()))

    env_tmux = os.environ.get("TMUX_SCRATCH_TMUX_PATH")
    env_session = os.environ.get("TMUX_SCRATCH_SESSION")

    if env_tmux:
        config.tmux_path = env_tmux
    if env_session:
        config.session = env_session

    return config


def _load_from_file(config_file: Path) -> dict[str, Any]:
    """Read recognised settings from the config file.

    Returns:
        Mapping of Config field names to values; empty if the file is
        missing or unreadable.
    """
    if not config_file.exists():
        logger.debug(f"Config file not found: {config_file}")
        return {}

    try:
        with config_file.open() as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load config file: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_file}: expected a JSON object")
        return {}

    values: dict[str, Any] = {}
    for key, value in data.items():
        expected = FILE_KEYS.get(key)
        if expected is None:
            logger.debug(f"Ignoring unknown config key: {key}")
            continue
        if not isinstance(value, expected):
            logger.warning(f"Ignoring config key '{key}': expected {expected.__name__}")
            continue
        values[key] = value
    return values
