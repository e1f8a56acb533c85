"""
Est configuration - Builds an Instance from config.toml.

Example config.toml:
    default = "google"

    [settings.logging]
    level = "INFO"

    [[engines]]
    id = "google"
    type = "cloze"
    template = "https://www.google.com/search?q={}"
    shorthand = ["g"]
    description = "Google"
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

from .errors import ConfigError
from .search import Instance
from .utils.helpers import config_search_paths, load_settings, locate_config_file


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Locate and parse the config file.

    Raises:
        ConfigError: if no config file exists or it is not valid TOML
    """
    config_path = locate_config_file(path)
    if config_path is None:
        searched = [Path(path)] if path is not None else config_search_paths()
        raise ConfigError(
            "Cannot find config.toml, searched: " + ", ".join(str(p) for p in searched)
        )

    try:
        config = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e

    logger.debug(f"Loaded config from {config_path}")
    return config


def load_instance(path: Optional[Path] = None) -> Instance:
    """Load the config file and compose a ready Instance from it."""
    return Instance.compose(load_config(path))


def configure_logging(settings: Dict[str, Any]) -> None:
    """
    Route loguru output to stderr at the configured level.

    Raises:
        ConfigError: if settings.logging is not a table or names an unknown level
    """
    logging = settings.get("logging")
    if not isinstance(logging, dict):
        raise ConfigError(f"'settings.logging' must be a table, got {logging!r}")

    level = str(logging.get("level", "WARNING")).upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigError(f"Unknown log level {level!r} in settings.logging") from e

    logger.remove()
    logger.add(sys.stderr, level=level)


__all__ = ["load_config", "load_instance", "load_settings", "configure_logging"]
