"""
Helper utilities for est.

Provides:
- Config file location (explicit path, $EST_CONFIG, cwd, XDG config home)
- Settings loading with defaults applied
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

CONFIG_FILE_NAME = "config.toml"

DEFAULT_SETTINGS = {
    "logging": {
        "level": "WARNING",
    },
}


def config_search_paths() -> List[Path]:
    """
    Candidate config file locations, in lookup order.

    Returns:
        [$EST_CONFIG, ./config.toml, $XDG_CONFIG_HOME/est/config.toml],
        skipping $EST_CONFIG when unset and falling back to ~/.config
        when XDG_CONFIG_HOME is unset
    """
    paths = []

    env_path = os.environ.get("EST_CONFIG")
    if env_path:
        paths.append(Path(env_path))

    paths.append(Path.cwd() / CONFIG_FILE_NAME)

    config_home = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(config_home) if config_home else Path.home() / ".config"
    paths.append(config_home / "est" / CONFIG_FILE_NAME)

    return paths


def locate_config_file(path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the config file to load.

    Args:
        path: Explicit path; returned as-is if it exists

    Returns:
        The first existing candidate, or None
    """
    candidates = [Path(path)] if path is not None else config_search_paths()
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract settings from a loaded config, with defaults applied.

    Args:
        config: Parsed config file; its optional [settings] table
            overrides DEFAULT_SETTINGS

    Example settings structure:
        {
            "logging": {
                "level": "DEBUG"
            }
        }
    """
    override = config.get("settings", {})
    if not isinstance(override, dict):
        return _deep_merge(DEFAULT_SETTINGS, {})
    return _deep_merge(DEFAULT_SETTINGS, override)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
