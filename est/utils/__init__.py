# Est Utilities Package
"""
Shared helpers: settings loading and Unicode classification tables.
"""

from .helpers import load_settings, locate_config_file
from .unicode import has_script, script_matcher

__all__ = ["load_settings", "locate_config_file", "has_script", "script_matcher"]
