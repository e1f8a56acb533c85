"""
Error roots shared across the package.

Query, reaction and registry errors all derive from EstError, so a caller
that only wants "did est fail" can catch a single type.
"""


class EstError(Exception):
    """Base class for every error raised by est."""


class ConfigError(EstError):
    """The declarative configuration is missing, unreadable or malformed."""
