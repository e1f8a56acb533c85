"""
Search package - Query parsing, engines and the resolution loop.

Raw text becomes a Query, which an Instance threads through its registry
of engines until one of them navigates.
"""

from .query import Query, QuerySyntaxError, parse_query
from .reaction import (
    AcceptanceError,
    BadConfig,
    Forward,
    Navigate,
    NoEngine,
    NotAccepted,
    Nothing,
    Panic,
    ReactionError,
    TooManyForward,
)
from .registry import AlreadyExists, EngineRegistry, NotFound, RegistryError
from .router import MAX_FORWARD_DEPTH, Instance

__all__ = [
    "Query",
    "QuerySyntaxError",
    "parse_query",
    "Navigate",
    "Forward",
    "AcceptanceError",
    "NoEngine",
    "ReactionError",
    "Nothing",
    "BadConfig",
    "NotAccepted",
    "Panic",
    "TooManyForward",
    "EngineRegistry",
    "RegistryError",
    "AlreadyExists",
    "NotFound",
    "Instance",
    "MAX_FORWARD_DEPTH",
]
