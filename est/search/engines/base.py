"""
Engine base class and shared config helpers for engine builders.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ...errors import ConfigError
from ..query import Query
from ..reaction import Reaction

if TYPE_CHECKING:
    from ..router import Instance


class Engine(ABC):
    """
    Base class for all engines.

    Engines are immutable once built. react() must be a pure function of the
    query and the instance: no I/O and no state kept between calls.
    """

    def __init__(self, identifier: str):
        self._identifier = identifier

    @property
    def identifier(self) -> str:
        """Primary id the engine was declared with."""
        return self._identifier

    def accept(self, query: Query, instance: "Instance") -> None:
        """
        Cheap pre-check run before react(). Accepts everything by default.

        Raises:
            AcceptanceError: if the engine cannot handle the query at all
        """

    @abstractmethod
    def react(self, query: Query, instance: "Instance") -> Reaction:
        """
        Resolve the query to a Navigate or a Forward.

        Raises:
            ReactionError: if the query cannot be resolved
        """
        ...

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier!r})"


def require_str(spec: dict, key: str, engine_type: str, identifier: str) -> str:
    """Fetch a mandatory string field from an engine description."""
    value = spec.get(key)
    if not isinstance(value, str):
        raise ConfigError(
            f"{engine_type} engine '{identifier}': '{key}' must be a string, got {value!r}"
        )
    return value


def optional_str(spec: dict, key: str, engine_type: str, identifier: str) -> Optional[str]:
    value = spec.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(
            f"{engine_type} engine '{identifier}': '{key}' must be a string, got {value!r}"
        )
    return value
