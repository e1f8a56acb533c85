"""
Engine Registry - Arena of engines addressable by any number of ids.

Engines live in a dense list and are addressed by their index. A separate
table maps every id (primary id and shorthands) to an index, so several
ids can name one engine. Engines only refer to each other by id, looked up
through the registry at resolution time.

The registry is built once at startup and is read-only afterwards, apart
from alias(), which only adds ids.
"""

from typing import Iterator, Optional, Union

from loguru import logger

from ..errors import ConfigError, EstError
from .engines import ENGINE_TYPES, Engine

DEFAULT_ID = ""


class RegistryError(EstError):
    """Base class for registry modification failures."""

    def __init__(self, engine_id: str):
        super().__init__(engine_id)
        self.engine_id = engine_id


class AlreadyExists(RegistryError):
    def __str__(self):
        return f"Engine with id {self.engine_id!r} already exists."


class NotFound(RegistryError):
    def __str__(self):
        return f"Engine with id {self.engine_id!r} does not exist."


class EngineRegistry:
    """Engines by key, keys by id."""

    def __init__(self):
        self._engines: list[Engine] = []
        self._ids: dict[str, int] = {}
        self._descriptions: dict[int, Optional[str]] = {}

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, engine_id: str) -> bool:
        return engine_id in self._ids

    def get(self, engine_id: str) -> Optional[Engine]:
        key = self._ids.get(engine_id)
        return None if key is None else self._engines[key]

    def description(self, engine_id: str) -> Optional[str]:
        key = self._ids.get(engine_id)
        return None if key is None else self._descriptions.get(key)

    def iter_ids(self) -> Iterator[str]:
        return iter(self._ids)

    def insert(self, engine: Engine, ids: list[str], description: Optional[str] = None) -> int:
        """
        Add an engine under one or more ids and return its key.

        All ids are checked before anything is stored, so a failed insert
        leaves the registry untouched.

        Raises:
            AlreadyExists: if any id is taken (or repeated in ids)
        """
        seen = set()
        for engine_id in ids:
            if engine_id in self._ids or engine_id in seen:
                raise AlreadyExists(engine_id)
            seen.add(engine_id)

        key = len(self._engines)
        self._engines.append(engine)
        self._descriptions[key] = description
        for engine_id in ids:
            self._ids[engine_id] = key
        return key

    def alias(self, new_id: str, existing_id: str) -> None:
        """
        Register new_id as another name for the engine behind existing_id.

        Raises:
            AlreadyExists: if new_id is taken
            NotFound: if existing_id is unknown
        """
        if new_id in self._ids:
            raise AlreadyExists(new_id)

        key = self._ids.get(existing_id)
        if key is None:
            raise NotFound(existing_id)

        self._ids[new_id] = key

    @classmethod
    def compose(cls, descriptions: list[dict]) -> "EngineRegistry":
        """
        Build a registry from declarative engine descriptions.

        Each description is a table with an 'id', a 'type' tag, the fields of
        that type, an optional 'shorthand' (string or list of strings) and an
        optional 'description'.

        Raises:
            ConfigError: on a malformed description
            AlreadyExists: if two engines claim the same id
        """
        registry = cls()
        for spec in descriptions:
            engine, ids, description = _build_engine(spec)
            registry.insert(engine, ids, description)
            logger.debug(f"Registered {engine!r} as {', '.join(map(repr, ids))}")
        return registry


def _shorthands(value: Union[None, str, list], identifier: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(s, str) for s in value):
        return list(value)
    raise ConfigError(f"engine '{identifier}': 'shorthand' must be a string or a list of strings")


def _build_engine(spec: dict) -> tuple[Engine, list[str], Optional[str]]:
    """Turn one engine description into (engine, ids, description)."""
    if not isinstance(spec, dict):
        raise ConfigError(f"engine description must be a table, got {spec!r}")

    identifier = spec.get("id")
    if not isinstance(identifier, str) or identifier == DEFAULT_ID:
        raise ConfigError(f"engine 'id' must be a non-empty string, got {identifier!r}")

    engine_type = spec.get("type")
    builder = ENGINE_TYPES.get(engine_type)
    if builder is None:
        raise ConfigError(
            f"engine '{identifier}': unknown type {engine_type!r} "
            f"(expected one of {', '.join(sorted(ENGINE_TYPES))})"
        )

    ids = [identifier] + _shorthands(spec.get("shorthand"), identifier)
    if DEFAULT_ID in ids:
        raise ConfigError(f"engine '{identifier}': the empty id is reserved for the default engine")

    description = spec.get("description")
    if description is not None and not isinstance(description, str):
        raise ConfigError(f"engine '{identifier}': 'description' must be a string")

    return builder.compose(identifier, spec), ids, description
