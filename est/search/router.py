"""
Instance - Drives a query through engines until one navigates.

Resolution starts at the engine named by the first mention segment (or the
default engine "" when there is no mention). Each step runs the engine's
accept() then react(). A Forward rewrites the mention path and moves on to
the named engine; a Navigate or any error ends the resolution.

The loop is bounded: after MAX_FORWARD_DEPTH engine steps without a
terminal reaction it gives up with TooManyForward, which catches cycles
such as two aliases pointing at each other.
"""

from typing import Optional

from loguru import logger

from ..errors import ConfigError
from .engines import Engine
from .query import Query
from .reaction import (
    AcceptanceError,
    Forward,
    Navigate,
    NoEngine,
    NotAccepted,
    Panic,
    ReactionError,
    TooManyForward,
    rewrite_mention,
)
from .registry import DEFAULT_ID, EngineRegistry, RegistryError

MAX_FORWARD_DEPTH = 16


class Instance:
    """A ready-to-use set of engines. Safe to share once built."""

    def __init__(self, registry: EngineRegistry):
        self.registry = registry

    def engine(self, engine_id: str) -> Engine:
        """
        Look up an engine by id.

        Raises:
            NotAccepted: wrapping NoEngine, if the id is unknown
        """
        engine = self.registry.get(engine_id)
        if engine is None:
            raise NotAccepted(NoEngine())
        return engine

    def description(self, engine_id: str) -> Optional[str]:
        return self.registry.description(engine_id)

    def engines(self) -> list[tuple[str, str, Optional[str]]]:
        """List (id, engine identifier, description) for every known id."""
        return [
            (engine_id, self.registry.get(engine_id).identifier, self.registry.description(engine_id))
            for engine_id in sorted(self.registry.iter_ids())
        ]

    def react(self, query: Query) -> Navigate:
        """
        Resolve a query to a Navigate.

        The query's mention path is rewritten in place as forwards are
        followed; do not share a query between resolutions.

        Raises:
            ReactionError: Nothing, BadConfig, NotAccepted, Panic or TooManyForward
        """
        engine = self.engine(query.mention_head)
        trail = [engine.identifier]

        for hop in range(1, MAX_FORWARD_DEPTH + 1):
            try:
                engine.accept(query, self)
            except AcceptanceError as e:
                logger.debug(f"{engine!r} rejected {query}: {e}")
                raise NotAccepted(e) from e

            try:
                reaction = engine.react(query, self)
            except ReactionError as e:
                logger.debug(f"{engine!r} failed on {query}: {type(e).__name__}: {e}")
                raise
            except Exception as e:
                logger.exception(f"{engine!r} crashed on {query}")
                raise Panic(f"{engine.identifier}: {e}") from e

            if isinstance(reaction, Navigate):
                logger.debug(f"Resolved {query} via {engine!r} after {hop} hop(s): {reaction.url}")
                return reaction
            if not isinstance(reaction, Forward):
                raise Panic(f"{engine.identifier}: unexpected reaction {reaction!r}")

            engine = self.engine(reaction.prepend)
            rewrite_mention(query.mention, reaction.prepend, reaction.skip)
            trail.append(engine.identifier)
            logger.debug(f"Hop {hop}: forward to {reaction.prepend!r} (skip={reaction.skip}), now {query}")

        logger.debug(f"Gave up after {MAX_FORWARD_DEPTH} hops: {' -> '.join(trail)}")
        raise TooManyForward(MAX_FORWARD_DEPTH, trail)

    def search(self, text: str) -> Navigate:
        """
        Parse raw text and resolve it.

        Raises:
            QuerySyntaxError: if text is not a well-formed query
            ReactionError: if resolution fails
        """
        return self.react(Query.parse(text))

    @classmethod
    def compose(cls, config: dict) -> "Instance":
        """
        Build an instance from declarative config: 'engines' and optional 'default'.

        Raises:
            ConfigError: on a malformed config or an unknown default engine
        """
        engines = config.get("engines", [])
        if not isinstance(engines, list):
            raise ConfigError("'engines' must be an array of tables")

        try:
            registry = EngineRegistry.compose(engines)
        except RegistryError as e:
            raise ConfigError(str(e)) from e

        default = config.get("default")
        if default is not None:
            if not isinstance(default, str):
                raise ConfigError(f"'default' must be an engine id, got {default!r}")
            try:
                registry.alias(DEFAULT_ID, default)
            except RegistryError as e:
                raise ConfigError(f"Cannot set default engine: {e}") from e

        logger.debug(f"Composed {len(registry)} engine(s), default={default!r}")
        return cls(registry)
