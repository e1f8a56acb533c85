"""
Namespace Engine - Routes to a child engine by the next mention segment.

Given "@rust.docs foo", the "rust" namespace looks at "docs", finds the
child engine it names and forwards there, consuming both segments. Without
a matching child the query falls through to the optional default engine.

Config:
    [[engines]]
    id = "rust"
    type = "namespace"
    default = "rust-std"        # optional

    [engines.children]
    docs = "docs-rs"
    crates = "crates-io"

A namespace without a default is routing-only: a bare "@rust" is rejected
before react() runs, and an unknown child yields Nothing.
"""

from typing import Optional

from ...errors import ConfigError
from ..reaction import Forward, NoEngine, Nothing
from .base import Engine, optional_str


class Namespace(Engine):
    """Dispatch on the first unresolved mention segment."""

    def __init__(self, identifier: str, children: dict, default: Optional[str] = None):
        super().__init__(identifier)
        self.children = dict(children)
        self.default = default

    def accept(self, query, instance):
        if self.default is None and not query.mention_tail:
            raise NoEngine()

    def react(self, query, instance):
        tail = query.mention_tail
        if tail and tail[0] in self.children:
            return Forward(self.children[tail[0]], 2)

        if self.default is not None:
            return Forward(self.default, 1)

        raise Nothing()

    @classmethod
    def compose(cls, identifier: str, spec: dict) -> "Namespace":
        default = optional_str(spec, "default", "namespace", identifier)
        children = spec.get("children", {})
        if not isinstance(children, dict):
            raise ConfigError(f"namespace engine '{identifier}': 'children' must be a table")

        for child, target in children.items():
            if not isinstance(target, str):
                raise ConfigError(
                    f"namespace engine '{identifier}': child '{child}' must name an engine id"
                )

        return cls(identifier, children, default)
