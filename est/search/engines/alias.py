"""
Alias Engine - Another name for an existing engine.

Except for its own identity in the mention path, an alias behaves exactly
like the engine it points at.

Config:
    [[engines]]
    id = "gg"
    type = "alias"
    to = "google"
"""

from ..reaction import Forward
from .base import Engine, require_str


class Alias(Engine):
    """Forward unconditionally to a fixed engine, replacing the head segment."""

    def __init__(self, identifier: str, to: str):
        super().__init__(identifier)
        self.to = to

    def react(self, query, instance):
        return Forward(self.to, 1)

    @classmethod
    def compose(cls, identifier: str, spec: dict) -> "Alias":
        return cls(identifier, require_str(spec, "to", "alias", identifier))
