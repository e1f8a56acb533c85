"""
Engines - Composable query resolvers.

Each engine either navigates or forwards the query to another engine.
ENGINE_TYPES maps the config "type" tag to the class that builds it.
"""

from .alias import Alias
from .base import Engine
from .cloze import Cloze, ClozeScoped
from .namespace import Namespace
from .ortho import Ortho

ENGINE_TYPES = {
    "alias": Alias,
    "cloze": Cloze,
    "namespace": Namespace,
    "ortho": Ortho,
}

__all__ = [
    "Engine",
    "Alias",
    "Cloze",
    "ClozeScoped",
    "Namespace",
    "Ortho",
    "ENGINE_TYPES",
]
