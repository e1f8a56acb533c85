# Est Package
"""
Extensible search tool: resolves short commands into destination URLs.

Layers:
  - Query: parses "@rust.docs foo" style input
  - Engines: composable resolvers (alias, namespace, cloze, ortho)
  - Instance: drives a query through engines until it navigates
"""

from .search import Instance, Query

__version__ = "0.1.0-dev"

__all__ = ["Instance", "Query"]
