"""Domain layer — pure data model and graph algorithms.

This layer has no I/O. It must never import from infrastructure,
services, commands, or output.
"""

from cyclectl.domain.cycles import has_cycle
from cyclectl.domain.types import RELATION, VERTEX_LABEL, Edge, Vertex

__all__ = [
    "RELATION",
    "VERTEX_LABEL",
    "Edge",
    "Vertex",
    "has_cycle",
]
