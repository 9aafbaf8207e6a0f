"""Vertex and edge value types.

Identity is the store-generated integer ``id``; ``name`` is a display
label and may repeat. Both types are frozen once created.
"""

from __future__ import annotations

from dataclasses import dataclass

# Single relation kind for every edge in this domain.
RELATION = "RELATION"

# Label attached to every vertex created by the builder.
VERTEX_LABEL = "node"


@dataclass(frozen=True)
class Vertex:
    """A named vertex identified by its store id."""

    id: int
    name: str


@dataclass(frozen=True)
class Edge:
    """A directed ``source -> target`` edge.

    ``id`` keeps parallel edges between the same ordered pair distinct.
    """

    id: int
    source_id: int
    target_id: int
    relation: str = RELATION
