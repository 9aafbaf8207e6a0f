"""GraphBuilder — create named vertices and random directed edges.

Runs inside a caller-owned :class:`StoreTransaction`; nothing it writes
is visible outside until that transaction commits.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cyclectl.domain.types import VERTEX_LABEL, Edge, Vertex
from cyclectl.services._helpers import now_iso

if TYPE_CHECKING:
    from cyclectl.infrastructure.store import StoreTransaction

logger = logging.getLogger(__name__)


@dataclass
class BuildOutcome:
    """Vertices in input order and edges in creation order."""

    vertices: list[Vertex] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @property
    def vertex_ids(self) -> list[int]:
        return [v.id for v in self.vertices]


def draw_distinct_pair(rng: random.Random, size: int) -> tuple[int, int]:
    """Draw two independent uniform indices in ``[0, size)``, redrawing while equal.

    Raises:
        ValueError: If *size* < 2 (no distinct pair exists).
    """
    if size < 2:
        msg = f"Need at least 2 vertices to draw a distinct pair, got {size}"
        raise ValueError(msg)

    while True:
        from_index = rng.randrange(size)
        to_index = rng.randrange(size)
        if from_index != to_index:
            return from_index, to_index


class GraphBuilder:
    """Creates one vertex per name and *edge_count* random edges between them."""

    def __init__(
        self,
        txn: StoreTransaction,
        *,
        rng: random.Random | None = None,
        label: str = VERTEX_LABEL,
    ) -> None:
        self._txn = txn
        self._rng = rng or random.Random()
        self._label = label

    def build(self, names: Sequence[str], edge_count: int) -> BuildOutcome:
        """Create the vertices for *names*, then add the random edges.

        Vertices are always created, one per name, duplicates included.
        A negative *edge_count* is treated as zero. With fewer than two
        vertices no edges are created.
        """
        created = now_iso()
        outcome = BuildOutcome()

        for name in names:
            outcome.vertices.append(self._txn.create_vertex(name, created, label=self._label))

        size = len(outcome.vertices)
        if size < 2 or edge_count <= 0:
            logger.debug("Created %d vertices, no edges (edge_count=%d)", size, edge_count)
            return outcome

        for _ in range(edge_count):
            from_index, to_index = draw_distinct_pair(self._rng, size)
            source = outcome.vertices[from_index]
            target = outcome.vertices[to_index]
            outcome.edges.append(self._txn.create_edge(source.id, target.id, created))

        logger.debug("Created %d vertices and %d edges", size, len(outcome.edges))
        return outcome
