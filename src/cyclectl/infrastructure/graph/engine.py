"""GraphEngine — lazy-built NetworkX graph from SQLite vertices and edges.

Rebuilt per invocation, no cross-invocation cache. Parallel edges are
kept (MultiDiGraph) so edge counts match the store exactly.
Commands that don't need graph operations never build it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

type _Graph = nx.MultiDiGraph


class GraphEngine:
    """Lazy-loading graph engine backed by committed SQLite state."""

    def __init__(self, db: Engine) -> None:
        self._db = db
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building from DB on first access."""
        if self._graph is None:
            self._graph = self._build_from_db()
        return self._graph

    def invalidate(self) -> None:
        """Clear the cached graph, forcing rebuild on next access."""
        self._graph = None

    def _build_from_db(self) -> _Graph:
        """Build a NetworkX MultiDiGraph from the vertices and edges tables.

        Loads all vertices first (so isolated vertices appear in the graph),
        then adds edges keyed by their store id.
        """
        from sqlalchemy import select

        from cyclectl.infrastructure.database.schema import edges, vertices

        g: _Graph = nx.MultiDiGraph()
        with self._db.connect() as conn:
            for row in conn.execute(select(vertices.c.id, vertices.c.name, vertices.c.label)):
                g.add_node(row.id, name=row.name, label=row.label)

            for row in conn.execute(select(edges).order_by(edges.c.id)):
                g.add_edge(row.source_id, row.target_id, key=row.id, relation=row.relation)
        return g
