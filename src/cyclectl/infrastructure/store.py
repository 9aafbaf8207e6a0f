"""GraphStore — repository pattern with scoped transactions.

The GraphStore is the single dependency injected into every service. It
owns the database engine and the graph engine. The :meth:`transaction`
context manager wraps vertex/edge creation and the reads that follow in
one atomic unit:

- **DB**: Native SQLAlchemy ``engine.begin()`` with auto-commit/rollback.
- **Graph**: Cache is invalidated on transaction end (success or failure).
  The graph is lazy-rebuilt from DB on next access.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import insert, select

from cyclectl.domain.types import RELATION, VERTEX_LABEL, Edge, Vertex
from cyclectl.infrastructure.database.engine import init_database
from cyclectl.infrastructure.database.schema import edges, vertices
from cyclectl.infrastructure.graph.engine import GraphEngine

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from cyclectl.config.settings import CycleSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction context over a single DB connection.

    Reads made through this object see the transaction's own pending
    writes, which is what the cycle check after a build relies on.
    """

    conn: Connection

    def create_vertex(self, name: str, created: str, *, label: str = VERTEX_LABEL) -> Vertex:
        """Insert a vertex and return it with its generated id."""
        result = self.conn.execute(
            insert(vertices).values(name=name, label=label, created=created)
        )
        (vertex_id,) = result.inserted_primary_key
        return Vertex(id=int(vertex_id), name=name)

    def create_edge(self, source_id: int, target_id: int, created: str) -> Edge:
        """Insert a directed ``source -> target`` edge of the fixed relation kind."""
        result = self.conn.execute(
            insert(edges).values(
                source_id=source_id,
                target_id=target_id,
                relation=RELATION,
                created=created,
            )
        )
        (edge_id,) = result.inserted_primary_key
        return Edge(id=int(edge_id), source_id=source_id, target_id=target_id)

    def adjacency(self, *, within: Collection[int]) -> dict[int, list[int]]:
        """Outgoing targets per vertex, restricted to edges between members of *within*.

        Loaded with one query over the id range of *within*.
        One entry per edge, so parallel edges repeat the target.
        """
        members = frozenset(within)
        adjacency: defaultdict[int, list[int]] = defaultdict(list)
        if not members:
            return adjacency

        stmt = (
            select(edges.c.source_id, edges.c.target_id)
            .where(edges.c.source_id.between(min(members), max(members)))
            .order_by(edges.c.id)
        )
        for row in self.conn.execute(stmt):
            if row.source_id in members and row.target_id in members:
                adjacency[int(row.source_id)].append(int(row.target_id))
        return adjacency


# ---------------------------------------------------------------------------
# GraphStore — the repository
# ---------------------------------------------------------------------------


class GraphStore:
    """Repository encapsulating database and graph access.

    Constructed once at CLI startup from :class:`CycleSettings` and stored
    on the Click context.  Services receive the store via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: CycleSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.root, settings.store.name)
        self._graph = GraphEngine(self._engine)
        logger.debug("Opened graph store at %s", self.root)

    @property
    def root(self) -> Path:
        """The store root directory."""
        return self._settings.store_root

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def graph(self) -> GraphEngine:
        """The graph engine (lazy-built from committed DB state)."""
        return self._graph

    @property
    def settings(self) -> CycleSettings:
        """The resolved settings for this store."""
        return self._settings

    def close(self) -> None:
        """Release pooled connections."""
        self._graph.invalidate()
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Scoped transaction: commit on success, rollback on any exception.

        **Warning:** Do not access ``store.graph`` within a transaction
        block — the graph is built from committed DB state and will not
        reflect pending writes.  Use the yielded transaction's lookups
        instead, or access the graph only *after* the transaction succeeds.

        Usage::

            with store.transaction() as txn:
                a = txn.create_vertex("A", created)
                b = txn.create_vertex("B", created)
                txn.create_edge(a.id, b.id, created)
                # Everything commits on success, rolls back on failure.
        """
        try:
            with self._engine.begin() as conn:
                yield StoreTransaction(conn=conn)
        finally:
            self._graph.invalidate()
