"""SQLAlchemy Core table definitions for the cyclectl store.

Vertices and edges use AUTOINCREMENT integer keys, so an id is never
handed out twice even after rows are deleted. Edges carry their own id
so parallel edges between the same ordered pair can coexist.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, MetaData, Table, Text

from cyclectl.domain.types import RELATION, VERTEX_LABEL

metadata = MetaData()

vertices = Table(
    "vertices",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("label", Text, nullable=False, default=VERTEX_LABEL, server_default=VERTEX_LABEL),
    Column("created", Text, nullable=False),
    sqlite_autoincrement=True,
)

edges = Table(
    "edges",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("source_id", Integer, ForeignKey("vertices.id"), nullable=False),
    Column("target_id", Integer, ForeignKey("vertices.id"), nullable=False),
    Column("relation", Text, nullable=False, default=RELATION, server_default=RELATION),
    Column("created", Text, nullable=False),
    sqlite_autoincrement=True,
)

# ---------------------------------------------------------------------------
# Indexes for edge lookups in both directions
# ---------------------------------------------------------------------------

Index("ix_vertices_name", vertices.c.name)
Index("ix_edges_source", edges.c.source_id)
Index("ix_edges_target", edges.c.target_id)
