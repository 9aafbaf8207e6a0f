"""Shared pytest fixtures and test helpers for cyclectl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import networkx as nx
import pytest
from click.testing import CliRunner
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from cyclectl.config.settings import CycleSettings
from cyclectl.domain.types import Vertex
from cyclectl.infrastructure.database.engine import init_database
from cyclectl.infrastructure.database.schema import edges, vertices
from cyclectl.infrastructure.store import GraphStore
from cyclectl.services._helpers import now_iso


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary store directory, isolated from any ambient cyclectl config."""
    monkeypatch.delenv("CYCLECTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def store(store_root: Path) -> Iterator[GraphStore]:
    """Fully initialized graph store on a temp directory."""
    s = GraphStore(CycleSettings.from_cli(store_root=store_root))
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_store(store_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp store root so the CLI opens an isolated store."""
    monkeypatch.chdir(store_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_manual(
    store: GraphStore,
    names: list[str],
    pairs: list[tuple[int, int]],
) -> list[Vertex]:
    """Create vertices for *names* and edges between them by index, committed."""
    created = now_iso()
    with store.transaction() as txn:
        made = [txn.create_vertex(name, created) for name in names]
        for src, dst in pairs:
            txn.create_edge(made[src].id, made[dst].id, created)
    return made


def networkx_has_cycle(vertex_ids: list[int], pairs: list[list[int]]) -> bool:
    """Independent oracle: does the induced digraph contain a directed cycle?"""
    members = set(vertex_ids)
    g = nx.MultiDiGraph()
    g.add_nodes_from(members)
    g.add_edges_from((s, t) for s, t in pairs if s in members and t in members)
    return not nx.is_directed_acyclic_graph(g)


def count_rows(store: GraphStore) -> tuple[int, int]:
    """Committed ``(vertices, edges)`` row counts."""
    with store.engine.connect() as conn:
        n_vertices = conn.execute(select(func.count()).select_from(vertices)).scalar_one()
        n_edges = conn.execute(select(func.count()).select_from(edges)).scalar_one()
    return n_vertices, n_edges
