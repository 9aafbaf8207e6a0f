"""Tests for the Vertex and Edge value types."""

import dataclasses

import pytest

from cyclectl.domain.types import RELATION, Edge, Vertex


class TestVertex:
    def test_same_name_distinct_identity(self) -> None:
        assert Vertex(id=1, name="A") != Vertex(id=2, name="A")

    def test_frozen(self) -> None:
        v = Vertex(id=1, name="A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.name = "B"  # type: ignore[misc]


class TestEdge:
    def test_default_relation(self) -> None:
        assert Edge(id=1, source_id=1, target_id=2).relation == RELATION == "RELATION"

    def test_parallel_edges_distinct(self) -> None:
        assert Edge(id=1, source_id=3, target_id=4) != Edge(id=2, source_id=3, target_id=4)
