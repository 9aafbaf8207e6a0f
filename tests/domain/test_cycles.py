"""Tests for directed cycle detection over induced subgraphs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable

from cyclectl.domain.cycles import has_cycle


def _lookup(pairs: list[tuple[int, int]]) -> Callable[[int], Iterable[int]]:
    adjacency: dict[int, list[int]] = defaultdict(list)
    for src, dst in pairs:
        adjacency[src].append(dst)
    return lambda v: adjacency.get(v, [])


class TestHasCycle:
    def test_empty_set(self) -> None:
        assert has_cycle(set(), _lookup([])) is False

    def test_single_vertex_no_edges(self) -> None:
        assert has_cycle({1}, _lookup([])) is False

    def test_self_loop_counts(self) -> None:
        assert has_cycle({1}, _lookup([(1, 1)])) is True

    def test_three_cycle(self) -> None:
        # A -> B -> C -> A
        assert has_cycle({1, 2, 3}, _lookup([(1, 2), (2, 3), (3, 1)])) is True

    def test_two_cycle(self) -> None:
        assert has_cycle({1, 2}, _lookup([(1, 2), (2, 1)])) is True

    def test_shared_midpoint_is_not_a_cycle(self) -> None:
        # A -> B, C -> B: undirected triangle-ish shape, no directed cycle
        assert has_cycle({1, 2, 3}, _lookup([(1, 2), (3, 2)])) is False

    def test_diamond_is_acyclic(self) -> None:
        # A -> B -> C and A -> C reaches C twice without looping back
        assert has_cycle({1, 2, 3}, _lookup([(1, 2), (2, 3), (1, 3)])) is False

    def test_parallel_edges_are_not_a_cycle(self) -> None:
        assert has_cycle({1, 2}, _lookup([(1, 2), (1, 2), (1, 2)])) is False

    def test_cycle_outside_set_ignored(self) -> None:
        # 10 -> 11 -> 10 is a cycle, but neither is a member
        pairs = [(1, 2), (10, 11), (11, 10)]
        assert has_cycle({1, 2}, _lookup(pairs)) is False

    def test_cycle_through_outside_vertex_ignored(self) -> None:
        # 1 -> 2 -> 99 -> 1 closes only via a non-member
        pairs = [(1, 2), (2, 99), (99, 1)]
        assert has_cycle({1, 2}, _lookup(pairs)) is False

    def test_cycle_in_second_component(self) -> None:
        pairs = [(1, 2), (3, 4), (4, 5), (5, 3)]
        assert has_cycle({1, 2, 3, 4, 5}, _lookup(pairs)) is True

    def test_cycle_reached_after_finished_branch(self) -> None:
        # 1 -> 2 (dead end), 1 -> 3 -> 4 -> 3
        pairs = [(1, 2), (1, 3), (3, 4), (4, 3)]
        assert has_cycle({1, 2, 3, 4}, _lookup(pairs)) is True

    def test_long_chain_does_not_recurse(self) -> None:
        n = 20_000
        pairs = [(i, i + 1) for i in range(n)]
        assert has_cycle(set(range(n + 1)), _lookup(pairs)) is False
        assert has_cycle(set(range(n + 1)), _lookup([*pairs, (n, 0)])) is True

    def test_deterministic_for_fixed_graph(self) -> None:
        pairs = [(1, 2), (2, 3), (3, 4), (4, 2)]
        results = {has_cycle({1, 2, 3, 4}, _lookup(pairs)) for _ in range(10)}
        assert results == {True}

    def test_each_vertex_expanded_once(self) -> None:
        calls: list[int] = []
        adjacency = {1: [2, 3], 2: [4], 3: [4], 4: []}

        def successors(v: int) -> list[int]:
            calls.append(v)
            return adjacency[v]

        assert has_cycle({1, 2, 3, 4}, successors) is False
        assert sorted(calls) == [1, 2, 3, 4]
