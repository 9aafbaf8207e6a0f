"""Directed cycle detection over an induced subgraph.

The subgraph is given as a vertex id set plus a successor lookup.
Only edges whose both endpoints are in the set participate; targets
outside the set are skipped even if the lookup yields them.

Uses an explicit stack (white/gray/black colouring) rather than
recursion so long chains do not hit the interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator
from enum import IntEnum

type SuccessorLookup = Callable[[int], Iterable[int]]


class _Color(IntEnum):
    WHITE = 0  # not yet reached
    GRAY = 1  # on the current DFS path
    BLACK = 2  # fully explored


def has_cycle(vertex_ids: Collection[int], successors: SuccessorLookup) -> bool:
    """Return True iff the subgraph induced by *vertex_ids* has a directed cycle.

    A self-loop counts as a cycle of length one. Each vertex is expanded
    at most once, so the cost is O(V + E) over the induced subgraph.

    Args:
        vertex_ids: Members of the induced subgraph.
        successors: Returns the target ids of a vertex's outgoing edges.
    """
    members = frozenset(vertex_ids)
    color: dict[int, _Color] = dict.fromkeys(members, _Color.WHITE)

    def _members_after(vertex_id: int) -> Iterator[int]:
        return (t for t in successors(vertex_id) if t in members)

    for root in members:
        if color[root] is not _Color.WHITE:
            continue

        color[root] = _Color.GRAY
        stack: list[tuple[int, Iterator[int]]] = [(root, _members_after(root))]

        while stack:
            vertex_id, pending = stack[-1]
            advanced = False
            for target in pending:
                state = color[target]
                if state is _Color.GRAY:
                    return True
                if state is _Color.WHITE:
                    color[target] = _Color.GRAY
                    stack.append((target, _members_after(target)))
                    advanced = True
                    break
            if not advanced:
                color[vertex_id] = _Color.BLACK
                stack.pop()

    return False
