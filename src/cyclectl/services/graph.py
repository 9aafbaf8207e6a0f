"""GraphService — read-only inspection of the committed store.

Uses ``self._store.graph.graph`` (triggers lazy build) and NetworkX for
cycle enumeration. These are reporting tools; the procedure's own cycle
answer comes from :func:`cyclectl.domain.cycles.has_cycle`.
"""

from __future__ import annotations

from itertools import islice
from typing import Any

import networkx as nx

from cyclectl.services.base import BaseService
from cyclectl.services.result import ServiceResult
from cyclectl.services.telemetry import trace_span, traced


class GraphService(BaseService):
    """Handles graph dumps, counts and cycle listing."""

    @traced
    def stats(self) -> ServiceResult:
        """Vertex and edge counts across the whole store."""
        g = self._store.graph.graph
        return ServiceResult(
            ok=True,
            op="stats",
            data={"vertices": g.number_of_nodes(), "edges": g.number_of_edges()},
        )

    @traced
    def show(self) -> ServiceResult:
        """Dump every stored vertex with its outgoing edges."""
        g = self._store.graph.graph

        items: list[dict[str, Any]] = []
        for vertex_id in sorted(g.nodes):
            attrs = g.nodes[vertex_id]
            out = [
                {"edge_id": key, "target_id": target, "relation": data.get("relation", "")}
                for _, target, key, data in g.out_edges(vertex_id, keys=True, data=True)
            ]
            items.append(
                {
                    "id": vertex_id,
                    "name": attrs.get("name", ""),
                    "label": attrs.get("label", ""),
                    "out": out,
                }
            )

        return ServiceResult(
            ok=True,
            op="show",
            data={"count": len(items), "edges": g.number_of_edges(), "items": items},
        )

    @traced
    def cycles(self, vertex_ids: list[int], *, limit: int | None = None) -> ServiceResult:
        """List simple directed cycles inside the subgraph induced by *vertex_ids*.

        Args:
            vertex_ids: Store ids of the vertices to restrict to.
            limit: Max cycles to list; defaults to ``[detector] max_listed_cycles``.
        """
        g = self._store.graph.graph
        missing = sorted(set(vertex_ids) - set(g.nodes))
        if missing:
            return ServiceResult.failure(
                "cycles",
                "NOT_FOUND",
                f"Vertices not found in store: {', '.join(map(str, missing))}",
                missing=missing,
            )

        if limit is None:
            limit = self._store.settings.detector.max_listed_cycles

        # Parallel edges would repeat the same vertex cycle, so collapse them.
        induced = nx.DiGraph(g.subgraph(vertex_ids))

        with trace_span("simple_cycles") as span:
            found = [list(c) for c in islice(nx.simple_cycles(induced), limit + 1)]
            truncated = len(found) > limit
            found = found[:limit]
            if span:
                span.annotate("cycles", len(found))

        items = [
            {
                "ids": cycle,
                "names": [g.nodes[v].get("name", "") for v in cycle],
                "length": len(cycle),
            }
            for cycle in found
        ]
        warnings = [f"Cycle listing truncated at {limit}"] if truncated else []

        return ServiceResult(
            ok=True,
            op="cycles",
            data={"has_cycle": bool(items), "count": len(items), "items": items},
            warnings=warnings,
        )
