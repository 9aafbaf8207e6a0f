"""ProcedureService — build a random graph and check it for cycles.

``create_and_check`` is the one write operation: vertex creation, edge
sampling and the cycle check share a single store transaction, so the
check sees exactly this invocation's edges and a failure anywhere leaves
the store untouched.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from cyclectl.domain.cycles import has_cycle
from cyclectl.services.base import BaseService
from cyclectl.services.builder import GraphBuilder
from cyclectl.services.result import ServiceResult
from cyclectl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ProcedureService(BaseService):
    """Runs the create-and-check procedure against the store."""

    @traced
    def create_and_check(
        self,
        names: Sequence[str],
        edge_count: int,
        *,
        seed: int | None = None,
    ) -> ServiceResult:
        """Create one vertex per name plus *edge_count* random edges, then report cycles.

        Only cycles made entirely of the vertices created here count;
        anything already in the store is ignored.

        Args:
            names: Vertex names, duplicates allowed, may be empty.
            edge_count: Edges to add; zero or negative adds none.
            seed: Overrides ``[builder] seed`` for this call.
        """
        op = "create_and_check"
        builder_cfg = self._store.settings.builder
        if seed is None:
            seed = builder_cfg.seed
        rng = random.Random(seed)

        try:
            with self._store.transaction() as txn:
                with trace_span("build") as span:
                    outcome = GraphBuilder(txn, rng=rng, label=builder_cfg.label).build(
                        names, edge_count
                    )
                    if span:
                        span.annotate("vertices", len(outcome.vertices))
                        span.annotate("edges", len(outcome.edges))

                created_ids = frozenset(outcome.vertex_ids)
                with trace_span("detect") as span:
                    adjacency = txn.adjacency(within=created_ids)
                    cyclic = has_cycle(created_ids, lambda v: adjacency.get(v, ()))
                    if span:
                        span.annotate("cycle", cyclic)
        except SQLAlchemyError as exc:
            logger.warning("create_and_check rolled back: %s", exc)
            return ServiceResult.failure(
                op,
                "STORE_ERROR",
                f"Graph store failure, no changes were kept: {exc}",
                names=list(names),
                edge_count=edge_count,
            )

        logger.debug(
            "create_and_check: %d vertices, %d edges, cycle=%s",
            len(outcome.vertices),
            len(outcome.edges),
            cyclic,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "result": cyclic,
                "vertices": len(outcome.vertices),
                "edges": len(outcome.edges),
                "vertex_ids": outcome.vertex_ids,
                "edge_pairs": [[e.source_id, e.target_id] for e in outcome.edges],
            },
        )
