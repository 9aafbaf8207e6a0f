"""Command group: inspect the stored graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cyclectl.commands._base import CycleGroup
from cyclectl.services.graph import GraphService

if TYPE_CHECKING:
    from cyclectl.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  cyclectl graph show
  cyclectl graph stats
  cyclectl graph cycles 1 2 3 4
  cyclectl graph cycles 1 2 3 --limit 5"""


@click.group(cls=CycleGroup, examples=_GRAPH_EXAMPLES)
def graph() -> None:
    """Inspect vertices, edges and cycles in the store."""


@graph.command(
    examples="""\
  cyclectl graph show
  cyclectl --json graph show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Dump every vertex with its outgoing edges."""
    app.emit(GraphService(app.store).show())


@graph.command(
    examples="""\
  cyclectl graph stats"""
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Count vertices and edges."""
    app.emit(GraphService(app.store).stats())


@graph.command(
    examples="""\
  cyclectl graph cycles 1 2 3
  cyclectl --json graph cycles 5 6 7 8 --limit 3"""
)
@click.argument("vertex_ids", nargs=-1, type=int, required=True)
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Max cycles to list.")
@click.pass_obj
def cycles(app: AppContext, vertex_ids: tuple[int, ...], limit: int | None) -> None:
    """List directed cycles among the given VERTEX_IDS only."""
    app.emit(GraphService(app.store).cycles(list(vertex_ids), limit=limit))
