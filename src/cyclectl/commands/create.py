"""Command: create vertices and random edges, then report cycles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cyclectl.commands._base import CycleCommand
from cyclectl.services.procedure import ProcedureService

if TYPE_CHECKING:
    from cyclectl.commands._context import AppContext


@click.command(
    cls=CycleCommand,
    examples="""\
  cyclectl create A B C D --edges 5
  cyclectl create A B C --edges 3 --seed 7
  cyclectl --json create A B --edges 1
  cyclectl -q create A""",
)
@click.argument("names", nargs=-1)
@click.option(
    "-n",
    "--edges",
    "edge_count",
    default=0,
    type=int,
    show_default=True,
    help="Random directed edges to add (zero or negative adds none).",
)
@click.option("--seed", default=None, type=int, help="Seed the random edge draws.")
@click.pass_obj
def create(app: AppContext, names: tuple[str, ...], edge_count: int, seed: int | None) -> None:
    """Create one vertex per NAME plus random edges, and report whether they form a cycle."""
    app.emit(ProcedureService(app.store).create_and_check(list(names), edge_count, seed=seed))
