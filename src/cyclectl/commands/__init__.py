"""Subcommand modules for cyclectl.

Provides register_commands() which uses deferred imports to keep
``cyclectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``graph`` group and the standalone ``create`` command."""
    from cyclectl.commands.create import create
    from cyclectl.commands.graph import graph

    cli.add_command(create)
    cli.add_command(graph)
