"""Click command and group classes that understand an ``examples=`` keyword.

Passing ``examples`` adds an eager ``--examples`` flag that prints the
text and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(self.examples)
            ctx.exit(0)


class CycleCommand(_ExamplesMixin, click.Command):
    """Command with optional ``--examples``."""


class CycleGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`CycleCommand`."""

    command_class = CycleCommand
