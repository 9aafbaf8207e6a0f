"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy store initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cyclectl.config.logging import configure_logging
from cyclectl.output.formatters import OutputSettings, format_result
from cyclectl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from cyclectl.config.settings import CycleSettings
    from cyclectl.infrastructure.store import GraphStore
    from cyclectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is opened on first use so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: CycleSettings) -> None:
        self.settings = settings
        self._store: GraphStore | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        enable_telemetry(settings.verbose)

    @property
    def store(self) -> GraphStore:
        """The graph store (created lazily on first access)."""
        if self._store is None:
            from cyclectl.infrastructure.store import GraphStore

            self._store = GraphStore(self.settings)
        return self._store

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
