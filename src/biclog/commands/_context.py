"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Carries the resolved settings and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from biclog.config.logging import configure_logging
from biclog.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from biclog.config.settings import BiclogSettings
    from biclog.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BiclogSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            data_file=settings.data_path,
        )

    @property
    def data_path(self) -> Path | None:
        """The data file resolved from ``--file``, env and config."""
        return self.settings.data_path

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout (if there is anything
          to say), returns normally. Warnings go to stderr.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            separator=self.settings.display.separator,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
