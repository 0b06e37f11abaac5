"""Root CLI group for biclog with global flags and command registration."""

from __future__ import annotations

import click

from biclog import __version__
from biclog.commands import register_commands
from biclog.commands._base import BicGroup
from biclog.commands._context import AppContext
from biclog.config.settings import BiclogSettings


@click.group(cls=BicGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="biclog")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Show more output.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-f", "--file", "data_file", default=None, help="Data file.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_file: str | None,
) -> None:
    """biclog — keeps track of your bike rides."""
    # Unset flags fall through to env vars and the config file.
    settings = BiclogSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        data_file=data_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()
