"""Command: data file initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from biclog.commands._base import BicCommand

if TYPE_CHECKING:
    from biclog.commands._context import AppContext

_INIT_EXAMPLES = """\
  biclog init bikes.db
  biclog -f ~/rides.db init
  biclog -v I bikes.db"""


@click.command("init", cls=BicCommand, examples=_INIT_EXAMPLES, aliases=["I"])
@click.argument("path", required=False, default=None)
@click.pass_obj
def init_cmd(app: AppContext, path: str | None) -> None:
    """Init a new data file specified by the user."""
    from biclog.services.init import InitService

    app.emit(InitService(path or app.data_path).init_data_file())
