"""Subcommand modules for biclog.

Provides register_commands() which uses deferred imports to keep
``biclog --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the verb groups and the init command on the root CLI group."""
    from biclog.commands.entities import add, delete, edit, list_cmd
    from biclog.commands.init_cmd import init_cmd

    cli.add_command(init_cmd)
    cli.add_command(add)
    cli.add_command(list_cmd)
    cli.add_command(edit)
    cli.add_command(delete)
