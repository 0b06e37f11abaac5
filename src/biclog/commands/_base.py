"""Custom Click base classes with --examples and alias support.

Provides BicCommand and BicGroup that accept ``examples`` and
``aliases`` parameters. When ``--examples`` is passed, the command
prints usage examples and exits. Aliases (``A`` for ``add``, ``bt`` for
``bicycle_type``) are resolved by :meth:`BicGroup.get_command`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class BicCommand(click.Command):
    """Click Command subclass that supports ``--examples`` and aliases."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = tuple(aliases)
        if examples:
            _add_examples_option(self, examples)


class BicGroup(click.Group):
    """Click Group subclass that supports ``--examples`` and aliases.

    Sets ``command_class = BicCommand`` so all subcommands accept the
    extra parameters without explicit ``cls=`` each time.
    """

    command_class = BicCommand

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = tuple(aliases)
        if examples:
            _add_examples_option(self, examples)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Look up a subcommand by name, falling back to its aliases."""
        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd
        for candidate in self.commands.values():
            if cmd_name in getattr(candidate, "aliases", ()):
                return candidate
        return None

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """List subcommands with their aliases, e.g. ``add (A)``."""
        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            aliases = getattr(cmd, "aliases", ())
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, cmd.get_short_help_str(formatter.width)))
        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)
