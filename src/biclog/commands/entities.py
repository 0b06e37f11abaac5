"""Command groups: add, list, edit and delete entities.

Each group gets one subcommand per registered entity kind
(``bicycle_type``/``bt``, ``category``/``c``), all backed by
:class:`~biclog.services.entities.EntityService`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from biclog.commands._base import BicGroup
from biclog.domain.entities import ENTITY_KINDS, EntityKind
from biclog.services.entities import EntityService

if TYPE_CHECKING:
    from biclog.commands._context import AppContext

_name_option = click.option("-n", "--name", required=True, help="Name.")
_id_option = click.option(
    "-i",
    "--id",
    "entity_id",
    required=True,
    type=click.IntRange(min=0),
    help="ID of an object.",
)


@click.group(
    "add",
    cls=BicGroup,
    aliases=["A"],
    examples="""\
  biclog -f bikes.db add bicycle_type --name Road
  biclog -f bikes.db A bt -n MTB
  biclog -f bikes.db add category --name Commute""",
)
def add() -> None:
    """Add an object (bicycle type, trip category)."""


@click.group(
    "list",
    cls=BicGroup,
    aliases=["L"],
    examples="""\
  biclog -f bikes.db list bicycle_type
  biclog -f bikes.db L bt
  biclog --json -f bikes.db list category""",
)
def list_cmd() -> None:
    """List objects (bicycle types, trip categories)."""


@click.group(
    "edit",
    cls=BicGroup,
    aliases=["E"],
    examples="""\
  biclog -f bikes.db edit bicycle_type --id 1 --name Gravel
  biclog -v -f bikes.db E bt -i 2 -n Enduro""",
)
def edit() -> None:
    """Edit an object (bicycle type, trip category)."""


@click.group(
    "delete",
    cls=BicGroup,
    aliases=["D"],
    examples="""\
  biclog -f bikes.db delete bicycle_type --id 1
  biclog -v -f bikes.db D c -i 3""",
)
def delete() -> None:
    """Delete an object (bicycle type, trip category)."""


def _add_command(kind: EntityKind) -> click.Command:
    @add.command(kind.key, aliases=[kind.alias], help=f"Add new {kind.label}.")
    @_name_option
    @click.pass_obj
    def _cmd(app: AppContext, name: str) -> None:
        app.emit(EntityService(app.data_path, kind).add(name))

    return _cmd


def _list_command(kind: EntityKind) -> click.Command:
    @list_cmd.command(kind.key, aliases=[kind.alias], help=f"List available {kind.plural}.")
    @click.pass_obj
    def _cmd(app: AppContext) -> None:
        app.emit(EntityService(app.data_path, kind).list_all())

    return _cmd


def _edit_command(kind: EntityKind) -> click.Command:
    @edit.command(kind.key, aliases=[kind.alias], help=f"Edit {kind.label} with given id.")
    @_id_option
    @_name_option
    @click.pass_obj
    def _cmd(app: AppContext, entity_id: int, name: str) -> None:
        app.emit(EntityService(app.data_path, kind).edit(entity_id, name))

    return _cmd


def _delete_command(kind: EntityKind) -> click.Command:
    @delete.command(kind.key, aliases=[kind.alias], help=f"Delete {kind.label} with given id.")
    @_id_option
    @click.pass_obj
    def _cmd(app: AppContext, entity_id: int) -> None:
        app.emit(EntityService(app.data_path, kind).delete(entity_id))

    return _cmd


for _kind in ENTITY_KINDS.values():
    _add_command(_kind)
    _list_command(_kind)
    _edit_command(_kind)
    _delete_command(_kind)
