"""Operation-specific Rich renderers for ServiceResult.

Ops are named ``<verb>_<entity kind>`` (plus ``init``); renderers are
dispatched on the verb. Mutating verbs only print their one-line summary
in verbose mode, matching the command-line contract that a quiet success
prints nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from biclog.domain.collections import EntityList
from biclog.domain.entities import Entity, EntityKind, get_entity_kind
from biclog.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from biclog.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console", bool, str], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, separator: str = "  ") -> str:
    """Render a ServiceResult to a string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(_verb(result.op), _render_generic)
        renderer(result, console, verbose, separator)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: ids for lists, else nothing."""
    if not result.ok:
        return error_line(result)

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)
    return ""


def error_line(result: ServiceResult) -> str:
    """One-line plain error message."""
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {msg}"


# ── Helpers ───────────────────────────────────────────────────────────


def _verb(op: str) -> str:
    return op.split("_", 1)[0]


def _kind(result: ServiceResult) -> EntityKind | None:
    key = result.data.get("kind")
    if not key:
        return None
    try:
        return get_entity_kind(str(key))
    except KeyError:
        return None


def _summary(console: Console, message: str) -> None:
    console.print(Text(message, style="biclog.summary"), soft_wrap=True)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_init(result: ServiceResult, console: Console, verbose: bool, _sep: str) -> None:
    if verbose:
        _summary(console, f"created file {result.data.get('path', '')}.")


def _render_add(result: ServiceResult, console: Console, verbose: bool, _sep: str) -> None:
    if verbose:
        kind = _kind(result)
        label = kind.label if kind else "object"
        _summary(console, f"added new {label}: {result.data.get('name', '')}.")


def _render_edit(result: ServiceResult, console: Console, verbose: bool, _sep: str) -> None:
    if verbose:
        kind = _kind(result)
        label = kind.label if kind else "object"
        old, new = result.data.get("old_name", ""), result.data.get("new_name", "")
        _summary(console, f"changed {label} name from {old} to {new}.")


def _render_delete(result: ServiceResult, console: Console, verbose: bool, _sep: str) -> None:
    if verbose:
        kind = _kind(result)
        label = kind.label if kind else "object"
        _summary(console, f"deleted {label} {result.data.get('name', '')}.")


def _render_list(result: ServiceResult, console: Console, _verbose: bool, separator: str) -> None:
    kind = _kind(result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        plural = kind.plural if kind else "objects"
        console.print(Text(f"no {plural}.", style="biclog.empty"), soft_wrap=True)
        return

    records = EntityList(Entity(id=item["id"], name=item["name"]) for item in items)
    header, *rows = records.display_lines(kind.header if kind else "NAME", separator)
    console.print(Text(header.rstrip(), style="biclog.header"), soft_wrap=True)
    for row in rows:
        console.print(Text(row.rstrip()), soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, verbose: bool, _sep: str) -> None:
    if not verbose:
        return
    console.print(Text(f"OK  {result.op}", style="biclog.op"), soft_wrap=True)
    for key, value in result.data.items():
        console.print(Text(f"  {key}: {value}"), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console) -> None:
    console.print(Text(error_line(result), style="biclog.error"), soft_wrap=True)


_OP_RENDERERS: dict[str, _Renderer] = {
    "init": _render_init,
    "add": _render_add,
    "list": _render_list,
    "edit": _render_edit,
    "delete": _render_delete,
}
