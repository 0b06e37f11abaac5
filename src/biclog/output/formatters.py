"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
This module picks the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from biclog.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from biclog.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode resolved from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    separator: str = "  "


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; when omitted, *json_output* alone decides.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, separator=settings.separator)
