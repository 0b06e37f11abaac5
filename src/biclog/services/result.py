"""What every biclog service call hands back to the CLI.

A service never raises for an expected failure such as a missing file,
an unknown id or an empty name. It returns a ``ServiceResult`` with
``ok=False`` and the error code of the :class:`biclog.errors.BiclogError`
that stopped it. ``op`` names the call (``init``, ``add_bicycle_type``,
``list_category``...), and the renderers pick their output from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Error code, message and details copied from a BiclogError."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: False when the call stopped on an error.
        op: Operation name, ``init`` or ``<verb>_<kind>``.
        data: Payload on success: the record, the listed items, or the
            old and new name after an edit.
        warnings: Problems that did not stop the call.
        error: Set only when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
