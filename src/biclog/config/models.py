"""Pydantic configuration sections with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    separator: str = "  "
