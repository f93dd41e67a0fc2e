"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DrawingRequest(BaseModel):
    image: str | None = Field(default=None, description="Canvas snapshot as a base64 data URL")
    dict_of_vars: dict[str, Any] | None = Field(
        default=None,
        description="Known variable bindings the solver should substitute",
    )
