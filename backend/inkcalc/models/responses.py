"""API response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    model: str = ""
    llm_configured: bool = False


class ResultEntry(BaseModel):
    expr: str | int | float = Field(..., description="Input expression, variable name, or interpretation")
    result: Any = Field(..., description="Computed, assigned, or interpreted value")
    assign: bool = Field(default=False, description="True when the entry binds a variable")


class DrawingResponse(BaseModel):
    message: str = "Image processed"
    data: list[ResultEntry] = Field(default_factory=list)
    status: Literal["success"] = "success"


class ErrorResponse(BaseModel):
    message: str
    error: str
    status: Literal["error"] = "error"
