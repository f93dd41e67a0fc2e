"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from inkcalc.config import settings
from inkcalc.llm.client import VisionSolver


def get_settings():
    return settings


def get_solver(request: Request) -> VisionSolver:
    """Return the process-wide solver attached by the app factory."""
    return request.app.state.solver
