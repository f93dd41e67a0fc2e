"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from inkcalc.dependencies import get_solver
from inkcalc.llm.client import VisionSolver
from inkcalc.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(solver: VisionSolver = Depends(get_solver)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        model=solver.model,
        llm_configured=solver.configured,
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from inkcalc.llm.prompts import get_all_templates

    return get_all_templates()
