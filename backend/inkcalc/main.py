"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inkcalc.config import settings
from inkcalc.llm.client import VisionSolver
from inkcalc.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.inkcalc_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(solver: VisionSolver | None = None) -> FastAPI:
    app = FastAPI(
        title="InkCalc",
        description="Handwritten math relay — canvas snapshot in, typed results out",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One client per process, shared by every request
    app.state.solver = solver or VisionSolver.from_settings(settings)
    if not app.state.solver.configured:
        logger.warning("ANTHROPIC_API_KEY is not set; /api/drawing will fail until it is")

    app.add_exception_handler(RequestValidationError, _invalid_body_handler)

    from inkcalc.api.router import api_router

    app.include_router(api_router)

    return app


async def _invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected malformed request body on %s: %s", request.url.path, exc.errors())
    body = ErrorResponse(message="Invalid request body", error="Expected a JSON object with an image field")
    return JSONResponse(status_code=400, content=body.model_dump())


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("inkcalc.main:app", host="0.0.0.0", port=8000)
