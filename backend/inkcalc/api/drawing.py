"""POST /api/drawing — validate a canvas snapshot, solve it, normalize the reply."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from inkcalc.config import Settings
from inkcalc.dependencies import get_settings, get_solver
from inkcalc.imaging.data_url import ImageValidationError, validate_image
from inkcalc.llm.client import VisionSolver
from inkcalc.llm.parsing import ResponseFormatError, parse_result_entries
from inkcalc.llm.prompts import build_solve_prompt
from inkcalc.models.requests import DrawingRequest
from inkcalc.models.responses import DrawingResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, message: str, error: str) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "/drawing",
    response_model=DrawingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def drawing(
    req: DrawingRequest,
    solver: VisionSolver = Depends(get_solver),
    settings: Settings = Depends(get_settings),
):
    try:
        try:
            image = validate_image(req.image, min_bytes=settings.min_image_bytes)
        except ImageValidationError as e:
            logger.warning("Invalid or empty image data received: %s", e)
            return error_response(400, "Invalid image data", "The image appears to be empty or invalid")

        prompt = build_solve_prompt(req.dict_of_vars)
        text = await solver.complete(prompt, image)

        try:
            entries = parse_result_entries(text)
        except ResponseFormatError as e:
            logger.error("Error parsing model response: %s; raw reply: %.500s", e, text)
            return error_response(400, "Error processing response", "Invalid response format")

        logger.info("Solved drawing: %d result(s)", len(entries))
        return DrawingResponse(data=entries)
    except Exception as e:
        logger.exception("Error processing request")
        return error_response(500, "Error processing request", str(e) or type(e).__name__)
