"""DrawingSession — the state behind one canvas view.

Holds the surface, the displayed results, the variable context and the
processing/fullscreen flags. UI toolkits forward events here and read the
state back for display.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from inkcalc.canvas.relay_client import RelayClient
from inkcalc.canvas.surface import StrokeCanvas, ViewRect
from inkcalc.canvas.typeset import format_result
from inkcalc.models.responses import ResultEntry

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Failed to process equation"
PROCESSING_TEXT = "Processing..."


def error_entry(message: Any) -> ResultEntry:
    return ResultEntry(expr="Error", result=message, assign=False)


class DrawingSession:
    def __init__(
        self,
        relay: RelayClient,
        canvas: StrokeCanvas | None = None,
        jpeg_quality: int = 95,
    ) -> None:
        self.relay = relay
        self.canvas = canvas or StrokeCanvas()
        self.jpeg_quality = jpeg_quality
        self.results: list[ResultEntry] = []
        self.variables: dict[str, Any] = {}
        self.processing = False
        self.fullscreen = False

    # -- pointer events --

    def pointer_down(self, x: float, y: float, rect: ViewRect | None = None) -> None:
        self.canvas.begin_stroke(x, y, rect)

    def pointer_move(self, x: float, y: float, rect: ViewRect | None = None) -> bool:
        return self.canvas.extend_stroke(x, y, rect)

    def pointer_up(self) -> None:
        self.canvas.end_stroke()

    # -- controls --

    def clear(self) -> None:
        self.canvas.clear()
        self.results = []

    def set_color(self, color: str) -> str:
        return self.canvas.set_color(color)

    def toggle_fullscreen(self) -> bool:
        self.fullscreen = not self.fullscreen
        return self.fullscreen

    def snapshot(self) -> str | None:
        """Mark the session busy and export the canvas; None if already busy.

        Call on the thread that draws, then hand the data URL to ``submit``.
        """
        if self.processing:
            logger.debug("Submit ignored: request already in flight")
            return None
        self.processing = True
        try:
            return self.canvas.to_data_url(quality=self.jpeg_quality)
        except Exception:
            self.processing = False
            raise

    async def submit(self, image: str | None = None) -> list[ResultEntry] | None:
        """Send the canvas to the relay; None if a submission is already in flight.

        With ``image`` the export already happened in ``snapshot``.
        """
        if image is None:
            image = self.snapshot()
            if image is None:
                return None

        try:
            envelope = await self.relay.solve(image, dict(self.variables))
            if envelope.get("status") == "success":
                data = envelope.get("data", [])
                if not isinstance(data, list):
                    raise ValueError(f"success envelope carries {type(data).__name__} data")
                self.results = [ResultEntry.model_validate(item) for item in data]
                self._remember_assignments()
            else:
                logger.error("Error: %s", envelope.get("message"))
                self.results = [error_entry(envelope.get("message", FAILED_MESSAGE))]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error processing equation: %s", e)
            self.results = [error_entry(FAILED_MESSAGE)]
        finally:
            self.processing = False
        return self.results

    def _remember_assignments(self) -> None:
        for entry in self.results:
            if entry.assign:
                self.variables[str(entry.expr)] = entry.result

    def display_lines(self) -> list[str]:
        return [format_result(entry) for entry in self.results]

    @property
    def status_text(self) -> str | None:
        """Text shown in place of the results while a submission is in flight."""
        return PROCESSING_TEXT if self.processing else None
