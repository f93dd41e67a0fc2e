"""Canvas capture: stroke surface, session state, relay client, typesetting."""

from inkcalc.canvas.relay_client import RelayClient
from inkcalc.canvas.session import DrawingSession
from inkcalc.canvas.surface import PALETTE, StrokeCanvas, StrokeState, ViewRect
from inkcalc.canvas.typeset import display_segments, format_result, has_markup, typeset

__all__ = [
    "RelayClient",
    "DrawingSession",
    "PALETTE",
    "StrokeCanvas",
    "StrokeState",
    "ViewRect",
    "display_segments",
    "format_result",
    "has_markup",
    "typeset",
]
