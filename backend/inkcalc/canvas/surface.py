"""StrokeCanvas — Pillow raster that accumulates freehand strokes.

Pointer events arrive in screen coordinates. They are scaled into the
canvas's logical pixels using the on-screen rectangle of the drawing
widget, so a stretched widget still places strokes where the pointer is.

Stroke state is a two-state machine:

    idle --begin--> drawing --end--> idle
    drawing --extend--> drawing

``extend`` while idle is rejected and ``end`` while idle is a no-op.
"""

from __future__ import annotations

import base64
import enum
import io
from dataclasses import dataclass

from PIL import Image, ImageChops, ImageDraw

BACKGROUND = "#FFFFFF"
STROKE_WIDTH = 3

PALETTE: dict[str, str] = {
    "black": "#000000",
    "red": "#FF0000",
    "blue": "#0000FF",
    "green": "#008000",
    "purple": "#800080",
    "orange": "#FFA500",
}


class StrokeState(enum.Enum):
    IDLE = "idle"
    DRAWING = "drawing"


@dataclass(frozen=True)
class ViewRect:
    """On-screen placement of the drawing widget, in screen pixels."""

    left: float
    top: float
    width: float
    height: float


def resolve_color(color: str) -> str:
    """Map a palette name or hex value to its canonical hex form."""
    key = color.strip().lower()
    if key in PALETTE:
        return PALETTE[key]
    for hex_value in PALETTE.values():
        if hex_value.lower() == key:
            return hex_value
    raise ValueError(f"{color!r} is not in the palette")


class StrokeCanvas:
    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = width
        self.height = height
        self.color = PALETTE["black"]
        self.state = StrokeState.IDLE
        self.last_point: tuple[float, float] | None = None
        self.image = Image.new("RGBA", (width, height), BACKGROUND)
        self._draw = ImageDraw.Draw(self.image)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def to_canvas_point(self, x: float, y: float, rect: ViewRect | None = None) -> tuple[float, float]:
        if rect is None or rect.width <= 0 or rect.height <= 0:
            return float(x), float(y)
        scale_x = self.width / rect.width
        scale_y = self.height / rect.height
        return (x - rect.left) * scale_x, (y - rect.top) * scale_y

    def begin_stroke(self, x: float, y: float, rect: ViewRect | None = None) -> tuple[float, float]:
        point = self.to_canvas_point(x, y, rect)
        self.last_point = point
        self.state = StrokeState.DRAWING
        return point

    def extend_stroke(self, x: float, y: float, rect: ViewRect | None = None) -> bool:
        if self.state is not StrokeState.DRAWING or self.last_point is None:
            return False
        point = self.to_canvas_point(x, y, rect)
        self._segment(self.last_point, point)
        self.last_point = point
        return True

    def end_stroke(self) -> None:
        if self.state is StrokeState.IDLE:
            return
        self.state = StrokeState.IDLE
        self.last_point = None

    def set_color(self, color: str) -> str:
        self.color = resolve_color(color)
        return self.color

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=BACKGROUND)
        self.state = StrokeState.IDLE
        self.last_point = None

    def is_blank(self) -> bool:
        flat = self.flatten()
        blank = Image.new("RGB", flat.size, BACKGROUND)
        return ImageChops.difference(flat, blank).getbbox() is None

    def flatten(self) -> Image.Image:
        """Composite onto an opaque white buffer so no transparency survives."""
        buffer = Image.new("RGB", self.size, BACKGROUND)
        buffer.paste(self.image, (0, 0), self.image)
        return buffer

    def to_data_url(self, quality: int = 95) -> str:
        out = io.BytesIO()
        self.flatten().save(out, format="JPEG", quality=quality)
        payload = base64.b64encode(out.getvalue()).decode("ascii")
        return f"data:image/jpeg;base64,{payload}"

    def _segment(self, start: tuple[float, float], end: tuple[float, float]) -> None:
        self._draw.line([start, end], fill=self.color, width=STROKE_WIDTH, joint="curve")
        # round caps
        r = STROKE_WIDTH / 2
        for px, py in (start, end):
            self._draw.ellipse((px - r, py - r, px + r, py + r), fill=self.color)
