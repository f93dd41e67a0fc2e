"""Math typesetting for result display.

Text that looks like LaTeX is rendered to inline SVG markup with matplotlib's
mathtext engine; anything else is shown as-is. Rendering never raises: a
string mathtext cannot parse is returned untransformed.
"""

from __future__ import annotations

import io
import logging
import re
from typing import Any

from matplotlib import mathtext
from matplotlib.font_manager import FontProperties

logger = logging.getLogger(__name__)

_MARKUP_RE = re.compile(r"[\\{}^$_]")
_SVG_START_RE = re.compile(r"<svg\b")

DEFAULT_FONT_SIZE = 16
DEFAULT_DPI = 96


def has_markup(text: str) -> bool:
    """True if the text contains LaTeX-indicating characters."""
    return bool(_MARKUP_RE.search(text))


def _as_mathtext(text: str) -> str:
    # mathtext only typesets inside $...$; text that already carries its own
    # delimiters is passed through so mixed prose stays prose.
    if "$" in text:
        return text
    return f"${text}$"


def render_svg(text: str, font_size: int = DEFAULT_FONT_SIZE, color: str = "black") -> str:
    """Render mathtext to an SVG document string, XML prolog stripped."""
    out = io.BytesIO()
    mathtext.math_to_image(
        _as_mathtext(text),
        out,
        prop=FontProperties(size=font_size),
        dpi=DEFAULT_DPI,
        format="svg",
        color=color,
    )
    svg = out.getvalue().decode("utf-8")
    start = _SVG_START_RE.search(svg)
    return svg[start.start():].strip() if start else svg


def typeset(value: Any) -> str:
    text = str(value)
    if not has_markup(text):
        return text
    try:
        return render_svg(text)
    except Exception as e:
        logger.warning("LaTeX rendering error for %r: %s", text, e)
        return text


def display_segments(entry: Any) -> list[tuple[str, str | None]]:
    """Pieces of one displayed entry as ``(text, svg)`` pairs.

    ``svg`` is the typeset markup, or None for plain text and for markup that
    failed to render.
    """
    if isinstance(entry, dict):
        expr, result = entry.get("expr", ""), entry.get("result", "")
    else:
        expr, result = entry.expr, entry.result
    segments = []
    for value in (expr, result):
        text = str(value)
        markup = typeset(text)
        segments.append((text, markup if markup != text else None))
    segments.insert(1, (" = ", None))
    return segments


def format_result(entry: Any) -> str:
    """Display string ``typeset(expr) = typeset(result)`` for one entry."""
    return "".join(svg or text for text, svg in display_segments(entry))
