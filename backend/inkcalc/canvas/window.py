"""Desktop drawing window (tkinter) driving a DrawingSession.

Run with ``python -m inkcalc.canvas.window`` while the relay is up.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import threading
import tkinter as tk
from tkinter import messagebox

from inkcalc.canvas.relay_client import RelayClient
from inkcalc.canvas.session import DrawingSession
from inkcalc.canvas.surface import PALETTE, STROKE_WIDTH, StrokeCanvas
from inkcalc.canvas.typeset import display_segments
from inkcalc.config import settings

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "1. Choose a color from the palette.\n"
    "2. Draw your expression on the canvas.\n"
    "3. Click Solve to calculate.\n"
    "4. Click Clear to wipe the canvas.\n"
    "5. Click Fullscreen to toggle fullscreen mode."
)

_POLL_MS = 100


def svg_to_photo(svg: str) -> tk.PhotoImage:
    """Rasterize typeset SVG markup for display in a Label."""
    import cairosvg

    png_bytes = cairosvg.svg2png(bytestring=svg.encode("utf-8"))
    return tk.PhotoImage(data=base64.b64encode(png_bytes).decode("ascii"))


class DrawingApp:
    def __init__(self, root: tk.Tk, session: DrawingSession) -> None:
        self.root = root
        self.session = session
        self.root.title("InkCalc")
        self._screen_last: tuple[int, int] | None = None
        self._images: list[tk.PhotoImage] = []  # keep references alive
        self._worker: threading.Thread | None = None

        # Fixed size with no border: widget pixels are canvas pixels, so what is
        # on screen is what gets exported, fullscreen or not.
        canvas = session.canvas
        self.surface = tk.Canvas(root, width=canvas.width, height=canvas.height, bg="white",
                                 highlightthickness=0, bd=0)
        self.surface.pack(side=tk.TOP)

        self.surface.bind("<ButtonPress-1>", self.on_press)
        self.surface.bind("<B1-Motion>", self.on_motion)
        self.surface.bind("<ButtonRelease-1>", self.on_release)
        self.surface.bind("<Leave>", self.on_release)

        bar = tk.Frame(root, bd=1, relief=tk.GROOVE, padx=8, pady=8)
        bar.pack(fill=tk.X, side=tk.BOTTOM)

        self.results_frame = tk.Frame(bar)
        self.results_frame.pack(side=tk.LEFT, fill=tk.X, expand=True)

        controls = tk.Frame(bar)
        controls.pack(side=tk.RIGHT)
        for name, hex_value in PALETTE.items():
            tk.Button(controls, bg=hex_value, activebackground=hex_value, width=2,
                      command=lambda c=name: self.session.set_color(c)).pack(side=tk.LEFT, padx=1)
        tk.Button(controls, text="Clear", command=self.clear).pack(side=tk.LEFT, padx=4)
        tk.Button(controls, text="Fullscreen", command=self.toggle_fullscreen).pack(side=tk.LEFT, padx=4)
        self.solve_button = tk.Button(controls, text="Solve", command=self.solve)
        self.solve_button.pack(side=tk.LEFT, padx=4)
        tk.Button(controls, text="How to Use",
                  command=lambda: messagebox.showinfo("Instructions", INSTRUCTIONS)).pack(side=tk.LEFT, padx=4)

    def on_press(self, event: tk.Event) -> None:
        self.session.pointer_down(event.x, event.y)
        self._screen_last = (event.x, event.y)

    def on_motion(self, event: tk.Event) -> None:
        if not self.session.pointer_move(event.x, event.y):
            return
        if self._screen_last is not None:
            self.surface.create_line(*self._screen_last, event.x, event.y, fill=self.session.canvas.color,
                                     width=STROKE_WIDTH, capstyle=tk.ROUND, joinstyle=tk.ROUND)
        self._screen_last = (event.x, event.y)

    def on_release(self, event: tk.Event | None = None) -> None:
        self.session.pointer_up()
        self._screen_last = None

    def clear(self) -> None:
        self.session.clear()
        self.surface.delete("all")
        self.show_results()

    def toggle_fullscreen(self) -> None:
        self.root.attributes("-fullscreen", self.session.toggle_fullscreen())

    def solve(self) -> None:
        if self.session.processing:
            return
        if self.session.canvas.is_blank():
            messagebox.showinfo("InkCalc", "Draw something on the canvas first.")
            return
        image = self.session.snapshot()
        if image is None:
            return
        self.solve_button.config(state=tk.DISABLED)
        self._show_text(self.session.status_text)
        self._worker = threading.Thread(target=lambda: asyncio.run(self.session.submit(image)), daemon=True)
        self._worker.start()
        self.root.after(_POLL_MS, self._poll)

    def _poll(self) -> None:
        if self._worker is not None and self._worker.is_alive():
            self.root.after(_POLL_MS, self._poll)
            return
        self._worker = None
        self.solve_button.config(state=tk.NORMAL)
        self.show_results()

    def _reset_results(self) -> None:
        for child in self.results_frame.winfo_children():
            child.destroy()
        self._images.clear()

    def _show_text(self, text: str) -> None:
        self._reset_results()
        tk.Label(self.results_frame, text=text, font=("Helvetica", 18, "bold")).pack(anchor=tk.W)

    def show_results(self) -> None:
        self._reset_results()
        for entry in self.session.results:
            row = tk.Frame(self.results_frame)
            row.pack(anchor=tk.W, pady=2)
            for text, svg in display_segments(entry):
                self._segment(row, text, svg)

    def _segment(self, row: tk.Frame, text: str, svg: str | None) -> None:
        if svg is not None:
            try:
                photo = svg_to_photo(svg)
            except Exception as e:
                logger.warning("Could not rasterize typeset %r: %s", text, e)
            else:
                self._images.append(photo)
                tk.Label(row, image=photo).pack(side=tk.LEFT)
                return
        tk.Label(row, text=text, font=("Helvetica", 18, "bold")).pack(side=tk.LEFT)


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.inkcalc_log_level.upper(), logging.DEBUG),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    session = DrawingSession(
        RelayClient(settings.relay_url),
        StrokeCanvas(settings.canvas_width, settings.canvas_height),
        jpeg_quality=settings.jpeg_quality,
    )
    root = tk.Tk()
    DrawingApp(root, session)
    root.mainloop()


if __name__ == "__main__":
    main()
