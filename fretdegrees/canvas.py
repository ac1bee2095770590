"""tkinter-backed surface for the interactive window.

The canvas widget is created once with the window and kept for its whole
lifetime; each pass deletes every canvas item and draws again.
"""

from __future__ import annotations

import tkinter as tk
from typing import Optional

from fretdegrees.color import Color
from fretdegrees.surface import Surface

FONT_FAMILY = "TkDefaultFont"


class CanvasSurface(Surface):
    """Draws onto a ``tk.Canvas`` and destroys it when closed."""

    def __init__(self, canvas: tk.Canvas) -> None:
        self._canvas: Optional[tk.Canvas] = canvas

    def _ensure_open(self) -> tk.Canvas:
        if self._canvas is None:
            raise RuntimeError("Surface is closed")
        return self._canvas

    @property
    def canvas(self) -> tk.Canvas:
        return self._ensure_open()

    def resize(self, width: int, height: int) -> None:
        self._ensure_open().configure(width=width, height=height)

    def clear(self, color: Color) -> None:
        canvas = self._ensure_open()
        canvas.delete("all")
        canvas.configure(background=color.to_hex())

    def rect(self, x: int, y: int, size: int, outline: Color, weight: int) -> None:
        self._ensure_open().create_rectangle(
            x, y, x + size, y + size, outline=outline.to_hex(), width=weight
        )

    def circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: Color,
        outline: Color,
        weight: int,
    ) -> None:
        self._ensure_open().create_oval(
            cx - radius,
            cy - radius,
            cx + radius,
            cy + radius,
            fill=fill.to_hex(),
            outline=outline.to_hex(),
            width=weight,
        )

    def text(self, cx: float, cy: float, text: str, size: int, fill: Color) -> None:
        # Negative font sizes are in pixels rather than points
        self._ensure_open().create_text(
            cx, cy, text=text, fill=fill.to_hex(), font=(FONT_FAMILY, -size)
        )

    def close(self) -> None:
        if self._canvas is not None:
            self._canvas.destroy()
            self._canvas = None
