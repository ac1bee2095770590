"""tkinter window hosting the scale degree grid.

The window holds a title, the grid canvas and a triad dropdown. Dropdown
changes and window resizes are forwarded to the visualizer, which decides
whether a redraw is needed.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Any, Optional

from fretdegrees import constants
from fretdegrees.canvas import CanvasSurface
from fretdegrees.config import ColorScheme, Config
from fretdegrees.triads import NO_TRIAD, TRIADS, Triad, triad_for_label
from fretdegrees.view import Visualizer
from fretdegrees.viewport import Viewport


class App(tk.Tk):
    def __init__(
        self,
        config: Config,
        scheme: ColorScheme,
        viewport: Viewport,
        triad: Triad = NO_TRIAD,
    ) -> None:
        super().__init__()
        self.title(constants.WINDOW_TITLE)
        self.geometry(f"{viewport.width}x{viewport.height}")
        self._viewport = viewport

        ttk.Label(self, text=constants.WINDOW_TITLE, font=("TkHeadingFont", 20)).pack(
            pady=(8, 4)
        )

        canvas = tk.Canvas(
            self,
            highlightthickness=1,
            highlightbackground="#CCCCCC",
            background="white",
        )
        canvas.pack()
        self._visualizer: Optional[Visualizer] = Visualizer.construct(
            CanvasSurface(canvas), config, scheme, viewport, triad
        )

        row = ttk.Frame(self)
        row.pack(pady=(8, 8))
        self.triad_var = tk.StringVar(value=triad.label)
        ttk.Label(row, text="Select Triad: ").grid(row=0, column=0, sticky=tk.W)
        ttk.OptionMenu(
            row,
            self.triad_var,
            self.triad_var.get(),
            *[t.label for t in TRIADS],
            command=self._on_select,
        ).grid(row=0, column=1, sticky=tk.W)

        self.bind("<Configure>", self._on_configure)
        self.protocol("WM_DELETE_WINDOW", self.close)

    @property
    def visualizer(self) -> Visualizer:
        if self._visualizer is None:
            raise RuntimeError("Window is closed")
        return self._visualizer

    def _on_select(self, label: Any) -> None:
        triad = triad_for_label(str(label))
        logging.info("selected triad %r", triad.value)
        self.visualizer.select_triad(triad)

    def _on_configure(self, event: "tk.Event[Any]") -> None:
        # Children report their own configure events through the root binding
        if event.widget is not self:
            return
        viewport = Viewport(width=event.width, height=event.height)
        if viewport != self._viewport:
            self._viewport = viewport
            self.visualizer.resize(viewport)

    def close(self) -> None:
        """Release the canvas surface and destroy the window."""
        if self._visualizer is not None:
            self._visualizer.close()
            self._visualizer = None
        logging.info("closing window")
        self.destroy()


def run_app(
    config: Config, scheme: ColorScheme, viewport: Viewport, triad: Triad = NO_TRIAD
) -> None:
    """Open the window and block until it is closed."""
    app = App(config, scheme, viewport, triad)
    logging.info("window ready")
    try:
        app.mainloop()
    except KeyboardInterrupt:
        app.close()
