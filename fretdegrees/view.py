"""The visual component: one surface, one state, full redraws.

The visualizer owns a single long-lived surface. The only things that vary
are the selected triad and the cell size; together they form an immutable
``ViewState`` that is replaced wholesale on each event. A new state that
differs from the current one triggers a clear and a complete redraw.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Generator

from fretdegrees.base import Closeable, Resettable
from fretdegrees.config import ColorScheme, Config
from fretdegrees.grid import Grid
from fretdegrees.surface import Surface
from fretdegrees.triads import NO_TRIAD, Triad
from fretdegrees.viewport import Viewport


@dataclass(frozen=True)
class ViewState:
    """Everything a redraw depends on."""

    triad: Triad
    """The selected triad (``NO_TRIAD`` for no selection)."""
    cell_size: int
    """Side length of one cell in pixels."""

    @classmethod
    def initial(cls, config: Config, viewport: Viewport) -> ViewState:
        return cls(triad=NO_TRIAD, cell_size=viewport.cell_size(config))


class Visualizer(Resettable, Closeable):
    """Keeps a surface in sync with the current view state.

    The surface is released when the visualizer is closed; after that the
    visualizer must not be used.
    """

    def __init__(self, surface: Surface, grid: Grid, state: ViewState) -> None:
        """Initialize and draw the first pass.

        Args:
            surface: The surface to draw on; ownership passes to this object.
            grid: The grid renderer.
            state: The initial view state.
        """
        self._surface = surface
        self._grid = grid
        self._state = state
        self.redraw()

    @classmethod
    def construct(
        cls,
        surface: Surface,
        config: Config,
        scheme: ColorScheme,
        viewport: Viewport,
        triad: Triad = NO_TRIAD,
    ) -> Visualizer:
        state = replace(ViewState.initial(config, viewport), triad=triad)
        return cls(surface, Grid(config, scheme), state)

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def surface(self) -> Surface:
        return self._surface

    def redraw(self) -> None:
        """Resize the surface to the grid and draw every cell."""
        side = self._grid.config.surface_size(self._state.cell_size)
        logging.debug(
            "redrawing triad=%r cell_size=%d",
            self._state.triad.value,
            self._state.cell_size,
        )
        self._surface.resize(side, side)
        state = self._state
        self._grid.render(self._surface, state.triad.degrees, state.cell_size)

    def handle_state(self, state: ViewState, reset: bool = False) -> bool:
        """Adopt a new view state, redrawing if it changed.

        Args:
            state: The replacement state.
            reset: Redraw even if the state is unchanged.

        Returns:
            True if the surface was redrawn.
        """
        if state != self._state or reset:
            self._state = state
            self.redraw()
            return True
        else:
            return False

    def select_triad(self, triad: Triad) -> bool:
        """Handle a dropdown selection."""
        return self.handle_state(replace(self._state, triad=triad))

    def resize(self, viewport: Viewport) -> bool:
        """Handle a window resize."""
        cell_size = viewport.cell_size(self._grid.config)
        return self.handle_state(replace(self._state, cell_size=cell_size))

    def reset(self) -> None:
        self.handle_state(self._state, reset=True)

    def close(self) -> None:
        logging.info("releasing surface")
        self._surface.close()


@contextmanager
def visualizer_context(
    surface: Surface,
    config: Config,
    scheme: ColorScheme,
    viewport: Viewport,
    triad: Triad = NO_TRIAD,
) -> Generator[Visualizer, None, None]:
    """Context manager scoping a visualizer and its surface.

    The surface is released when the block exits, even on error.

    Yields:
        A visualizer that has already drawn its first pass.
    """
    try:
        visualizer = Visualizer.construct(surface, config, scheme, viewport, triad)
    except BaseException:
        # The first pass failed; the surface is still ours to release
        surface.close()
        raise
    try:
        yield visualizer
    finally:
        visualizer.close()
