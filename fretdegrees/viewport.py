"""Sizing the grid to fit the window.

The grid is always MATRIX_SIZE cells square; only the pixel size of a cell
changes. The largest cell size that fits is recomputed from the viewport
on every resize.
"""

from __future__ import annotations

from dataclasses import dataclass

from fretdegrees.config import Config


def optimal_cell_size(config: Config, width: int, height: int) -> int:
    """Compute the largest cell size that fits the grid in a viewport.

    Width and height bound the cell size independently, after removing the
    padding (both axes) and the header allowance (height only). The smaller
    bound wins.

    Args:
        config: Grid dimensions and allowances.
        width: Viewport width in pixels.
        height: Viewport height in pixels.

    Returns:
        The cell size in pixels, never below ``config.min_cell_size``.
    """
    by_width = (width - config.padding) // config.matrix_size
    available_height = height - config.header_height - config.padding
    by_height = available_height // config.matrix_size
    return max(config.min_cell_size, min(by_width, by_height))


@dataclass(frozen=True)
class Viewport:
    """A snapshot of the window's drawable size."""

    width: int
    """Viewport width in pixels."""
    height: int
    """Viewport height in pixels."""

    def cell_size(self, config: Config) -> int:
        """Return the optimal cell size for this viewport."""
        return optimal_cell_size(config, self.width, self.height)
