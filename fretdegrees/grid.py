"""Rendering the scale degree grid.

This module turns the degree mapping and the selected triad into draw calls.
Every pass recomputes each cell from scratch; nothing is carried over
between passes, so identical inputs always produce identical output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from fretdegrees.config import ColorScheme, Config
from fretdegrees.pos import GridPos
from fretdegrees.scale import degree_at
from fretdegrees.surface import Surface
from fretdegrees.triads import Role, role_of


@dataclass(frozen=True)
class CellState:
    """What a single cell shows, derived from its position and the selection."""

    degree: Optional[int]  # None for non-diatonic cells
    """The scale degree at this cell, or None when the cell stays blank."""
    role: Optional[Role]  # None unless the degree is a chord tone
    """The degree's role in the selected triad, if any."""

    @property
    def blank(self) -> bool:
        return self.degree is None

    @property
    def highlighted(self) -> bool:
        return self.role is not None

    @classmethod
    def at(cls, pos: GridPos, triad_degrees: Sequence[int]) -> CellState:
        """Derive the state of the cell at ``pos``.

        Args:
            pos: The cell's string and fret.
            triad_degrees: The selected triad's degrees, empty for none.

        Returns:
            The cell's degree and chord-tone role.
        """
        degree = degree_at(pos.str_index, pos.fret)
        role = role_of(degree, triad_degrees) if degree is not None else None
        return cls(degree=degree, role=role)


class Grid:
    """Draws the full fretboard grid onto a surface."""

    def __init__(self, config: Config, scheme: ColorScheme) -> None:
        """Initialize the renderer.

        Args:
            config: Grid size and drawing proportions.
            scheme: Colors for lines, numerals and chord-tone fills.
        """
        self._config = config
        self._scheme = scheme

    @property
    def config(self) -> Config:
        return self._config

    @property
    def scheme(self) -> ColorScheme:
        return self._scheme

    def cell_state(self, pos: GridPos, triad_degrees: Sequence[int]) -> CellState:
        return CellState.at(pos, triad_degrees)

    def _draw_cell(
        self, surface: Surface, pos: GridPos, state: CellState, cell_size: int
    ) -> None:
        x, y = pos.origin(cell_size)
        surface.rect(x, y, cell_size, self._scheme.grid_line, self._config.grid_weight)
        if state.degree is None:
            return
        cx = x + cell_size / 2
        cy = y + cell_size / 2
        if state.role is not None:
            surface.circle(
                cx,
                cy,
                self._config.circle_radius(cell_size),
                self._scheme.role_color(state.role),
                self._scheme.circle_outline,
                self._config.circle_weight(state.role),
            )
        surface.text(
            cx,
            cy,
            str(state.degree),
            self._config.text_size(cell_size),
            self._scheme.text,
        )

    def render(
        self, surface: Surface, triad_degrees: Sequence[int], cell_size: int
    ) -> Dict[GridPos, CellState]:
        """Clear the surface and draw every cell.

        Args:
            surface: The target surface, already sized to the grid.
            triad_degrees: The selected triad's degrees, empty for none.
            cell_size: Side length of one cell in pixels.

        Returns:
            The state each cell was drawn with.
        """
        surface.clear(self._scheme.background)
        states: Dict[GridPos, CellState] = {}
        for pos in GridPos.iter_all():
            state = self.cell_state(pos, triad_degrees)
            self._draw_cell(surface, pos, state, cell_size)
            states[pos] = state
        return states


_ROLE_BRACKETS: Dict[Role, str] = {
    Role.Root: "[]",
    Role.Third: "()",
    Role.Fifth: "<>",
}


def format_cell(state: CellState) -> str:
    """Format one cell as three characters.

    Blank cells show ``.``; chord tones are wrapped in ``[]`` for the root,
    ``()`` for the third and ``<>`` for the fifth.
    """
    if state.degree is None:
        return " . "
    elif state.role is None:
        return f" {state.degree} "
    else:
        left, right = _ROLE_BRACKETS[state.role]
        return f"{left}{state.degree}{right}"


def format_grid(triad_degrees: Sequence[int]) -> str:
    """Render the grid as text, highest string first.

    Args:
        triad_degrees: The selected triad's degrees, empty for none.

    Returns:
        One line per string, cells left to right by fret.
    """
    lines: List[str] = []
    rows: Dict[int, List[str]] = {}
    for pos in GridPos.iter_all():
        rows.setdefault(pos.screen_row(), []).append(
            format_cell(CellState.at(pos, triad_degrees))
        )
    for row in sorted(rows):
        lines.append("".join(rows[row]).rstrip())
    return "\n".join(lines)
