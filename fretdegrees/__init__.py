"""Fretboard scale degree visualizer.

Shows the major scale degree of every position on a fourths-tuned
fretboard grid, with the root, third and fifth of a selected diatonic
triad highlighted.
"""

from fretdegrees.grid import CellState, Grid, format_grid
from fretdegrees.scale import degree_at, semitone_at
from fretdegrees.triads import NO_TRIAD, TRIADS, Role, Triad, role_of
from fretdegrees.viewport import optimal_cell_size

__all__ = [
    "CellState",
    "Grid",
    "NO_TRIAD",
    "Role",
    "TRIADS",
    "Triad",
    "degree_at",
    "format_grid",
    "optimal_cell_size",
    "role_of",
    "semitone_at",
]
