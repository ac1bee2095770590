"""Grid coordinates for the fretboard view.

The grid is indexed by string and fret. Frets increase left to right and
strings increase bottom to top, so string 0 is drawn on the last screen row.
"""

from dataclasses import dataclass
from typing import Generator, Tuple

from fretdegrees import constants


@dataclass(frozen=True)
class GridPos:
    """A string/fret coordinate within the fixed square grid."""

    str_index: int  # 0 is the lowest string
    """String index (0 to MATRIX_SIZE - 1, bottom to top)."""
    fret: int  # 0 is the leftmost column
    """Fret index (0 to MATRIX_SIZE - 1, left to right)."""

    def screen_row(self) -> int:
        """Return the screen row, counted from the top of the grid."""
        return constants.MATRIX_SIZE - 1 - self.str_index

    def screen_col(self) -> int:
        """Return the screen column, counted from the left of the grid."""
        return self.fret

    def origin(self, cell_size: int) -> Tuple[int, int]:
        """Return the pixel coordinates of this cell's top-left corner.

        Args:
            cell_size: Side length of one cell in pixels.

        Returns:
            An ``(x, y)`` tuple.
        """
        return (self.screen_col() * cell_size, self.screen_row() * cell_size)

    @staticmethod
    def iter_all() -> "Generator[GridPos, None, None]":
        """Iterate over every grid position, string-major.

        Yields:
            GridPos instances from string 0, fret 0 up to the last string
            and fret.
        """
        for str_index in range(constants.MATRIX_SIZE):
            for fret in range(constants.MATRIX_SIZE):
                yield GridPos(str_index, fret)
