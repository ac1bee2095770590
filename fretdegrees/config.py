"""Configuration for the scale degree grid.

The tuning and grid size are fixed; this module gathers those constants
with the drawing proportions and the color palette into immutable
dataclasses so the renderer takes everything it needs as arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fretdegrees import constants
from fretdegrees.base import MatchException
from fretdegrees.color import COLORS, Color
from fretdegrees.triads import Role


@dataclass(frozen=True)
class ColorScheme:
    """Every color the renderer draws with."""

    background: Color  # Surface fill before each pass
    grid_line: Color  # Cell outlines
    circle_outline: Color  # Outline of highlight circles
    text: Color  # Degree numerals
    root_note: Color  # Fill for the triad root
    third_note: Color  # Fill for the triad third
    fifth_note: Color  # Fill for the triad fifth
    neutral_note: Color  # Degrees outside the selected triad

    def role_color(self, role: Optional[Role]) -> Color:
        """Get the fill color for a chord-tone role.

        Args:
            role: The role of the note, or None for a non-chord tone.

        Returns:
            The role's fill color, or the neutral color when there is no role.

        Raises:
            MatchException: If an unknown role is encountered.
        """
        if role is None:
            return self.neutral_note
        elif role == Role.Root:
            return self.root_note
        elif role == Role.Third:
            return self.third_note
        elif role == Role.Fifth:
            return self.fifth_note
        else:
            raise MatchException(role)


@dataclass(frozen=True)
class Config:
    """Fixed layout and drawing proportions for the grid."""

    matrix_size: int  # Strings and frets shown
    padding: int  # Pixels around the grid
    header_height: int  # Pixels reserved above the grid
    min_cell_size: int  # Lower bound for viewport sizing
    circle_ratio: float  # Circle radius over cell size
    text_ratio: float  # Font size over cell size
    grid_weight: int  # Cell outline width
    root_weight: int  # Circle outline width for roots
    member_weight: int  # Circle outline width for thirds and fifths

    def circle_weight(self, role: Role) -> int:
        """Outline width for a highlight circle; roots are drawn heavier."""
        return self.root_weight if role.is_root else self.member_weight

    def circle_radius(self, cell_size: int) -> float:
        return cell_size * self.circle_ratio

    def text_size(self, cell_size: int) -> int:
        return max(1, round(cell_size * self.text_ratio))

    def surface_size(self, cell_size: int) -> int:
        """Side length in pixels of a surface holding the whole grid."""
        return self.matrix_size * cell_size


def init_config() -> Config:
    """Create the one supported configuration.

    Returns:
        A Config holding the 15x15 grid, the window allowances, and the
        circle and text proportions.
    """
    return Config(
        matrix_size=constants.MATRIX_SIZE,
        padding=constants.PADDING,
        header_height=constants.HEADER_HEIGHT,
        min_cell_size=constants.MIN_CELL_SIZE,
        circle_ratio=constants.CIRCLE_RADIUS_RATIO,
        text_ratio=constants.TEXT_SIZE_RATIO,
        grid_weight=constants.GRID_WEIGHT,
        root_weight=constants.ROOT_WEIGHT,
        member_weight=constants.MEMBER_WEIGHT,
    )


def default_scheme() -> ColorScheme:
    """Create the default palette.

    Light red for roots, yellow for thirds and light green for fifths,
    drawn on white with gray cell lines and black outlines and numerals.

    Returns:
        A ColorScheme with the default color assignments.
    """
    return ColorScheme(
        background=COLORS["White"],
        grid_line=COLORS["Gray"],
        circle_outline=COLORS["Black"],
        text=COLORS["Black"],
        root_note=COLORS["LightPink"],
        third_note=COLORS["LightYellow"],
        fifth_note=COLORS["LightGreen"],
        neutral_note=COLORS["Gainsboro"],
    )
