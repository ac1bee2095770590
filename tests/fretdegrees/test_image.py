"""Pixel checks for the Pillow surface."""

from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image

from fretdegrees.color import Color
from fretdegrees.config import default_scheme, init_config
from fretdegrees.grid import Grid
from fretdegrees.image import ImageSurface
from fretdegrees.pos import GridPos
from fretdegrees.triads import NO_TRIAD, Role, Triad, triad_for_value

CELL = 60
CONFIG = init_config()
SCHEME = default_scheme()


def draw(triad: Triad) -> ImageSurface:
    side = CONFIG.surface_size(CELL)
    surface = ImageSurface(side, side)
    Grid(CONFIG, SCHEME).render(surface, triad.degrees, CELL)
    return surface


def beside_numeral(pos: GridPos) -> Tuple[int, int]:
    # Inside the circle fill but clear of the numeral glyph
    x, y = pos.origin(CELL)
    return (x + CELL // 2 - 15, y + CELL // 2)


def pixel(surface: ImageSurface, xy: Tuple[int, int]) -> Color:
    r, g, b = surface.image.getpixel(xy)
    return Color(r, g, b)


def test_image_size() -> None:
    assert draw(NO_TRIAD).image.size == (900, 900)


@pytest.mark.parametrize(
    "pos, role",
    [
        (GridPos(0, 3), Role.Root),
        (GridPos(0, 7), Role.Third),
        (GridPos(0, 10), Role.Fifth),
    ],
)
def test_dominant_fills(pos: GridPos, role: Role) -> None:
    surface = draw(triad_for_value("V"))
    assert pixel(surface, beside_numeral(pos)) == SCHEME.role_color(role)


def test_non_chord_tone_left_white() -> None:
    surface = draw(triad_for_value("V"))
    assert pixel(surface, beside_numeral(GridPos(0, 0))) == SCHEME.background


def test_clearing_selection_removes_fills() -> None:
    surface = draw(triad_for_value("V"))
    Grid(CONFIG, SCHEME).render(surface, NO_TRIAD.degrees, CELL)
    assert pixel(surface, beside_numeral(GridPos(0, 3))) == SCHEME.background


def test_grid_lines() -> None:
    surface = draw(NO_TRIAD)
    assert pixel(surface, (CELL, CELL // 2)) == SCHEME.grid_line
    assert pixel(surface, (CELL // 2, CELL)) == SCHEME.grid_line


def test_resize_keeps_surface() -> None:
    surface = draw(NO_TRIAD)
    surface.resize(300, 300)
    assert surface.image.size == (300, 300)


def test_resize_releases_previous_image() -> None:
    surface = draw(NO_TRIAD)
    previous = surface._image
    assert previous is not None
    surface.resize(300, 300)
    with pytest.raises(ValueError):
        previous.getpixel((0, 0))


def test_save(tmp_path: Path) -> None:
    path = tmp_path / "grid.png"
    draw(triad_for_value("I")).save(path)
    with Image.open(path) as image:
        assert image.size == (900, 900)
        assert image.format == "PNG"


def test_closed_surface_rejects_drawing() -> None:
    surface = draw(NO_TRIAD)
    surface.close()
    with pytest.raises(RuntimeError):
        surface.clear(SCHEME.background)
    with pytest.raises(RuntimeError):
        surface.image
