"""End-to-end tests for selection and resize handling."""

import pytest

from fretdegrees.color import Color
from fretdegrees.config import default_scheme, init_config
from fretdegrees.scale import degree_at
from fretdegrees.surface import CircleOp, RecordingSurface, TextOp
from fretdegrees.triads import NO_TRIAD, Role, triad_for_value
from fretdegrees.view import ViewState, Visualizer, visualizer_context
from fretdegrees.viewport import Viewport

CONFIG = init_config()
SCHEME = default_scheme()
VIEWPORT = Viewport(1024, 768)


def make_visualizer() -> Visualizer:
    return Visualizer.construct(RecordingSurface(), CONFIG, SCHEME, VIEWPORT)


def recording(visualizer: Visualizer) -> RecordingSurface:
    surface = visualizer.surface
    assert isinstance(surface, RecordingSurface)
    return surface


def test_initial_pass() -> None:
    visualizer = make_visualizer()
    surface = recording(visualizer)
    assert visualizer.state == ViewState(NO_TRIAD, 40)
    assert surface.passes == 1
    assert surface.size == (600, 600)
    assert surface.ops_of(CircleOp) == []


def test_initial_triad() -> None:
    visualizer = Visualizer.construct(
        RecordingSurface(), CONFIG, SCHEME, VIEWPORT, triad_for_value("I")
    )
    assert visualizer.state.triad.value == "I"
    assert recording(visualizer).ops_of(CircleOp) != []


def test_select_dominant_then_clear() -> None:
    visualizer = make_visualizer()
    surface = recording(visualizer)

    assert visualizer.select_triad(triad_for_value("V"))
    circles = surface.ops_of(CircleOp)
    fills = {c.fill for c in circles}
    assert fills == {
        SCHEME.role_color(Role.Root),
        SCHEME.role_color(Role.Third),
        SCHEME.role_color(Role.Fifth),
    }
    heavy = {(c.cx, c.cy) for c in circles if c.weight == CONFIG.root_weight}
    texts = {(t.cx, t.cy): t.text for t in surface.ops_of(TextOp)}
    assert heavy
    assert all(texts[center] == "5" for center in heavy)
    highlighted = {(c.cx, c.cy) for c in circles}
    for center, label in texts.items():
        assert (center in highlighted) == (label in {"5", "7", "2"})

    assert visualizer.select_triad(NO_TRIAD)
    assert surface.ops_of(CircleOp) == []
    assert surface.passes == 3


def test_unchanged_selection_skips_redraw() -> None:
    visualizer = make_visualizer()
    surface = recording(visualizer)
    assert visualizer.select_triad(triad_for_value("ii"))
    assert not visualizer.select_triad(triad_for_value("ii"))
    assert surface.passes == 2


def test_resize_changes_cell_size() -> None:
    visualizer = make_visualizer()
    surface = recording(visualizer)
    assert visualizer.resize(Viewport(500, 2000))
    assert visualizer.state.cell_size == 30
    assert surface.size == (450, 450)
    assert surface.passes == 2


def test_resize_same_cell_size_skips_redraw() -> None:
    visualizer = make_visualizer()
    assert not visualizer.resize(Viewport(1030, 770))
    assert recording(visualizer).passes == 1


def test_resize_keeps_selection() -> None:
    visualizer = make_visualizer()
    visualizer.select_triad(triad_for_value("vi"))
    visualizer.resize(Viewport(400, 400))
    assert visualizer.state.triad.value == "vi"
    assert recording(visualizer).ops_of(CircleOp) != []


def test_reset_forces_redraw() -> None:
    visualizer = make_visualizer()
    visualizer.reset()
    assert recording(visualizer).passes == 2


def test_close_releases_surface() -> None:
    visualizer = make_visualizer()
    surface = recording(visualizer)
    visualizer.close()
    assert surface.closed
    with pytest.raises(RuntimeError):
        surface.clear(SCHEME.background)


def test_context_releases_surface() -> None:
    surface = RecordingSurface()
    with visualizer_context(surface, CONFIG, SCHEME, VIEWPORT) as visualizer:
        assert visualizer.surface is surface
        assert not surface.closed
    assert surface.closed


def test_context_releases_surface_on_error() -> None:
    surface = RecordingSurface()
    with pytest.raises(KeyError):
        with visualizer_context(surface, CONFIG, SCHEME, VIEWPORT):
            raise KeyError("boom")
    assert surface.closed


class FailingSurface(RecordingSurface):
    def rect(self, x: int, y: int, size: int, outline: Color, weight: int) -> None:
        raise OSError("device lost")


def test_context_releases_surface_when_first_pass_fails() -> None:
    surface = FailingSurface()
    with pytest.raises(OSError):
        with visualizer_context(surface, CONFIG, SCHEME, VIEWPORT):
            pass
    assert surface.closed


def test_degrees_drawn_match_mapping() -> None:
    visualizer = make_visualizer()
    texts = recording(visualizer).ops_of(TextOp)
    cell = visualizer.state.cell_size
    for t in texts:
        fret = int(t.cx // cell)
        str_index = CONFIG.matrix_size - 1 - int(t.cy // cell)
        assert t.text == str(degree_at(str_index, fret))
