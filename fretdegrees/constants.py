"""Fixed dimensions and tuning constants for the scale degree grid."""

MATRIX_SIZE = 15
"""Number of strings and of frets shown; the grid is always square."""

BASE_TUNING = 4
"""Semitone offset of the lowest open string from the reference pitch."""

STRING_INTERVAL = 5
"""Semitones between adjacent strings (a perfect fourth)."""

MAX_NOTES = 12
"""Number of pitch classes in the chromatic scale."""

NUM_DEGREES = 7
"""Number of degrees in a diatonic scale."""

PADDING = 40
"""Horizontal and vertical padding around the grid (pixels)."""

HEADER_HEIGHT = 120
"""Vertical space reserved for the title and dropdown (pixels)."""

MIN_CELL_SIZE = 1
"""Smallest cell size ever returned by viewport sizing (pixels)."""

CIRCLE_RADIUS_RATIO = 0.35
"""Highlight circle radius as a fraction of the cell size."""

TEXT_SIZE_RATIO = 0.6
"""Degree label font size as a fraction of the cell size."""

GRID_WEIGHT = 1
ROOT_WEIGHT = 3
MEMBER_WEIGHT = 1

DEFAULT_VIEWPORT_WIDTH = 1024
DEFAULT_VIEWPORT_HEIGHT = 768

WINDOW_TITLE = "Major scale degree visualizer"

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"
