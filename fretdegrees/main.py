"""Main entry point for the scale degree visualizer.

Parses command-line arguments, sets up logging, and then either opens the
interactive window, exports the grid as a PNG, or prints it as text.
"""

import logging
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional

from fretdegrees import constants
from fretdegrees.config import default_scheme, init_config
from fretdegrees.grid import format_grid
from fretdegrees.image import ImageSurface
from fretdegrees.triads import TRIADS, Triad, triad_for_value
from fretdegrees.view import visualizer_context
from fretdegrees.viewport import Viewport


def export_image(path: Path, viewport: Viewport, triad: Triad) -> None:
    """Render the grid for a triad and viewport to a PNG file.

    Args:
        path: Where to write the image.
        viewport: The viewport the cell size is derived from.
        triad: The triad to highlight.
    """
    config = init_config()
    side = config.surface_size(viewport.cell_size(config))
    surface = ImageSurface(side, side)
    with visualizer_context(surface, config, default_scheme(), viewport, triad):
        surface.save(path)


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(description=constants.WINDOW_TITLE)
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument(
        "--triad",
        default="",
        choices=[t.value for t in TRIADS],
        help="triad to highlight initially (default: none)",
    )
    parser.add_argument("--width", type=int, default=constants.DEFAULT_VIEWPORT_WIDTH)
    parser.add_argument(
        "--height", type=int, default=constants.DEFAULT_VIEWPORT_HEIGHT
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--export", type=Path, help="write a PNG and exit")
    group.add_argument("--text", action="store_true", help="print the grid and exit")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(format=constants.LOG_FORMAT, level=log_level)


def run(args: Namespace) -> None:
    triad = triad_for_value(args.triad)
    viewport = Viewport(width=args.width, height=args.height)
    if args.text:
        print(format_grid(triad.degrees))
    elif args.export is not None:
        export_image(args.export, viewport, triad)
    else:
        # Imported here so text and image output work without a display
        from fretdegrees.app import run_app

        run_app(init_config(), default_scheme(), viewport, triad)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the visualizer."""
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    run(args)
    logging.info("done")


if __name__ == "__main__":
    main()
