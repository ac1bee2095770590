"""RGB colors and the named palette used by the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generator, Tuple

from PIL import ImageColor


@dataclass(frozen=True)
class Color:
    """An opaque 8-bit RGB color."""

    red: int
    """Red channel (0-255)."""
    green: int
    """Green channel (0-255)."""
    blue: int
    """Blue channel (0-255)."""

    def __post_init__(self) -> None:
        for channel in self:
            if channel < 0 or channel > 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __iter__(self) -> Generator[int, None, None]:
        yield self.red
        yield self.green
        yield self.blue

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return the color as a tuple, the form Pillow accepts."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Return the color as a ``#RRGGBB`` string, the form tkinter accepts."""
        return "#{:02X}{:02X}{:02X}".format(self.red, self.green, self.blue)

    @classmethod
    def from_hex(cls, code: str) -> Color:
        """Parse a ``#RRGGBB`` (or ``RRGGBB``) string.

        Args:
            code: The hex color code.

        Returns:
            The parsed color.

        Raises:
            ValueError: If the code is not six hex digits.
        """
        digits = code[1:] if code.startswith("#") else code
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {code}")
        try:
            red, green, blue = ImageColor.getrgb(f"#{digits}")[:3]
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {code}") from e
        return cls(red, green, blue)

    @classmethod
    def gray(cls, level: int) -> Color:
        """A neutral gray with all channels at ``level``."""
        return cls(level, level, level)


COLORS: Dict[str, Color] = {
    "White": Color.gray(255),
    "Black": Color.gray(0),
    "Gray": Color.gray(128),
    "Gainsboro": Color.from_hex("#DCDCDC"),
    "LightPink": Color.from_hex("#FFB6C1"),
    "LightYellow": Color.from_hex("#FFFF99"),
    "LightGreen": Color.from_hex("#90EE90"),
}
"""Named colors, keyed by display name."""
