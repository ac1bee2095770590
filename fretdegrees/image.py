"""Pillow-backed surface for rendering the grid to an image file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, ImageDraw, ImageFont

from fretdegrees.color import Color
from fretdegrees.surface import Surface


class ImageSurface(Surface):
    """Draws into an in-memory RGB image that can be saved as PNG."""

    def __init__(
        self, width: int, height: int, font_path: Optional[str] = None
    ) -> None:
        self._font_path = font_path
        self._fonts: Dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}
        self._image: Optional[Image.Image] = Image.new("RGB", (width, height), "white")
        self._draw = ImageDraw.Draw(self._image)

    def _font(self, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        font = self._fonts.get(size)
        if font is None:
            if self._font_path is not None:
                font = ImageFont.truetype(self._font_path, size)
            else:
                font = ImageFont.load_default(size)
            self._fonts[size] = font
        return font

    def _ensure_open(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Surface is closed")
        return self._image

    @property
    def image(self) -> Image.Image:
        """A copy of the current image contents."""
        return self._ensure_open().copy()

    def resize(self, width: int, height: int) -> None:
        image = self._ensure_open()
        if image.size != (width, height):
            image.close()
            self._image = Image.new("RGB", (width, height), "white")
            self._draw = ImageDraw.Draw(self._image)

    def clear(self, color: Color) -> None:
        image = self._ensure_open()
        self._draw.rectangle([0, 0, image.width, image.height], fill=color.to_rgb())

    def rect(self, x: int, y: int, size: int, outline: Color, weight: int) -> None:
        self._ensure_open()
        self._draw.rectangle(
            [x, y, x + size, y + size], outline=outline.to_rgb(), width=weight
        )

    def circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: Color,
        outline: Color,
        weight: int,
    ) -> None:
        self._ensure_open()
        self._draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=fill.to_rgb(),
            outline=outline.to_rgb(),
            width=weight,
        )

    def text(self, cx: float, cy: float, text: str, size: int, fill: Color) -> None:
        self._ensure_open()
        font = self._font(size)
        # Center on the glyph box, not the origin
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=font)
        tx = cx - (right - left) / 2 - left
        ty = cy - (bottom - top) / 2 - top
        self._draw.text((tx, ty), text, font=font, fill=fill.to_rgb())

    def save(self, path: Path) -> None:
        """Write the current image as a PNG file."""
        image = self._ensure_open()
        image.save(path, format="PNG")
        logging.info("saved %dx%d image to %s", image.width, image.height, path)

    def close(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None
