"""The drawing surface contract and an in-memory recording surface.

The renderer issues a full pass of primitive draw calls on every redraw:
one clear followed by cell outlines, highlight circles and numerals.
Concrete surfaces translate these into toolkit calls (see ``canvas`` for
tkinter and ``image`` for Pillow). ``RecordingSurface`` keeps the calls
themselves so a pass can be inspected without any toolkit.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple, Type, TypeVar

from fretdegrees.base import Closeable
from fretdegrees.color import Color


class Surface(Closeable, metaclass=ABCMeta):
    """A square drawing target owned by exactly one visualizer."""

    @abstractmethod
    def resize(self, width: int, height: int) -> None:
        """Change the drawable area in pixels, keeping the same surface."""
        raise NotImplementedError()

    @abstractmethod
    def clear(self, color: Color) -> None:
        """Erase everything and fill the whole surface with ``color``."""
        raise NotImplementedError()

    @abstractmethod
    def rect(self, x: int, y: int, size: int, outline: Color, weight: int) -> None:
        """Draw an unfilled square with its top-left corner at ``(x, y)``."""
        raise NotImplementedError()

    @abstractmethod
    def circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: Color,
        outline: Color,
        weight: int,
    ) -> None:
        """Draw a filled and outlined circle centered at ``(cx, cy)``."""
        raise NotImplementedError()

    @abstractmethod
    def text(self, cx: float, cy: float, text: str, size: int, fill: Color) -> None:
        """Draw ``text`` centered on ``(cx, cy)`` at font size ``size``."""
        raise NotImplementedError()


@dataclass(frozen=True)
class ClearOp:
    color: Color


@dataclass(frozen=True)
class RectOp:
    x: int
    y: int
    size: int
    outline: Color
    weight: int


@dataclass(frozen=True)
class CircleOp:
    cx: float
    cy: float
    radius: float
    fill: Color
    outline: Color
    weight: int


@dataclass(frozen=True)
class TextOp:
    cx: float
    cy: float
    text: str
    size: int
    fill: Color


DrawOp = ClearOp | RectOp | CircleOp | TextOp
"""Any primitive draw call."""

O = TypeVar("O", ClearOp, RectOp, CircleOp, TextOp)


class RecordingSurface(Surface):
    """A surface that remembers the draw calls of its most recent pass.

    Clearing discards what was recorded before, exactly as clearing a real
    surface erases what was drawn.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._size = (width, height)
        self._ops: List[DrawOp] = []
        self._passes = 0
        self._closed = False

    def _record(self, op: DrawOp) -> None:
        if self._closed:
            raise RuntimeError("Surface is closed")
        self._ops.append(op)

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    @property
    def passes(self) -> int:
        """How many times the surface has been cleared."""
        return self._passes

    @property
    def closed(self) -> bool:
        return self._closed

    def ops(self) -> List[DrawOp]:
        """Return the draw calls since the last clear, in order."""
        return list(self._ops)

    def ops_of(self, op_type: Type[O]) -> List[O]:
        """Return only the recorded draw calls of one type."""
        return [op for op in self._ops if isinstance(op, op_type)]

    def resize(self, width: int, height: int) -> None:
        if self._closed:
            raise RuntimeError("Surface is closed")
        self._size = (width, height)

    def clear(self, color: Color) -> None:
        if self._closed:
            raise RuntimeError("Surface is closed")
        self._ops = []
        self._passes += 1
        self._record(ClearOp(color))

    def rect(self, x: int, y: int, size: int, outline: Color, weight: int) -> None:
        self._record(RectOp(x, y, size, outline, weight))

    def circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        fill: Color,
        outline: Color,
        weight: int,
    ) -> None:
        self._record(CircleOp(cx, cy, radius, fill, outline, weight))

    def text(self, cx: float, cy: float, text: str, size: int, fill: Color) -> None:
        self._record(TextOp(cx, cy, text, size, fill))

    def close(self) -> None:
        self._closed = True
        self._ops = []
