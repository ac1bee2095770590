"""Small shared abstractions for fretdegrees.

Lifecycle protocols for owned resources (drawing surfaces, the visualizer)
and the exception raised when an exhaustive match falls through.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any


class Closeable(metaclass=ABCMeta):
    """Something that holds a resource and must be released exactly once."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resource and deny further use."""
        raise NotImplementedError()


class Resettable(metaclass=ABCMeta):
    """Something that can be brought back to a freshly drawn state."""

    @abstractmethod
    def reset(self) -> None:
        """Discard derived state and redraw from scratch."""
        raise NotImplementedError()


class MatchException(Exception):
    """Raised when a value fails to match any expected case."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Failed to match value: {value}")
