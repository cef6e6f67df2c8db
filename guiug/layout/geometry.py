"""Integer geometry primitives used by layout resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Dimension:
    """Two-dimensional extent used as the reference for relative sizes."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in screen pixels.

    ``w`` and ``h`` may be negative while layout is in progress.
    """

    x: int
    y: int
    w: int
    h: int

    def dimension(self) -> Dimension:
        """Return the extent of the rectangle."""
        return Dimension(self.w, self.h)

    def clamped(self) -> Rect:
        """Return the rectangle with negative extents clamped to zero."""
        return Rect(self.x, self.y, max(0, self.w), max(0, self.h))

    @classmethod
    def from_screen(cls, screen: Dimension) -> Rect:
        """Return the rectangle covering the whole screen."""
        return cls(0, 0, screen.width, screen.height)
