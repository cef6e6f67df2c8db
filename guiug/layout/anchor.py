"""Anchors and positions: one-axis placement rules and their resolution."""

from __future__ import annotations

from dataclasses import dataclass

from guiug.layout.geometry import Dimension, Rect
from guiug.layout.size import ZERO, Size, resolve_size


@dataclass(frozen=True, slots=True)
class Start:
    """Offset ``pos`` from the parent's start edge, length ``size``."""

    pos: Size
    size: Size


@dataclass(frozen=True, slots=True)
class Center:
    """Centered in the parent, shifted by ``pos``, length ``size``."""

    pos: Size
    size: Size


@dataclass(frozen=True, slots=True)
class End:
    """Offset ``pos`` from the parent's far edge, length ``size``."""

    pos: Size
    size: Size


@dataclass(frozen=True, slots=True)
class Stretch:
    """Spans the parent inset by ``start`` and ``end``."""

    start: Size
    end: Size


type Anchor = Start | Center | End | Stretch


def start(pos: Size, size: Size) -> Start:
    return Start(pos, size)


def center(pos: Size, size: Size) -> Center:
    return Center(pos, size)


def end(pos: Size, size: Size) -> End:
    return End(pos, size)


def stretch(start: Size, end: Size) -> Stretch:
    return Stretch(start, end)


def _half(value: int) -> int:
    # Integer halving truncates toward zero.
    return value // 2 if value >= 0 else -((-value) // 2)


def resolve_anchor(
    anchor: Anchor,
    origin: int,
    length: int,
    parent: Dimension,
    screen: Dimension,
) -> tuple[int, int]:
    """Resolve one axis of a placement into ``(origin, length)``.

    ``origin`` and ``length`` describe the parent along the axis being
    resolved; ``parent`` is the parent's full extent, used by ratio sizes.
    """
    match anchor:
        case Start(pos, size):
            return origin + resolve_size(pos, parent, screen), resolve_size(size, parent, screen)
        case Center(pos, size):
            child_length = resolve_size(size, parent, screen)
            child_origin = (
                origin + _half(length) + resolve_size(pos, parent, screen) - _half(child_length)
            )
            return child_origin, child_length
        case End(pos, size):
            child_length = resolve_size(size, parent, screen)
            far_edge = origin + length - resolve_size(pos, parent, screen)
            return far_edge - child_length, child_length
        case Stretch(start_inset, end_inset):
            child_origin = origin + resolve_size(start_inset, parent, screen)
            far_edge = origin + length - resolve_size(end_inset, parent, screen)
            return child_origin, far_edge - child_origin
    raise TypeError(f"unsupported anchor: {anchor!r}")


@dataclass(frozen=True, slots=True)
class Position:
    """Horizontal and vertical anchors placing a child inside its parent."""

    horizontal: Anchor
    vertical: Anchor

    def resolve(self, parent: Rect, screen: Dimension) -> Rect:
        """Resolve both axes independently against the parent rectangle."""
        extent = parent.dimension()
        x, w = resolve_anchor(self.horizontal, parent.x, parent.w, extent, screen)
        y, h = resolve_anchor(self.vertical, parent.y, parent.h, extent, screen)
        return Rect(x, y, w, h)


FULL = Position(Stretch(ZERO, ZERO), Stretch(ZERO, ZERO))
