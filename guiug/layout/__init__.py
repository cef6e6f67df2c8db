"""Layout primitives and resolvers."""

from guiug.layout.anchor import (
    FULL,
    Anchor,
    Center,
    End,
    Position,
    Start,
    Stretch,
    center,
    end,
    resolve_anchor,
    start,
    stretch,
)
from guiug.layout.distribution import distribute
from guiug.layout.geometry import Dimension, Rect
from guiug.layout.size import (
    ZERO,
    ParentHeight,
    ParentWidth,
    Pixel,
    ScreenHeight,
    ScreenWidth,
    Size,
    Weight,
    resolve_size,
)

__all__ = [
    "FULL",
    "ZERO",
    "Anchor",
    "Center",
    "Dimension",
    "End",
    "ParentHeight",
    "ParentWidth",
    "Pixel",
    "Position",
    "Rect",
    "ScreenHeight",
    "ScreenWidth",
    "Size",
    "Start",
    "Stretch",
    "Weight",
    "center",
    "distribute",
    "end",
    "resolve_anchor",
    "resolve_size",
    "start",
    "stretch",
]
