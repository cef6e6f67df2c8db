"""Declarative scene-graph layout engine.

Build a scene with :class:`Guiug`, then drive frames through a renderer with
:meth:`Guiug.frame_driver`.
"""

from guiug.api.builder import Guiug
from guiug.layout import (
    FULL,
    ZERO,
    Anchor,
    Dimension,
    ParentHeight,
    ParentWidth,
    Pixel,
    Position,
    Rect,
    ScreenHeight,
    ScreenWidth,
    Size,
    Weight,
    center,
    end,
    start,
    stretch,
)
from guiug.rendering import FlatPrimitive, NodeVisitor, TexturedPrimitive, visit_scene
from guiug.runtime.errors import (
    BrokenReferenceError,
    GuiugError,
    LayoutConfigurationError,
    LayoutError,
    TextureError,
)
from guiug.scene import NodeId, Scene, TextureId

__all__ = [
    "FULL",
    "ZERO",
    "Anchor",
    "BrokenReferenceError",
    "Dimension",
    "FlatPrimitive",
    "Guiug",
    "GuiugError",
    "LayoutConfigurationError",
    "LayoutError",
    "NodeId",
    "NodeVisitor",
    "ParentHeight",
    "ParentWidth",
    "Pixel",
    "Position",
    "Rect",
    "Scene",
    "ScreenHeight",
    "ScreenWidth",
    "Size",
    "TextureError",
    "TextureId",
    "TexturedPrimitive",
    "Weight",
    "center",
    "end",
    "start",
    "stretch",
    "visit_scene",
]
