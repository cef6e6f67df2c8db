"""Layout traversal and draw primitive modules."""

from guiug.rendering.primitives import FlatPrimitive, TexturedPrimitive
from guiug.rendering.visitor import NodeVisitor, visit_scene

__all__ = ["FlatPrimitive", "NodeVisitor", "TexturedPrimitive", "visit_scene"]
