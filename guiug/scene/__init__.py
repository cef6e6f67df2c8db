"""Scene graph nodes and store."""

from guiug.scene.nodes import (
    Color,
    Column,
    Empty,
    Layer,
    Node,
    NodeId,
    RectNode,
    Row,
    TextureId,
    TextureNode,
)
from guiug.scene.store import Scene

__all__ = [
    "Color",
    "Column",
    "Empty",
    "Layer",
    "Node",
    "NodeId",
    "RectNode",
    "Row",
    "Scene",
    "TextureId",
    "TextureNode",
]
