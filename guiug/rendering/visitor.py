"""Layout/paint traversal of a scene tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from guiug.layout.distribution import distribute
from guiug.layout.geometry import Dimension, Rect
from guiug.rendering.primitives import FlatPrimitive, TexturedPrimitive
from guiug.runtime.errors import BrokenReferenceError
from guiug.scene.nodes import Column, Empty, Layer, NodeId, RectNode, Row, TextureNode
from guiug.scene.store import Scene

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NodeVisitor:
    """Resolves node rectangles and collects draw primitives for one frame.

    ``z_index`` is the draw-order counter shared by the whole traversal; it
    advances once per layer slot, never per row/column slot or per leaf.
    """

    screen: Dimension
    strict: bool = False
    flat: list[FlatPrimitive] = field(default_factory=list)
    textured: list[TexturedPrimitive] = field(default_factory=list)
    z_index: int = 0

    @classmethod
    def visit(cls, scene: Scene, screen: Dimension, *, strict: bool = False) -> NodeVisitor:
        """Walk ``scene`` from its root against a screen of the given extent."""
        visitor = cls(screen=screen, strict=strict)
        if scene.root is not None:
            visitor.visit_node(scene, scene.root, Rect.from_screen(screen))
        logger.debug(
            "scene_visited flat=%d textured=%d z_index=%d",
            len(visitor.flat),
            len(visitor.textured),
            visitor.z_index,
        )
        return visitor

    def visit_node(
        self,
        scene: Scene,
        node_id: NodeId,
        rect: Rect,
        *,
        parent_id: NodeId | None = None,
    ) -> None:
        node = scene.get_node(node_id)
        if node is None:
            if self.strict:
                raise BrokenReferenceError(node_id, parent_id=parent_id)
            logger.debug("scene_dangling_reference id=%d parent=%s", node_id, parent_id)
            return
        match node:
            case Layer(children):
                for position, child_id in children:
                    child_rect = position.resolve(rect, self.screen)
                    self.visit_node(scene, child_id, child_rect, parent_id=node_id)
                    self.z_index += 1
            case Row(children):
                for child_rect, child_id in distribute(children, rect, self.screen, "row"):
                    self.visit_node(scene, child_id, child_rect, parent_id=node_id)
            case Column(children):
                for child_rect, child_id in distribute(children, rect, self.screen, "column"):
                    self.visit_node(scene, child_id, child_rect, parent_id=node_id)
            case RectNode(color):
                painted = rect.clamped()
                self.flat.append(
                    FlatPrimitive(
                        x=painted.x,
                        y=painted.y,
                        z=self.z_index,
                        width=painted.w,
                        height=painted.h,
                        color=color,
                    )
                )
            case TextureNode(texture_id):
                painted = rect.clamped()
                self.textured.append(
                    TexturedPrimitive(
                        x=painted.x,
                        y=painted.y,
                        z=self.z_index,
                        width=painted.w,
                        height=painted.h,
                        texture_id=texture_id,
                    )
                )
            case Empty():
                pass
            case _:
                raise TypeError(f"unsupported node: {node!r}")


def visit_scene(
    scene: Scene, screen: Dimension, *, strict: bool = False
) -> tuple[list[FlatPrimitive], list[TexturedPrimitive]]:
    """Resolve ``scene`` and return its flat and textured draw lists."""
    visitor = NodeVisitor.visit(scene, screen, strict=strict)
    return visitor.flat, visitor.textured
