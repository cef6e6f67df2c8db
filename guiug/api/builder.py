"""Application-facing scene builder."""

from __future__ import annotations

from collections.abc import Iterable

from guiug.api.render import RenderAPI
from guiug.api.textures import TextureRegistry, create_texture_registry
from guiug.layout.anchor import Position
from guiug.layout.geometry import Dimension
from guiug.layout.size import Size
from guiug.runtime.config import GuiugConfig, load_guiug_config
from guiug.runtime.frame import FrameDriver
from guiug.runtime.logging import setup_guiug_logging
from guiug.scene.nodes import (
    Color,
    Column,
    Empty,
    Layer,
    NodeId,
    RectNode,
    Row,
    TextureId,
    TextureNode,
)
from guiug.scene.store import Scene


class Guiug:
    """Builds a scene and its textures before the first frame.

    Example::

        app = Guiug()
        red = app.rect_node((1.0, 0.0, 0.0, 1.0))
        app.set_root(app.layer_node([(FULL, red)]))
    """

    def __init__(
        self,
        *,
        scene: Scene | None = None,
        textures: TextureRegistry | None = None,
    ) -> None:
        self.scene = scene if scene is not None else Scene()
        self.textures = textures if textures is not None else create_texture_registry()

    def add_texture(self, data: bytes) -> TextureId:
        """Register encoded image bytes for use by texture nodes."""
        return self.textures.register(data)

    def set_root(self, node_id: NodeId) -> None:
        """Set the node laid out against the full screen. Nothing is drawn without one."""
        self.scene.set_root(node_id)

    def layer_node(self, children: Iterable[tuple[Position, NodeId]]) -> NodeId:
        """Create a layer. The first child is visible where children overlap."""
        return self.scene.insert_node(Layer(tuple(children)))

    def row_node(self, children: Iterable[tuple[Size, NodeId]]) -> NodeId:
        """Create a row; children split its height."""
        return self.scene.insert_node(Row(tuple(children)))

    def column_node(self, children: Iterable[tuple[Size, NodeId]]) -> NodeId:
        """Create a column; children split its width."""
        return self.scene.insert_node(Column(tuple(children)))

    def rect_node(self, color: Color) -> NodeId:
        """Create a solid rectangle with an RGBA colour in ``[0, 1]``."""
        return self.scene.insert_node(RectNode(tuple(color)))

    def texture_node(self, texture_id: TextureId) -> NodeId:
        """Create a textured rectangle from an id returned by :meth:`add_texture`."""
        return self.scene.insert_node(TextureNode(texture_id))

    def empty_node(self) -> NodeId:
        """Create a spacer for rows and columns."""
        return self.scene.insert_node(Empty())

    def frame_driver(self, renderer: RenderAPI, config: GuiugConfig | None = None) -> FrameDriver:
        """Decode textures and return a driver bound to ``renderer``."""
        cfg = config if config is not None else load_guiug_config()
        setup_guiug_logging(cfg)
        self.textures.load()
        return FrameDriver(
            self.scene,
            renderer,
            screen=Dimension(cfg.window_width, cfg.window_height),
            strict=cfg.strict_references,
            skip_failed_frames=cfg.skip_failed_frames,
        )
