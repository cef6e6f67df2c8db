"""Per-frame driver: screen extent tracking, layout, and submission."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from guiug.api.render import RenderAPI
from guiug.layout.geometry import Dimension
from guiug.rendering.primitives import depth_range
from guiug.rendering.viewport import extract_resize_dimensions, screen_dimension
from guiug.rendering.visitor import NodeVisitor
from guiug.runtime.errors import RECOVERABLE_FRAME_ERRORS, log_recoverable
from guiug.scene.store import Scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FrameStats:
    """Summary of one submitted frame."""

    frame_index: int
    screen: Dimension
    flat_count: int
    textured_count: int
    z_index: int


class FrameDriver:
    """Re-resolves the scene against the current screen extent every frame."""

    def __init__(
        self,
        scene: Scene,
        renderer: RenderAPI,
        *,
        screen: Dimension,
        strict: bool = False,
        skip_failed_frames: bool = True,
    ) -> None:
        self._scene = scene
        self._renderer = renderer
        self._screen = screen
        self._strict = strict
        self._skip_failed_frames = skip_failed_frames
        self._frame_index = 0

    @property
    def screen(self) -> Dimension:
        return self._screen

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def resize(self, width: float, height: float) -> Dimension:
        """Apply a new window size and return the resulting screen extent."""
        screen = screen_dimension(width, height)
        if screen != self._screen:
            logger.info(
                "screen_resized from=%dx%d to=%dx%d",
                self._screen.width,
                self._screen.height,
                screen.width,
                screen.height,
            )
        self._screen = screen
        return screen

    def handle_resize_event(self, event: dict[str, object]) -> bool:
        """Apply a backend resize payload; return whether it carried a size."""
        width, height = extract_resize_dimensions(event)
        if width is None or height is None:
            logger.debug("resize_event_ignored keys=%s", sorted(event))
            return False
        self.resize(width, height)
        return True

    def render_frame(self) -> FrameStats | None:
        """Lay out the scene and hand its primitives to the renderer.

        Returns ``None`` when layout failed and the frame was skipped.
        """
        screen = self._screen
        try:
            visitor = NodeVisitor.visit(self._scene, screen, strict=self._strict)
        except RECOVERABLE_FRAME_ERRORS:
            if not self._skip_failed_frames:
                raise
            log_recoverable(
                logger,
                f"frame_skipped index={self._frame_index}",
                level=logging.WARNING,
            )
            self._frame_index += 1
            return None

        self._renderer.begin_frame(screen, depth_range(visitor.z_index))
        self._renderer.draw_flat(visitor.flat)
        self._renderer.draw_textured(visitor.textured)
        self._renderer.end_frame()

        stats = FrameStats(
            frame_index=self._frame_index,
            screen=screen,
            flat_count=len(visitor.flat),
            textured_count=len(visitor.textured),
            z_index=visitor.z_index,
        )
        self._frame_index += 1
        return stats
