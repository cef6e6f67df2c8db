"""Rendering collaborator contract consumed by the frame driver."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from guiug.layout.geometry import Dimension
from guiug.rendering.primitives import FlatPrimitive, TexturedPrimitive


class RenderAPI(Protocol):
    """Drawing capabilities the layout engine needs from a graphics backend.

    Draw orders are depth values for a less-than depth test: lower ``z`` is
    in front. ``depth_range`` bounds every ``z`` submitted in the frame.
    """

    def begin_frame(self, screen: Dimension, depth_range: int) -> None:
        """Prepare frame-local renderer state."""

    def draw_flat(self, primitives: Sequence[FlatPrimitive]) -> None:
        """Draw solid-colour rectangles."""

    def draw_textured(self, primitives: Sequence[TexturedPrimitive]) -> None:
        """Draw textured rectangles; batching by texture is up to the backend."""

    def end_frame(self) -> None:
        """Finalize and present the frame."""
