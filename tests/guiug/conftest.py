from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from guiug.layout.geometry import Dimension
from guiug.rendering.primitives import FlatPrimitive, TexturedPrimitive


@dataclass(slots=True)
class FakeRenderer:
    calls: list[tuple[str, tuple]] = field(default_factory=list)
    flat: list[FlatPrimitive] = field(default_factory=list)
    textured: list[TexturedPrimitive] = field(default_factory=list)

    def begin_frame(self, screen: Dimension, depth_range: int) -> None:
        self.calls.append(("begin_frame", (screen, depth_range)))

    def draw_flat(self, primitives: Sequence[FlatPrimitive]) -> None:
        self.calls.append(("draw_flat", (len(primitives),)))
        self.flat = list(primitives)

    def draw_textured(self, primitives: Sequence[TexturedPrimitive]) -> None:
        self.calls.append(("draw_textured", (len(primitives),)))
        self.textured = list(primitives)

    def end_frame(self) -> None:
        self.calls.append(("end_frame", ()))
