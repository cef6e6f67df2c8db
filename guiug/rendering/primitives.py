"""Draw primitives emitted by layout and their renderer-facing packing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from guiug.scene.nodes import Color, TextureId

FLAT_INSTANCE_DTYPE = np.dtype(
    [("position", np.int32, 3), ("scale", np.int32, 2), ("color", np.float32, 4)]
)
TEXTURED_INSTANCE_DTYPE = np.dtype(
    [("position", np.int32, 3), ("scale", np.int32, 2), ("texture_id", np.uint16)]
)


@dataclass(frozen=True, slots=True)
class FlatPrimitive:
    """Solid-colour rectangle at draw order ``z``."""

    x: int
    y: int
    z: int
    width: int
    height: int
    color: Color


@dataclass(frozen=True, slots=True)
class TexturedPrimitive:
    """Textured rectangle at draw order ``z``."""

    x: int
    y: int
    z: int
    width: int
    height: int
    texture_id: TextureId


def pack_flat_instances(primitives: Sequence[FlatPrimitive]) -> np.ndarray:
    """Pack flat primitives into per-instance records."""
    instances = np.zeros(len(primitives), dtype=FLAT_INSTANCE_DTYPE)
    for idx, prim in enumerate(primitives):
        instances[idx] = ((prim.x, prim.y, prim.z), (prim.width, prim.height), prim.color)
    return instances


def pack_textured_instances(primitives: Sequence[TexturedPrimitive]) -> np.ndarray:
    """Pack textured primitives into per-instance records."""
    instances = np.zeros(len(primitives), dtype=TEXTURED_INSTANCE_DTYPE)
    for idx, prim in enumerate(primitives):
        instances[idx] = ((prim.x, prim.y, prim.z), (prim.width, prim.height), prim.texture_id)
    return instances


def group_by_texture(
    primitives: Iterable[TexturedPrimitive],
) -> dict[TextureId, list[TexturedPrimitive]]:
    """Group textured primitives by texture id for batched draws.

    Groups appear in order of first use; order inside a group is preserved.
    """
    groups: dict[TextureId, list[TexturedPrimitive]] = {}
    for prim in primitives:
        groups.setdefault(prim.texture_id, []).append(prim)
    return groups


def painter_order[TPrimitive: (FlatPrimitive, TexturedPrimitive)](
    primitives: Iterable[TPrimitive],
) -> list[TPrimitive]:
    """Return primitives in back-to-front paint order for depth-less backends.

    Lower draw orders are in front, so they are painted last. Primitives that
    share a draw order keep their emission order.
    """
    return sorted(primitives, key=lambda prim: -prim.z)


def depth_range(z_index: int) -> int:
    """Return the number of depth slots needed for a frame's final draw order.

    A primitive can be emitted at the final counter value (for example a leaf
    placed after the last layer slot of a row), so the range includes it.
    """
    return z_index + 1


def normalized_depth(z: int, z_range: int) -> float:
    """Map a draw order onto ``[0, 1)`` for a less-than depth test."""
    return z / float(max(1, z_range))
