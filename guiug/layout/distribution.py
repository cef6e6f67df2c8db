"""Weighted row/column distribution."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

import numpy as np

from guiug.layout.geometry import Dimension, Rect
from guiug.layout.size import Size, Weight, resolve_size
from guiug.runtime.errors import LayoutConfigurationError

# Rows partition height, columns partition width.
type Axis = Literal["row", "column"]


def _weighted_length(remaining: int, weight: float, total_weight: np.float32) -> int:
    share = np.float32(weight) / total_weight
    return int(np.float32(remaining) * share)


def distribute[TChild](
    children: Sequence[tuple[Size, TChild]],
    rect: Rect,
    screen: Dimension,
    axis: Axis,
) -> list[tuple[Rect, TChild]]:
    """Assign each child a slice of ``rect`` along the distribution axis.

    Fixed sizes are resolved first and subtracted from the available extent;
    ``Weight`` entries then share what is left in proportion to their weight.
    Lengths are clamped to zero and the cursor advances by the clamped value.
    """
    parent = rect.dimension()
    remaining = rect.h if axis == "row" else rect.w
    # Weights accumulate in single precision; the sum rounds at every step.
    total_weight = np.float32(0)
    has_weight = False
    fixed: list[int | None] = []
    for size, _ in children:
        if isinstance(size, Weight):
            has_weight = True
            total_weight = np.float32(total_weight + np.float32(size.value))
            fixed.append(None)
            continue
        length = resolve_size(size, parent, screen)
        remaining -= length
        fixed.append(length)

    if has_weight and total_weight == 0:
        raise LayoutConfigurationError(
            f"{axis} has weighted children but their total weight is zero"
        )

    cursor = rect.y if axis == "row" else rect.x
    placed: list[tuple[Rect, TChild]] = []
    for (size, child), fixed_length in zip(children, fixed, strict=True):
        if isinstance(size, Weight):
            length = _weighted_length(remaining, size.value, total_weight)
        else:
            length = fixed_length or 0
        length = max(0, length)
        if axis == "row":
            child_rect = Rect(rect.x, cursor, rect.w, length)
        else:
            child_rect = Rect(cursor, rect.y, length, rect.h)
        placed.append((child_rect, child))
        cursor += length
    return placed
