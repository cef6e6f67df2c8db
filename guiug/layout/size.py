"""Size specifications and the size resolver."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from guiug.layout.geometry import Dimension


@dataclass(frozen=True, slots=True)
class Pixel:
    """Absolute length in pixels."""

    value: int


@dataclass(frozen=True, slots=True)
class ParentWidth:
    """Ratio of the parent width."""

    ratio: float


@dataclass(frozen=True, slots=True)
class ParentHeight:
    """Ratio of the parent height."""

    ratio: float


@dataclass(frozen=True, slots=True)
class ScreenWidth:
    """Ratio of the screen width."""

    ratio: float


@dataclass(frozen=True, slots=True)
class ScreenHeight:
    """Ratio of the screen height."""

    ratio: float


@dataclass(frozen=True, slots=True)
class Weight:
    """Proportional share of the space left in a row or column."""

    value: float


type Size = Pixel | ParentWidth | ParentHeight | ScreenWidth | ScreenHeight | Weight

ZERO = Pixel(0)


def scale_f32(extent: int, ratio: float) -> float:
    """Multiply an integer extent by a ratio in single precision."""
    return float(np.float32(extent) * np.float32(ratio))


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded) if value >= 0 else -int(rounded)


def resolve_size(size: Size, parent: Dimension, screen: Dimension) -> int:
    """Resolve a size specification into a pixel length.

    ``Weight`` is only meaningful inside row/column distribution; resolving it
    here truncates the weight toward zero.
    """
    match size:
        case Pixel(value):
            return value
        case ParentWidth(ratio):
            return round_half_away(scale_f32(parent.width, ratio))
        case ParentHeight(ratio):
            return round_half_away(scale_f32(parent.height, ratio))
        case ScreenWidth(ratio):
            return round_half_away(scale_f32(screen.width, ratio))
        case ScreenHeight(ratio):
            return round_half_away(scale_f32(screen.height, ratio))
        case Weight(value):
            return int(value)
    raise TypeError(f"unsupported size specification: {size!r}")
