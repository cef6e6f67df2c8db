"""Scene node variants."""

from __future__ import annotations

from dataclasses import dataclass

from guiug.layout.anchor import Position
from guiug.layout.size import Size

type NodeId = int
type TextureId = int
type Color = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Layer:
    """Stack of independently positioned children; each slot is one draw-order step."""

    children: tuple[tuple[Position, NodeId], ...] = ()


@dataclass(frozen=True, slots=True)
class Row:
    """Splits its height among children."""

    children: tuple[tuple[Size, NodeId], ...] = ()


@dataclass(frozen=True, slots=True)
class Column:
    """Splits its width among children."""

    children: tuple[tuple[Size, NodeId], ...] = ()


@dataclass(frozen=True, slots=True)
class RectNode:
    """Flat RGBA rectangle, channels in ``[0, 1]``."""

    color: Color


@dataclass(frozen=True, slots=True)
class TextureNode:
    """Rectangle filled with a registered texture."""

    texture_id: TextureId


@dataclass(frozen=True, slots=True)
class Empty:
    """Spacer that takes up layout space without painting."""


type Node = Layer | Row | Column | RectNode | TextureNode | Empty
