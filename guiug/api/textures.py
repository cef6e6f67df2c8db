"""Public texture-registry API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from guiug.scene.nodes import TextureId


@dataclass(frozen=True, slots=True)
class DecodedTexture:
    """RGBA8 pixels of one decoded texture, shaped ``(height, width, 4)``."""

    texture_id: TextureId
    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


TextureDecoder = Callable[[bytes], np.ndarray]


class TextureRegistry(ABC):
    """Public registry contract mapping texture ids to image data."""

    @abstractmethod
    def register(self, data: bytes) -> TextureId:
        """Register encoded image bytes and return their id."""

    @abstractmethod
    def load(self, decoder: TextureDecoder | None = None) -> None:
        """Decode every registered texture that is not decoded yet."""

    @abstractmethod
    def get(self, texture_id: TextureId) -> DecodedTexture:
        """Resolve an id to its decoded texture."""

    @abstractmethod
    def ids(self) -> tuple[TextureId, ...]:
        """Return registered ids in registration order."""

    @abstractmethod
    def clear(self) -> None:
        """Drop decoded data; registrations are kept."""


def create_texture_registry() -> TextureRegistry:
    """Create default texture-registry implementation."""
    from guiug.assets.textures import RuntimeTextureRegistry

    return RuntimeTextureRegistry()
