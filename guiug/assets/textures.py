"""Texture registry: encoded image bytes in, opaque texture ids out."""

from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from guiug.api.textures import DecodedTexture, TextureDecoder, TextureRegistry
from guiug.runtime.errors import TextureError
from guiug.scene.nodes import TextureId

logger = logging.getLogger(__name__)

# Texture ids travel to the GPU as 16-bit instance attributes.
MAX_TEXTURES = 1 << 16


def decode_rgba(data: bytes) -> np.ndarray:
    """Decode encoded image bytes into an ``(h, w, 4)`` uint8 array."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, OSError) as exc:
        raise TextureError(f"could not decode texture data: {exc}") from exc
    return np.asarray(rgba, dtype=np.uint8)


class RuntimeTextureRegistry(TextureRegistry):
    """Registry that assigns sequential ids and decodes textures once."""

    def __init__(self) -> None:
        self._sources: dict[TextureId, bytes] = {}
        self._decoded: dict[TextureId, DecodedTexture] = {}
        self._next_id: TextureId = 0

    def register(self, data: bytes) -> TextureId:
        """Register encoded image bytes and return their id."""
        if not data:
            raise ValueError("texture data must not be empty")
        if self._next_id >= MAX_TEXTURES:
            raise TextureError(f"texture id space exhausted ({MAX_TEXTURES} textures)")
        texture_id = self._next_id
        self._sources[texture_id] = bytes(data)
        self._next_id += 1
        return texture_id

    def load(self, decoder: TextureDecoder | None = None) -> None:
        """Decode every registered texture that is not decoded yet."""
        decode = decoder if decoder is not None else decode_rgba
        for texture_id, data in self._sources.items():
            if texture_id in self._decoded:
                continue
            pixels = decode(data)
            self._decoded[texture_id] = DecodedTexture(texture_id=texture_id, pixels=pixels)
            logger.debug(
                "texture_decoded id=%d width=%d height=%d",
                texture_id,
                pixels.shape[1],
                pixels.shape[0],
            )

    def get(self, texture_id: TextureId) -> DecodedTexture:
        """Return the decoded texture for an id."""
        decoded = self._decoded.get(texture_id)
        if decoded is not None:
            return decoded
        if texture_id in self._sources:
            raise TextureError(f"texture not loaded: id={texture_id}")
        raise TextureError(f"unknown texture: id={texture_id}")

    def ids(self) -> tuple[TextureId, ...]:
        return tuple(self._sources)

    def clear(self) -> None:
        """Drop decoded data; registrations are kept."""
        self._decoded.clear()

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._sources
