"""Texture asset primitives."""

from guiug.api.textures import DecodedTexture
from guiug.assets.textures import RuntimeTextureRegistry as TextureRegistry
from guiug.assets.textures import decode_rgba

__all__ = ["DecodedTexture", "TextureRegistry", "decode_rgba"]
