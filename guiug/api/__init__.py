"""Public API contracts."""

from guiug.api.builder import Guiug
from guiug.api.logging import GuiugLoggingConfig
from guiug.api.render import RenderAPI
from guiug.api.textures import (
    DecodedTexture,
    TextureDecoder,
    TextureRegistry,
    create_texture_registry,
)

__all__ = [
    "DecodedTexture",
    "Guiug",
    "GuiugLoggingConfig",
    "RenderAPI",
    "TextureDecoder",
    "TextureRegistry",
    "create_texture_registry",
]
