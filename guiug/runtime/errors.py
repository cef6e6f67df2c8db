"""Error taxonomy and shared exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias


class GuiugError(Exception):
    """Base class for errors raised by the layout engine."""


class LayoutError(GuiugError):
    """Layout resolution failed for the current frame."""


class LayoutConfigurationError(LayoutError):
    """A node carries layout rules that cannot be resolved."""


class BrokenReferenceError(LayoutError):
    """A node refers to a child id that is not in the scene."""

    def __init__(self, node_id: int, *, parent_id: int | None = None) -> None:
        detail = f"node {node_id} is not in the scene"
        if parent_id is not None:
            detail = f"{detail} (referenced by node {parent_id})"
        super().__init__(detail)
        self.node_id = node_id
        self.parent_id = parent_id


class TextureError(GuiugError):
    """A texture is unknown, not loaded, or could not be decoded."""


# Errors a frame driver may tolerate by skipping the frame.
RecoverableFrameErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_FRAME_ERRORS: RecoverableFrameErrors = (LayoutError,)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)
