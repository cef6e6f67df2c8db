"""Runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 800


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _positive_int(name: str, default: int) -> int:
    value = _int(name, default)
    return value if value > 0 else default


@dataclass(frozen=True, slots=True)
class GuiugConfig:
    """Immutable runtime configuration."""

    log_level: str
    log_format: str
    log_file: str | None
    strict_references: bool
    window_width: int
    window_height: int
    skip_failed_frames: bool = True


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve runtime log level with guiug-prefixed override."""
    value = os.getenv("GUIUG_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_guiug_config() -> GuiugConfig:
    """Load immutable configuration from env vars."""
    log_format = os.getenv("GUIUG_LOG_FORMAT", "text").strip().lower()
    log_file = os.getenv("GUIUG_LOG_FILE", "").strip() or None
    return GuiugConfig(
        log_level=resolve_log_level_name(),
        log_format=log_format if log_format in {"text", "json"} else "text",
        log_file=log_file,
        strict_references=_flag("GUIUG_STRICT_REFERENCES", False),
        window_width=_positive_int("GUIUG_WINDOW_WIDTH", DEFAULT_WINDOW_WIDTH),
        window_height=_positive_int("GUIUG_WINDOW_HEIGHT", DEFAULT_WINDOW_HEIGHT),
        skip_failed_frames=_flag("GUIUG_SKIP_FAILED_FRAMES", True),
    )
