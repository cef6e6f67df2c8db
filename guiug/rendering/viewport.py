"""Screen extent tracking from resize notifications."""

from __future__ import annotations

from guiug.layout.geometry import Dimension


def extract_resize_dimensions(event: dict[str, object]) -> tuple[float | None, float | None]:
    """Extract width/height from heterogeneous resize payloads."""
    width = event.get("width")
    height = event.get("height")
    if isinstance(width, (int, float)) and isinstance(height, (int, float)):
        return float(width), float(height)

    for key in ("size", "logical_size"):
        size = event.get(key)
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            w = size[0]
            h = size[1]
            if isinstance(w, (int, float)) and isinstance(h, (int, float)):
                return float(w), float(h)
    return None, None


def screen_dimension(width: float, height: float) -> Dimension:
    """Convert a reported window size into a layout screen extent.

    Minimised windows report zero sizes; the extent never drops below one
    pixel per axis.
    """
    return Dimension(max(1, int(width)), max(1, int(height)))
