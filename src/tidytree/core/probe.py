"""Image dimension probing."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PIL import Image

Probe = Callable[[Path], tuple[int, int]]


class ProbeError(Exception):
    """Raised when an image's dimensions cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def pillow_probe(path: Path) -> tuple[int, int]:
    """Return ``(width, height)`` of the image at *path*.

    Pillow only parses the header on open, so pixel data is never decoded.
    SVG is not readable, and images above Pillow's decompression-bomb limit
    (twice ``Image.MAX_IMAGE_PIXELS``) are rejected; both raise ProbeError.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ProbeError(path, str(exc) or type(exc).__name__) from exc
    return width, height
