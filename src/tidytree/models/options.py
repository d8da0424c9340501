"""Per-run options."""

from __future__ import annotations

from dataclasses import dataclass

IMAGE_EXTENSIONS = frozenset({".bmp", ".gif", ".jpg", ".jpeg", ".png", ".psd", ".svg", ".tiff", ".webp"})
VIDEO_EXTENSIONS = frozenset({".avi", ".mov", ".mpg", ".mp4", ".wmv", ".mpeg"})


@dataclass(frozen=True, slots=True)
class Options:
    """Switches for a single run, one per command-line flag.

    ``image_extensions`` and ``video_extensions`` hold lowercased suffixes
    including the leading dot.
    """

    categorize: bool = False
    """Sort leaves into images/videos/mixed/others and move them (``-c``)."""

    delete: bool = False
    """Remove empty directories and ``.DS_Store`` markers (``-d``)."""

    orphans: bool = False
    """Report leaves holding exactly one file (``-o``)."""

    sizes: bool = False
    """Report the average image area per leaf (``-s``)."""

    verbose: bool = False
    """Log every visited directory and every move (``-v``)."""

    image_extensions: frozenset[str] = IMAGE_EXTENSIONS
    video_extensions: frozenset[str] = VIDEO_EXTENSIONS
