"""Leaf directory classification."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from tidytree.models.classification import Category


def classify_leaf(
    extensions: Iterable[str],
    subdirectory_count: int,
    file_count: int,
    image_set: Collection[str],
    video_set: Collection[str],
    *,
    detect_orphans: bool = True,
) -> Category:
    """Decide the category of a directory from its file extensions.

    Emptiness wins over orphan detection, which wins over media
    categorization. A directory that still has subdirectories is not a leaf
    and stays unclassified. Any media extension in a directory that is not
    purely images or purely videos makes it mixed.
    """
    if subdirectory_count > 0:
        return Category.UNCLASSIFIED
    if file_count == 0:
        return Category.EMPTY
    if detect_orphans and file_count == 1:
        return Category.ORPHAN

    lowered = [e.lower() for e in extensions]
    if all(e in image_set for e in lowered):
        return Category.IMAGES
    if all(e in video_set for e in lowered):
        return Category.VIDEOS
    if not any(e in image_set or e in video_set for e in lowered):
        return Category.OTHER
    return Category.MIXED
