"""Tidytree data models."""

from tidytree.models.action_result import ActionResult
from tidytree.models.classification import Category, ClassificationResult, SizeEntry
from tidytree.models.options import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS, Options
from tidytree.models.snapshot import MARKER_NAME, DirectoryEntry, EntryKind, LeafSnapshot

__all__ = [
    "IMAGE_EXTENSIONS",
    "MARKER_NAME",
    "VIDEO_EXTENSIONS",
    "ActionResult",
    "Category",
    "ClassificationResult",
    "DirectoryEntry",
    "EntryKind",
    "LeafSnapshot",
    "Options",
    "SizeEntry",
]
