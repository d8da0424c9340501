"""Directory tree traversal and leaf classification."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tidytree.core.classifier import classify_leaf
from tidytree.core.probe import Probe, pillow_probe
from tidytree.core.sizes import average_area
from tidytree.models.classification import Category, ClassificationResult, SizeEntry
from tidytree.models.options import Options
from tidytree.models.snapshot import MARKER_NAME, DirectoryEntry, EntryKind, LeafSnapshot

log = logging.getLogger(__name__)


def _entry_for(item: os.DirEntry) -> DirectoryEntry:
    """Tag a scandir entry. Dot-names are checked before the file type."""
    path = Path(item.path)
    if item.name.startswith("."):
        kind = EntryKind.MARKER if item.name == MARKER_NAME else EntryKind.HIDDEN
        return DirectoryEntry(path=path, kind=kind)
    if item.is_symlink():
        return DirectoryEntry(path=path, kind=EntryKind.SYMLINK)
    if item.is_file(follow_symlinks=False):
        return DirectoryEntry(path=path, kind=EntryKind.FILE, extension=path.suffix.lower())
    if item.is_dir(follow_symlinks=False):
        return DirectoryEntry(path=path, kind=EntryKind.DIRECTORY)
    return DirectoryEntry(path=path, kind=EntryKind.OTHER)


def scan_directory(path: Path, delete_markers: bool = False) -> LeafSnapshot:
    """List the direct children of *path*.

    With *delete_markers* set, ``.DS_Store`` files are removed on the way and
    left out of the snapshot. A marker that cannot be removed is kept.

    Raises:
        OSError: if the directory cannot be listed.
    """
    snapshot = LeafSnapshot(path=path)
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for item in entries:
        entry = _entry_for(item)
        if entry.kind is EntryKind.MARKER and delete_markers:
            try:
                entry.path.unlink()
                log.debug("Removed marker: %s", entry.path)
                continue
            except OSError as e:
                log.warning("Cannot remove marker %s: %s", entry.path, e)
        snapshot.add(entry)
    return snapshot


class TreeWalker:
    """Walks a directory tree and collects leaf classifications.

    The walk uses an explicit stack, so tree depth is not limited by the
    interpreter's recursion limit. Subdirectories are visited in name order.
    """

    def __init__(self, options: Options, probe: Probe = pillow_probe) -> None:
        self.options = options
        self.probe = probe

    def walk(self, root: Path) -> ClassificationResult:
        found = ClassificationResult()
        stack: list[Path] = [root]

        while stack:
            path = stack.pop()
            if self.options.verbose:
                log.info("%s", path)
            try:
                snapshot = scan_directory(path, delete_markers=self.options.delete)
            except OSError as e:
                log.error("Cannot scan %s: %s", path, e)
                continue

            stack.extend(reversed(snapshot.directories))

            if snapshot.is_eligible:
                found.merge(self._classify_snapshot(snapshot))

        return found

    def _classify_snapshot(self, snapshot: LeafSnapshot) -> ClassificationResult:
        """Build the result contributed by one eligible leaf."""
        opts = self.options
        local = ClassificationResult()
        category = classify_leaf(
            snapshot.extensions,
            len(snapshot.directories),
            len(snapshot.files),
            opts.image_extensions,
            opts.video_extensions,
            detect_orphans=opts.orphans,
        )

        if category is Category.EMPTY:
            local.add(category, snapshot.path)
            return local
        if category is Category.ORPHAN:
            local.add(category, snapshot.files[0].path)
            return local

        if opts.sizes:
            size = average_area(snapshot.files, opts.image_extensions, self.probe)
            if size is not None:
                local.sizes.append(SizeEntry(path=snapshot.path, size=size))
        if opts.categorize:
            local.add(category, snapshot.path)
        return local


def walk(path: Path, options: Options, probe: Probe = pillow_probe) -> ClassificationResult:
    """Classify every eligible leaf under *path*."""
    return TreeWalker(options, probe).walk(path)
