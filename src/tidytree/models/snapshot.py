"""Direct contents of a single directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

MARKER_NAME = ".DS_Store"


class EntryKind(Enum):
    HIDDEN = "hidden"
    MARKER = "marker"
    SYMLINK = "symlink"
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One child of a scanned directory.

    ``extension`` is the lowercased suffix for regular files and an empty
    string for everything else.
    """

    path: Path
    kind: EntryKind
    extension: str = ""


@dataclass(slots=True)
class LeafSnapshot:
    """Non-recursive listing of a directory, partitioned by entry kind.

    ``markers`` only holds marker files that are still on disk, i.e. the
    ones that were not (or could not be) deleted during the scan.
    """

    path: Path
    hidden: list[Path] = field(default_factory=list)
    markers: list[Path] = field(default_factory=list)
    links: list[Path] = field(default_factory=list)
    files: list[DirectoryEntry] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)

    def add(self, entry: DirectoryEntry) -> None:
        match entry.kind:
            case EntryKind.HIDDEN:
                self.hidden.append(entry.path)
            case EntryKind.MARKER:
                self.markers.append(entry.path)
            case EntryKind.SYMLINK:
                self.links.append(entry.path)
            case EntryKind.FILE:
                self.files.append(entry)
            case EntryKind.DIRECTORY:
                self.directories.append(entry.path)

    @property
    def extensions(self) -> list[str]:
        return [f.extension for f in self.files]

    @property
    def is_eligible(self) -> bool:
        """True when the directory is a leaf with no foreign entries."""
        return not (self.hidden or self.markers or self.links or self.directories)
