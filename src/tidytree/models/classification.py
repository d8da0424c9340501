"""Classification results aggregated over a directory tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class Category(Enum):
    """Verdict for a single leaf directory."""

    EMPTY = "empty"
    ORPHAN = "orphan"
    IMAGES = "images"
    VIDEOS = "videos"
    MIXED = "mixed"
    OTHER = "other"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True, slots=True)
class SizeEntry:
    """Average pixel area of the images in one leaf."""

    path: Path
    size: int


@dataclass(slots=True)
class ClassificationResult:
    """Category listings for one requested root.

    Results are combined with :meth:`merge`, which appends each list in
    place. An empty result is the identity, and any grouping of merges over
    the same sequence of results yields the same lists.
    """

    empties: list[Path] = field(default_factory=list)
    orphans: list[Path] = field(default_factory=list)
    images: list[Path] = field(default_factory=list)
    videos: list[Path] = field(default_factory=list)
    mixed: list[Path] = field(default_factory=list)
    others: list[Path] = field(default_factory=list)
    sizes: list[SizeEntry] = field(default_factory=list)

    def merge(self, other: ClassificationResult) -> ClassificationResult:
        """Append every list of ``other`` to this result and return ``self``."""
        self.empties.extend(other.empties)
        self.orphans.extend(other.orphans)
        self.images.extend(other.images)
        self.videos.extend(other.videos)
        self.mixed.extend(other.mixed)
        self.others.extend(other.others)
        self.sizes.extend(other.sizes)
        return self

    def add(self, category: Category, path: Path) -> None:
        """Append ``path`` to the list for ``category``."""
        match category:
            case Category.EMPTY:
                self.empties.append(path)
            case Category.ORPHAN:
                self.orphans.append(path)
            case Category.IMAGES:
                self.images.append(path)
            case Category.VIDEOS:
                self.videos.append(path)
            case Category.MIXED:
                self.mixed.append(path)
            case Category.OTHER:
                self.others.append(path)

    def sorted_sizes(self) -> list[SizeEntry]:
        return sorted(self.sizes, key=lambda s: s.size)

    def to_dict(self) -> dict[str, Any]:
        return {
            "empties": [str(p) for p in self.empties],
            "orphans": [str(p) for p in self.orphans],
            "images": [str(p) for p in self.images],
            "videos": [str(p) for p in self.videos],
            "mixed": [str(p) for p in self.mixed],
            "others": [str(p) for p in self.others],
            "sizes": [{"path": str(s.path), "size": s.size} for s in self.sorted_sizes()],
        }
