"""Average image size of a leaf directory."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable

from tidytree.core.probe import Probe, ProbeError
from tidytree.models.snapshot import DirectoryEntry

log = logging.getLogger(__name__)


def average_area(
    files: Iterable[DirectoryEntry],
    image_set: Collection[str],
    probe: Probe,
) -> int | None:
    """Return the floored mean pixel area of the images among *files*.

    Files that cannot be probed are logged and left out. Returns None when
    no image was probed successfully.
    """
    areas: list[int] = []
    for entry in files:
        if entry.extension not in image_set:
            continue
        try:
            width, height = probe(entry.path)
        except ProbeError as exc:
            log.warning("%s %s", entry.path, exc.reason)
            continue
        except OSError as exc:
            log.warning("%s %s", entry.path, exc)
            continue
        areas.append(width * height)

    if not areas:
        return None
    return sum(areas) // len(areas)
