"""Move categorized leaf directories under category roots."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from tidytree.models.action_result import ActionResult

log = logging.getLogger(__name__)

# Result list name -> directory created under the requested root.
CATEGORY_ROOTS: dict[str, str] = {
    "images": "_images",
    "videos": "_videos",
    "mixed": "_mixed",
}


def destination_for(path: Path, tree_root: Path, category_root_name: str) -> Path:
    """Map *path* to the same relative location under the category root.

    Raises:
        ValueError: if *path* is not inside *tree_root*.
    """
    return tree_root / category_root_name / path.relative_to(tree_root)


def reorganize(
    paths: Iterable[Path],
    tree_root: Path,
    category_root_name: str,
) -> ActionResult:
    """Move each directory in *paths* under ``tree_root/category_root_name``.

    Paths already inside the category root are skipped, so running twice
    over the same tree moves nothing the second time. Each directory is
    moved with a single rename; a failure is recorded and the remaining
    paths are still attempted.
    """
    category_root = tree_root / category_root_name
    result = ActionResult(action=f"move:{category_root_name}")

    for path in paths:
        if path.is_relative_to(category_root):
            log.debug("Already organized: %s", path)
            result.skipped.append(path)
            continue

        try:
            destination = destination_for(path, tree_root, category_root_name)
        except ValueError:
            log.warning("Not under %s, skipping: %s", tree_root, path)
            result.errors.append(f"{path}: not under {tree_root}")
            continue

        log.info("%s -> %s", path, destination)
        try:
            if destination.exists():
                raise FileExistsError(f"destination exists: {destination}")
            destination.parent.mkdir(parents=True, exist_ok=True)
            os.rename(path, destination)
        except OSError as e:
            log.warning("Cannot move %s: %s", path, e)
            result.errors.append(f"{path}: {e}")
            continue
        result.done.append(path)
        result.targets.append(destination)

    return result
