"""Shared utility functions."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from tidytree.models.action_result import ActionResult

log = logging.getLogger(__name__)


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def remove_empty_dirs(paths: Iterable[Path]) -> ActionResult:
    """Remove each directory in *paths* with ``rmdir``.

    Only empty directories are removed; a directory that gained content
    since it was scanned fails and is reported. Failures do not stop the
    batch.
    """
    result = ActionResult(action="delete")
    for path in paths:
        try:
            path.rmdir()
        except OSError as e:
            log.warning("Cannot remove %s: %s", path, e)
            result.errors.append(f"{path}: {e}")
            continue
        log.debug("Removed directory: %s", path)
        result.done.append(path)
    return result


def normalize_extensions(values: Iterable[str]) -> frozenset[str]:
    """Lowercase suffixes and make sure each has a leading dot."""
    normalized = set()
    for value in values:
        value = value.strip().lower()
        if not value:
            continue
        normalized.add(value if value.startswith(".") else f".{value}")
    return frozenset(normalized)


def format_megapixels(area: int) -> str:
    """Format a pixel area in millions with one decimal, e.g. ``'2.1'``."""
    return f"{area / 1_000_000:.1f}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
