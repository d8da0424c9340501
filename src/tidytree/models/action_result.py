"""Outcome of a batch of filesystem mutations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ActionResult:
    """Result of deleting or moving a batch of paths.

    ``done`` lists the paths acted on. For moves, ``targets`` holds the
    matching destinations in the same order. ``skipped`` lists paths left
    alone on purpose (already organized) and ``errors`` holds one
    ``"<path>: <reason>"`` string per failed path.
    """

    action: str
    done: list[Path] = field(default_factory=list)
    targets: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
