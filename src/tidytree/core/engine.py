"""Per-root orchestration of scanning, deleting and reorganizing."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from tidytree.core.probe import Probe, pillow_probe
from tidytree.core.reorganizer import CATEGORY_ROOTS, reorganize
from tidytree.core.walker import TreeWalker
from tidytree.models.action_result import ActionResult
from tidytree.models.classification import ClassificationResult
from tidytree.models.options import Options
from tidytree.utils import remove_empty_dirs

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RootReport:
    """Everything that happened to one requested root."""

    root: Path
    result: ClassificationResult = field(default_factory=ClassificationResult)
    deleted: ActionResult | None = None
    moves: list[ActionResult] = field(default_factory=list)
    elapsed: float = 0.0
    error: str = ""

    @property
    def error_count(self) -> int:
        count = len(self.deleted.errors) if self.deleted else 0
        return count + sum(len(m.errors) for m in self.moves)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "root": str(self.root),
            "elapsed": round(self.elapsed, 3),
            "error": self.error,
            "result": self.result.to_dict(),
            "deleted": None,
            "moves": [],
        }
        if self.deleted is not None:
            data["deleted"] = {
                "paths": [str(p) for p in self.deleted.done],
                "errors": self.deleted.errors,
            }
        for move in self.moves:
            data["moves"].append(
                {
                    "action": move.action,
                    "moved": [{"from": str(s), "to": str(d)} for s, d in zip(move.done, move.targets)],
                    "skipped": [str(p) for p in move.skipped],
                    "errors": move.errors,
                }
            )
        return data


ReportCallback = Callable[[RootReport], None]


def resolve_root(raw: str | Path) -> Path:
    """Return the absolute, symlink-free form of *raw*.

    Raises:
        OSError: if the path cannot be resolved.
        RuntimeError: on a symlink loop or an unknown ``~user``.
    """
    return Path(raw).expanduser().resolve()


class TidyEngine:
    """Runs the walker over each root and applies the enabled actions."""

    def __init__(self, options: Options, probe: Probe = pillow_probe) -> None:
        self.options = options
        self.walker = TreeWalker(options, probe)

    def run(
        self,
        roots: Iterable[str | Path],
        on_report: ReportCallback | None = None,
    ) -> list[RootReport]:
        """Process every distinct root in order.

        Args:
            roots: Directories to process. Duplicates are dropped after
                resolving them to absolute paths. A root that cannot be
                resolved gets a report with ``error`` set.
            on_report: Optional callback fired after each root finishes.

        Returns:
            One report per distinct root.
        """
        reports: list[RootReport] = []
        seen: set[Path] = set()
        for raw in roots:
            try:
                root = resolve_root(raw)
            except (OSError, RuntimeError) as e:
                log.error("Cannot resolve %s: %s", raw, e)
                report = RootReport(root=Path(raw), error=f"cannot resolve: {e}")
            else:
                if root in seen:
                    continue
                seen.add(root)
                report = self.process_root(root)
            reports.append(report)
            if on_report:
                on_report(report)
        return reports

    def process_root(self, root: Path) -> RootReport:
        """Scan one root, then delete and reorganize as configured."""
        report = RootReport(root=root)
        if not root.is_dir():
            report.error = f"not a directory: {root}"
            log.error("Cannot process %s: not an accessible directory", root)
            return report

        start = time.monotonic()
        report.result = self.walker.walk(root)

        if self.options.delete:
            report.deleted = remove_empty_dirs(report.result.empties)

        if self.options.categorize:
            for name, category_root in CATEGORY_ROOTS.items():
                paths: list[Path] = getattr(report.result, name)
                report.moves.append(reorganize(paths, root, category_root))

        report.elapsed = time.monotonic() - start
        log.info("Finished %s in %.2fs", root, report.elapsed)
        return report
