"""JSON settings file read at startup."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tidytree.models.options import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS
from tidytree.utils import normalize_extensions, xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "tidytree"
_SETTINGS_FILE = "settings.json"


class Settings:
    """Read-only settings backed by a JSON file the user edits by hand.

    Uses dot-notation keys for nested access:
        settings.get("extensions.image")  # reads data["extensions"]["image"]
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def image_extensions(self) -> frozenset[str]:
        """Image suffixes, falling back to the built-in set."""
        return self._extensions("extensions.image", IMAGE_EXTENSIONS)

    def video_extensions(self) -> frozenset[str]:
        """Video suffixes, falling back to the built-in set."""
        return self._extensions("extensions.video", VIDEO_EXTENSIONS)

    def _extensions(self, key: str, default: frozenset[str]) -> frozenset[str]:
        value = self.get(key)
        if value is None:
            return default
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            log.warning("Ignoring invalid '%s' in %s: expected a list of strings", key, self._path)
            return default
        return normalize_extensions(value)

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Could not load settings from %s: top level is not an object", self._path)
            return
        self._data = data

