"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from tidytree.core.probe import ProbeError


def write_image(path: Path, width: int, height: int) -> Path:
    """Write a real image file whose format follows the suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (width, height), color=(200, 30, 30)).save(path)
    return path


def touch(path: Path, data: bytes = b"x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


class FakeProbe:
    """Dimension probe answering from a path -> (width, height) table."""

    def __init__(self, sizes: dict[Path, tuple[int, int]] | None = None) -> None:
        self.sizes = dict(sizes or {})
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> tuple[int, int]:
        self.calls.append(path)
        if path not in self.sizes:
            raise ProbeError(path, "unsupported image")
        return self.sizes[path]


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp directory so user settings never leak in."""
    config = tmp_path / "config"
    config.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    return config


@pytest.fixture
def root(tmp_path):
    """An empty directory to build trees under."""
    r = tmp_path / "r"
    r.mkdir()
    return r


@pytest.fixture
def example_tree(root):
    """The reference layout: an empty dir, an orphan and an image leaf.

    ``b/1.jpg`` is not a decodable image.
    """
    (root / "a").mkdir()
    touch(root / "b" / "1.jpg", b"not really a jpeg")
    write_image(root / "c" / "x.png", 100, 100)
    write_image(root / "c" / "y.gif", 200, 100)
    return root
