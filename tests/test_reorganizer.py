"""Tests for moving categorized leaves under category roots."""

from __future__ import annotations

import os

import pytest
from conftest import touch

from tidytree.core.reorganizer import CATEGORY_ROOTS, destination_for, reorganize


class TestDestinationFor:
    def test_keeps_relative_layout(self, root):
        dest = destination_for(root / "trip" / "day1", root, "_images")
        assert dest == root / "_images" / "trip" / "day1"

    def test_outside_root_raises(self, root, tmp_path):
        with pytest.raises(ValueError):
            destination_for(tmp_path / "elsewhere", root, "_images")


class TestReorganize:
    def test_moves_directory_with_contents(self, root):
        touch(root / "trip" / "day1" / "a.jpg", b"AAA")
        touch(root / "trip" / "day1" / "b.jpg")

        result = reorganize([root / "trip" / "day1"], root, "_images")

        moved = root / "_images" / "trip" / "day1"
        assert (moved / "a.jpg").read_bytes() == b"AAA"
        assert (moved / "b.jpg").exists()
        assert not (root / "trip" / "day1").exists()
        assert (root / "trip").is_dir()
        assert result.done == [root / "trip" / "day1"]
        assert result.targets == [moved]
        assert result.errors == []
        assert result.action == "move:_images"

    def test_already_organized_is_skipped(self, root, monkeypatch):
        touch(root / "_images" / "a" / "x.jpg")
        calls = []
        monkeypatch.setattr("tidytree.core.reorganizer.os.rename", lambda *a: calls.append(a))

        result = reorganize([root / "_images" / "a"], root, "_images")

        assert calls == []
        assert result.skipped == [root / "_images" / "a"]
        assert result.done == []

    def test_similar_prefix_is_not_skipped(self, root):
        touch(root / "_images2" / "x.jpg")
        result = reorganize([root / "_images2"], root, "_images")
        assert result.done == [root / "_images2"]
        assert (root / "_images" / "_images2" / "x.jpg").exists()

    def test_collision_is_reported_and_batch_continues(self, root):
        touch(root / "a" / "x.jpg")
        touch(root / "b" / "y.jpg")
        (root / "_images" / "a").mkdir(parents=True)

        result = reorganize([root / "a", root / "b"], root, "_images")

        assert len(result.errors) == 1
        assert str(root / "a") in result.errors[0]
        assert (root / "a" / "x.jpg").exists()
        assert result.done == [root / "b"]
        assert (root / "_images" / "b" / "y.jpg").exists()

    def test_rename_failure_is_reported(self, root, monkeypatch, caplog):
        touch(root / "a" / "x.mp4")

        def _fail(src, dst):
            raise OSError(18, "Invalid cross-device link")

        monkeypatch.setattr("tidytree.core.reorganizer.os.rename", _fail)
        result = reorganize([root / "a"], root, "_videos")

        assert result.done == []
        assert "cross-device" in result.errors[0]
        assert "Cannot move" in caplog.text

    def test_path_outside_root_is_reported(self, root, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        result = reorganize([outside], root, "_mixed")
        assert result.done == []
        assert result.errors
        assert outside.is_dir()

    def test_second_run_moves_nothing(self, root):
        touch(root / "a" / "x.jpg")
        reorganize([root / "a"], root, "_images")
        again = reorganize([root / "_images" / "a"], root, "_images")
        assert again.done == []
        assert again.skipped == [root / "_images" / "a"]
        assert sorted(os.listdir(root)) == ["_images"]

    def test_category_roots(self):
        assert CATEGORY_ROOTS == {"images": "_images", "videos": "_videos", "mixed": "_mixed"}
