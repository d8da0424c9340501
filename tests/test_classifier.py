"""Tests for leaf classification."""

from __future__ import annotations

import pytest

from tidytree.core.classifier import classify_leaf
from tidytree.models.classification import Category
from tidytree.models.options import IMAGE_EXTENSIONS, VIDEO_EXTENSIONS


def _classify(extensions: list[str], subdirs: int = 0, orphans: bool = True) -> Category:
    return classify_leaf(
        extensions,
        subdirs,
        len(extensions),
        IMAGE_EXTENSIONS,
        VIDEO_EXTENSIONS,
        detect_orphans=orphans,
    )


class TestClassifyLeaf:
    def test_no_files_is_empty(self):
        assert _classify([]) is Category.EMPTY

    def test_empty_wins_over_orphan_detection_off(self):
        assert _classify([], orphans=False) is Category.EMPTY

    def test_single_file_is_orphan(self):
        assert _classify([".jpg"]) is Category.ORPHAN

    def test_single_file_categorized_when_orphans_disabled(self):
        assert _classify([".jpg"], orphans=False) is Category.IMAGES

    @pytest.mark.parametrize("extensions", [[".jpg", ".png"], [".gif", ".webp", ".svg"], [".tiff", ".tiff"]])
    def test_only_images(self, extensions):
        assert _classify(extensions) is Category.IMAGES

    def test_only_videos(self):
        assert _classify([".mp4", ".mov", ".avi"]) is Category.VIDEOS

    def test_images_and_videos_are_mixed(self):
        assert _classify([".jpg", ".mp4"]) is Category.MIXED

    def test_media_with_other_files_is_mixed(self):
        assert _classify([".jpg", ".txt"]) is Category.MIXED
        assert _classify([".mpeg", ".nfo"]) is Category.MIXED

    def test_no_media_is_other(self):
        assert _classify([".txt", ".pdf", ""]) is Category.OTHER

    def test_matching_is_case_insensitive(self):
        assert _classify([".JPG", ".Png"]) is Category.IMAGES
        assert _classify([".MP4", ".WMV"]) is Category.VIDEOS

    def test_subdirectories_block_classification(self):
        assert _classify([".jpg", ".png"], subdirs=1) is Category.UNCLASSIFIED
        assert _classify([], subdirs=2) is Category.UNCLASSIFIED

    def test_custom_extension_sets(self):
        result = classify_leaf([".raw", ".raw"], 0, 2, {".raw"}, {".mkv"})
        assert result is Category.IMAGES
