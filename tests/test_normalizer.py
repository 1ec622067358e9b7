"""Tests for skill_sorter.normalizer.normalize_name."""
from __future__ import annotations

import pytest

from skill_sorter.normalizer import (
    _collapse_colon_repeat,
    _collapse_doubled,
    _strip_index_prefix,
    normalize_name,
)


class TestCollapseDoubled:
    @pytest.mark.parametrize("half", ["Go", "REST APIs", "C++", "Machine Learning", "x"])
    def test_doubled_label_collapses(self, half: str) -> None:
        """S + S -> S for any non-empty S."""
        assert normalize_name(half + half) == half

    def test_odd_length_untouched(self) -> None:
        """Odd lengths can't be an exact doubling."""
        assert _collapse_doubled("GoGox") == "GoGox"

    def test_near_miss_untouched(self) -> None:
        """Halves must match character for character."""
        assert _collapse_doubled("GoGO") == "GoGO"

    def test_repeated_words_with_separator_untouched(self) -> None:
        """A real name with a repeated word keeps both copies."""
        assert normalize_name("Go Go") == "Go Go"

    def test_empty(self) -> None:
        assert _collapse_doubled("") == ""


class TestCollapseColonRepeat:
    def test_tight(self) -> None:
        assert normalize_name("Docker:Docker") == "Docker"

    def test_spaced(self) -> None:
        assert normalize_name("Docker : Docker") == "Docker"

    def test_first_segment_trimmed(self) -> None:
        assert _collapse_colon_repeat("  Docker : Docker : extra") == "Docker"

    def test_different_segments_untouched(self) -> None:
        assert _collapse_colon_repeat("Docker: Kubernetes") == "Docker: Kubernetes"


class TestStripIndexPrefix:
    @pytest.mark.parametrize("raw", ["12. Name", "3:Name", "7   Name", "4: Name", "1.\tName"])
    def test_prefix_removed(self, raw: str) -> None:
        assert normalize_name(raw) == "Name"

    def test_digit_inside_word_kept(self) -> None:
        """Digits glued to letters are part of the name, not an index."""
        assert _strip_index_prefix("3D Modeling") == "3D Modeling"

    def test_only_leading_run(self) -> None:
        assert _strip_index_prefix("2. Web 2. 0") == "Web 2. 0"


class TestNormalizeName:
    def test_whitespace_trimmed(self) -> None:
        assert normalize_name("  Python \n") == "Python"

    def test_empty(self) -> None:
        assert normalize_name("") == ""

    def test_fallback_when_everything_stripped(self) -> None:
        """An all-index label falls back to the trimmed original."""
        assert normalize_name("42. ") == "42."

    def test_doubled_with_index(self) -> None:
        """Doubling is removed before the index prefix."""
        assert normalize_name("4. Go4. Go") == "Go"

    @pytest.mark.parametrize("raw, expected", [
        ("GoGoGoGo", "Go"),
        ("1. 2. Go", "Go"),
        ("0 0 ", "0"),
        ("Docker:Docker:Docker", "Docker"),
    ])
    def test_nested_artifacts_removed_in_one_call(self, raw: str, expected: str) -> None:
        """Steps repeat until nothing changes."""
        assert normalize_name(raw) == expected

    @pytest.mark.parametrize("raw", [
        "REST APIsREST APIs",
        "Docker : Docker",
        "12. Project Management",
        "  Kubernetes  ",
        "Node.js",
        "Go Go",
        " 42. ",
        "Research and Development (R&D)",
        "GoGoGoGo",
        "1. 2. Go",
        "0 0 ",
        "abababab",
        "3:3:3",
    ])
    def test_idempotent(self, raw: str) -> None:
        once = normalize_name(raw)
        assert normalize_name(once) == once
