"""Tests for file status labels and colours (present/status.py)."""

from __future__ import annotations

import pytest

from gitview.present.status import get_status_color, get_status_label


class TestGetStatusLabel:
    """Status pair -> label."""

    @pytest.mark.parametrize(
        ("index", "worktree", "expected"),
        [
            ("?", "?", "Untracked"),
            ("A", " ", "Added"),
            ("A", "M", "Added"),
            ("D", " ", "Deleted"),
            (" ", "D", "Deleted"),
            ("R", " ", "Renamed"),
            ("M", " ", "Modified"),
            (" ", "M", "Modified"),
            ("C", " ", "Copied"),
            ("U", "U", "UU"),
            ("T", " ", "T"),
        ],
    )
    def test_labels(self, index: str, worktree: str, expected: str) -> None:
        assert get_status_label(index, worktree) == expected


class TestGetStatusColor:
    """Status pair -> colour class."""

    @pytest.mark.parametrize(
        ("index", "worktree", "expected"),
        [
            ("?", "?", "text-muted-foreground"),
            ("A", " ", "text-green-600"),
            ("D", " ", "text-red-600"),
            (" ", "D", "text-red-600"),
            ("M", " ", "text-yellow-600"),
            ("R", " ", "text-yellow-600"),
        ],
    )
    def test_colors(self, index: str, worktree: str, expected: str) -> None:
        assert get_status_color(index, worktree) == expected
