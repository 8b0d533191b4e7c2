"""Unified diff parsing, word diffs and split-view pairing."""

from gitview.diff.limits import exceeds_diff_limit, exceeds_word_diff_limit
from gitview.diff.models import (
    Change,
    DiffStats,
    FileDiff,
    FileStats,
    Hunk,
    ParsedDiff,
    ParsedDiffLine,
    SplitRow,
    WordSegment,
)
from gitview.diff.parser import HunkRange, parse_diff_line, parse_hunk_header, parse_unified_diff
from gitview.diff.split import pair_changes_for_split
from gitview.diff.words import compute_word_diff

__all__ = [
    # Parsing
    "parse_unified_diff",
    "parse_diff_line",
    "parse_hunk_header",
    "HunkRange",
    # Word diff
    "compute_word_diff",
    # Split view
    "pair_changes_for_split",
    # Limits
    "exceeds_diff_limit",
    "exceeds_word_diff_limit",
    # Models
    "Change",
    "DiffStats",
    "FileDiff",
    "FileStats",
    "Hunk",
    "ParsedDiff",
    "ParsedDiffLine",
    "SplitRow",
    "WordSegment",
]
