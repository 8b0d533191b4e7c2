"""Word-level diff for intra-line highlighting.

Both strings are split into word and whitespace tokens, compared with a
longest-common-subsequence table, and the edit script is folded into
segments. Cost is O(m*n) in tokens for both time and memory; callers
comparing long lines should check gitview.diff.limits first.
"""

from __future__ import annotations

import re

from gitview.core.errors import require_str
from gitview.core.logging import get_module_logger
from gitview.diff.models import SegmentKind, WordSegment

log = get_module_logger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"(\s+)")


def tokenize(text: str) -> list[str]:
    """Split into alternating word and whitespace runs; joining restores text."""
    return [tok for tok in _TOKEN_SPLIT_RE.split(text) if tok]


def _lcs_table(old: list[str], new: list[str]) -> list[list[int]]:
    m, n = len(old), len(new)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if old[i - 1] == new[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def _merge(ops: list[tuple[SegmentKind, str]]) -> list[WordSegment]:
    segments: list[WordSegment] = []
    for kind, value in ops:
        if segments and segments[-1].kind == kind:
            segments[-1] = WordSegment(kind, segments[-1].value + value)
        else:
            segments.append(WordSegment(kind, value))
    return segments


def compute_word_diff(old_str: str, new_str: str) -> list[WordSegment]:
    """Diff two strings word by word.

    Identical inputs give a single ``equal`` segment. Otherwise adjacent
    segments never share a kind, equal+del segments rebuild ``old_str`` and
    equal+add segments rebuild ``new_str``. Where the backtrack can go
    either way it consumes from ``new_str`` first, so within a replaced run
    the deletion is listed before the addition.
    """
    require_str("compute_word_diff", "old_str", old_str)
    require_str("compute_word_diff", "new_str", new_str)
    if old_str == new_str:
        return [WordSegment("equal", old_str)]

    old, new = tokenize(old_str), tokenize(new_str)
    dp = _lcs_table(old, new)

    ops: list[tuple[SegmentKind, str]] = []
    i, j = len(old), len(new)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
            ops.append(("equal", old[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            ops.append(("add", new[j - 1]))
            j -= 1
        else:
            ops.append(("del", old[i - 1]))
            i -= 1
    ops.reverse()

    segments = _merge(ops)
    log.debug("word_diff_computed", old_tokens=len(old), new_tokens=len(new), segments=len(segments))
    return segments
