"""Caller-side size checks for the diff engine.

The parser and the word differ never truncate. Rendering layers that need
bounded latency ask these helpers first and fall back to a plain view when
an input is over budget.
"""

from __future__ import annotations

from gitview.config.models import LimitsConfig
from gitview.core.errors import require_str
from gitview.diff.parser import split_diff_lines
from gitview.diff.words import tokenize


def exceeds_diff_limit(raw: str, limits: LimitsConfig | None = None) -> bool:
    """True when ``raw`` has more lines than ``limits.max_diff_lines``.

    Lines are counted the way parse_unified_diff splits them, so a final
    newline does not add a line.
    """
    require_str("exceeds_diff_limit", "raw", raw)
    limits = limits or LimitsConfig()
    return len(split_diff_lines(raw)) > limits.max_diff_lines


def exceeds_word_diff_limit(
    old_str: str, new_str: str, limits: LimitsConfig | None = None
) -> bool:
    """True when the word-diff table for the pair would exceed the cell budget."""
    require_str("exceeds_word_diff_limit", "old_str", old_str)
    require_str("exceeds_word_diff_limit", "new_str", new_str)
    limits = limits or LimitsConfig()
    if old_str == new_str:
        return False
    return len(tokenize(old_str)) * len(tokenize(new_str)) > limits.max_word_diff_cells
