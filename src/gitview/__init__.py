"""gitview - commit-graph layout and structured diffs for history viewers."""

from gitview.diff import (
    compute_word_diff,
    pair_changes_for_split,
    parse_diff_line,
    parse_unified_diff,
)
from gitview.graph import assign_lanes, graph_edges
from gitview.present import get_heat_color, get_status_label

__all__ = [
    "assign_lanes",
    "graph_edges",
    "parse_unified_diff",
    "parse_diff_line",
    "compute_word_diff",
    "pair_changes_for_split",
    "get_heat_color",
    "get_status_label",
]
