"""Commit graph layout."""

from gitview.graph.edges import graph_edges
from gitview.graph.lanes import assign_lanes, max_lane
from gitview.graph.models import CommitEntry, GraphEdge, LaneAssignment

__all__ = [
    "assign_lanes",
    "max_lane",
    "graph_edges",
    "CommitEntry",
    "GraphEdge",
    "LaneAssignment",
]
