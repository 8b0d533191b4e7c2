"""Child -> parent edges for drawing the commit graph."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from gitview.graph.models import CommitEntry, GraphEdge, LaneAssignment


def graph_edges(
    entries: Sequence[CommitEntry],
    assignments: Mapping[str, LaneAssignment],
) -> tuple[GraphEdge, ...]:
    """Build one edge per commit/parent pair that is present in ``entries``.

    Parents outside the loaded window (e.g. beyond a log limit) have no row
    to connect to and are skipped. Straight edges take the child's lane
    colour; edges that change lane take the parent's, so a merged branch
    keeps its colour up to the merge point.
    """
    rows = {entry.hash: row for row, entry in enumerate(entries)}
    edges: list[GraphEdge] = []

    for row, entry in enumerate(entries):
        child = assignments.get(entry.hash)
        if child is None:
            continue
        for parent_hash in entry.parent_hashes:
            parent_row = rows.get(parent_hash)
            parent = assignments.get(parent_hash)
            if parent_row is None or parent is None:
                continue
            edges.append(
                GraphEdge(
                    child_hash=entry.hash,
                    parent_hash=parent_hash,
                    child_row=row,
                    parent_row=parent_row,
                    child_lane=child.lane,
                    parent_lane=parent.lane,
                    color_lane=child.lane if child.lane == parent.lane else parent.lane,
                )
            )

    return tuple(edges)
