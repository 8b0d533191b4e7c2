"""Value objects for commit-graph layout."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CommitEntry:
    """One history position as supplied by the history provider.

    Only ``hash`` and ``parent_hashes`` drive the layout; the remaining
    fields are carried through for the renderer.
    """

    hash: str
    parent_hashes: tuple[str, ...] = ()
    author_name: str = ""
    date: str = ""
    message: str = ""
    refs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_root(self) -> bool:
        return not self.parent_hashes

    @property
    def is_merge(self) -> bool:
        return len(self.parent_hashes) > 1


@dataclass(frozen=True, slots=True)
class LaneAssignment:
    """Visual column of a commit."""

    lane: int
    max_lane: int  # Highest lane used by any commit up to and including this one


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """A drawable child -> parent connection."""

    child_hash: str
    parent_hash: str
    child_row: int
    parent_row: int
    child_lane: int
    parent_lane: int
    color_lane: int  # Lane whose colour the edge is drawn in

    @property
    def is_straight(self) -> bool:
        return self.child_lane == self.parent_lane
