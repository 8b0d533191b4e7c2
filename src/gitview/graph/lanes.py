"""Lane assignment for the commit graph.

Walks commits newest-first keeping a list of lane slots. Each slot holds
the hash expected to occupy that lane next, or None when free:

1. A commit takes the lane already reserved for its hash, else the first
   free slot, else a new slot at the end.
2. The slot is released.
3. Parents not yet reserved anywhere get a slot. The first parent inherits
   the commit's lane so the primary line stays straight; further parents go
   to the free slot nearest the commit's lane (lowest index on ties), or a
   new slot.
4. Trailing free slots are dropped so the slot count tracks live branches.
"""

from __future__ import annotations

from collections.abc import Sequence

from gitview.core.errors import InputError
from gitview.core.logging import get_module_logger
from gitview.graph.models import CommitEntry, LaneAssignment

log = get_module_logger(__name__)


class _ActiveLanes:
    """Indexable lane slots with O(1) reservation lookup."""

    __slots__ = ("_slots", "_index")

    def __init__(self) -> None:
        self._slots: list[str | None] = []
        self._index: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def lane_of(self, commit_hash: str) -> int | None:
        return self._index.get(commit_hash)

    def is_reserved(self, commit_hash: str) -> bool:
        return commit_hash in self._index

    def first_free(self) -> int | None:
        for i, occupant in enumerate(self._slots):
            if occupant is None:
                return i
        return None

    def nearest_free(self, lane: int) -> int | None:
        best: int | None = None
        best_dist = 0
        for i, occupant in enumerate(self._slots):
            if occupant is not None:
                continue
            dist = abs(i - lane)
            if best is None or dist < best_dist:
                best, best_dist = i, dist
        return best

    def append(self) -> int:
        self._slots.append(None)
        return len(self._slots) - 1

    def reserve(self, lane: int, commit_hash: str) -> None:
        self._slots[lane] = commit_hash
        self._index[commit_hash] = lane

    def release(self, lane: int) -> None:
        occupant = self._slots[lane]
        if occupant is not None:
            del self._index[occupant]
            self._slots[lane] = None

    def compact(self) -> None:
        while self._slots and self._slots[-1] is None:
            self._slots.pop()


def assign_lanes(entries: Sequence[CommitEntry]) -> dict[str, LaneAssignment]:
    """Assign a lane to every commit in a newest-first history.

    Returns a dict keyed by commit hash in processing order. A hash that
    appears twice is overwritten by its later occurrence.

    Raises:
        InputError: entries is not a sequence.
    """
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise InputError.not_a_sequence("assign_lanes", "entries", entries)

    assignments: dict[str, LaneAssignment] = {}
    active = _ActiveLanes()
    highest = 0

    for entry in entries:
        lane = active.lane_of(entry.hash)
        if lane is None:
            lane = active.first_free()
            if lane is None:
                lane = active.append()
        active.release(lane)

        for i, parent in enumerate(entry.parent_hashes):
            if active.is_reserved(parent):
                continue
            if i == 0:
                active.reserve(lane, parent)
                continue
            slot = active.nearest_free(lane)
            if slot is None:
                slot = active.append()
            active.reserve(slot, parent)

        active.compact()

        highest = max(highest, lane)
        assignments[entry.hash] = LaneAssignment(lane=lane, max_lane=highest)

    log.debug("lanes_assigned", commits=len(entries), max_lane=highest)
    return assignments


def max_lane(assignments: dict[str, LaneAssignment]) -> int:
    """Highest lane in a set of assignments, 0 when empty."""
    return max((a.lane for a in assignments.values()), default=0)
