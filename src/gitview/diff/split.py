"""Pair hunk changes into rows for side-by-side display."""

from __future__ import annotations

from collections.abc import Sequence

from gitview.core.errors import InputError
from gitview.diff.models import Change, SplitRow


def pair_changes_for_split(changes: Sequence[Change]) -> list[SplitRow]:
    """Lay out changes as left (old) / right (new) rows.

    Context shows on both sides. A run of deletions and the run of additions
    directly after it are zipped row by row, padding the shorter run with
    empty cells. Additions with no deletion run before them stand alone on
    the right.
    """
    if isinstance(changes, (str, bytes)) or not isinstance(changes, Sequence):
        raise InputError.not_a_sequence("pair_changes_for_split", "changes", changes)

    rows: list[SplitRow] = []
    i, n = 0, len(changes)

    while i < n:
        change = changes[i]
        if change.kind == "ctx":
            rows.append(SplitRow(left=change, right=change))
            i += 1
        elif change.kind == "del":
            start = i
            while i < n and changes[i].kind == "del":
                i += 1
            dels = changes[start:i]
            start = i
            while i < n and changes[i].kind == "add":
                i += 1
            adds = changes[start:i]
            for row in range(max(len(dels), len(adds))):
                rows.append(
                    SplitRow(
                        left=dels[row] if row < len(dels) else None,
                        right=adds[row] if row < len(adds) else None,
                    )
                )
        else:
            rows.append(SplitRow(right=change))
            i += 1

    return rows
