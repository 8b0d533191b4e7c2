"""Labels and colours for ``git status --porcelain`` code pairs."""

from __future__ import annotations

from gitview.present import palette


def _is_untracked(index_status: str, worktree_status: str) -> bool:
    return index_status == "?" and worktree_status == "?"


def _is_deleted(index_status: str, worktree_status: str) -> bool:
    return index_status == "D" or worktree_status == "D"


def get_status_label(index_status: str, worktree_status: str) -> str:
    """Human label for an index/worktree status pair.

    Unknown pairs (e.g. ``UU`` merge conflicts) come back as the raw code.
    """
    if _is_untracked(index_status, worktree_status):
        return "Untracked"
    if index_status == "A":
        return "Added"
    if _is_deleted(index_status, worktree_status):
        return "Deleted"
    if index_status == "R":
        return "Renamed"
    if index_status == "M" or worktree_status == "M":
        return "Modified"
    if index_status == "C":
        return "Copied"
    return f"{index_status}{worktree_status}".strip()


def get_status_color(index_status: str, worktree_status: str) -> str:
    if _is_untracked(index_status, worktree_status):
        return palette.STATUS_COLOR_UNTRACKED
    if index_status == "A":
        return palette.STATUS_COLOR_ADDED
    if _is_deleted(index_status, worktree_status):
        return palette.STATUS_COLOR_DELETED
    return palette.STATUS_COLOR_CHANGED
