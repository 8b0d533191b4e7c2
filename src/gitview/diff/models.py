"""Serializable data models for parsed diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

LineKind = Literal["add", "del", "hunk", "meta", "ctx"]
ChangeKind = Literal["add", "del", "ctx"]
SegmentKind = Literal["equal", "add", "del"]

DEV_NULL = "/dev/null"


@dataclass(frozen=True, slots=True)
class ParsedDiffLine:
    """Single raw diff line tagged with its kind. Content keeps the marker."""

    kind: LineKind
    content: str


@dataclass(frozen=True, slots=True)
class Change:
    """One line inside a hunk, marker stripped.

    Deletions carry only ``old_line_no``, additions only ``new_line_no``,
    context lines both.
    """

    kind: ChangeKind
    content: str
    old_line_no: int | None = None
    new_line_no: int | None = None


@dataclass(frozen=True, slots=True)
class Hunk:
    """Contiguous changed region of a file."""

    header: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    changes: tuple[Change, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class FileStats:
    """Per-file line counts."""

    additions: int = 0
    deletions: int = 0


@dataclass(frozen=True, slots=True)
class FileDiff:
    """One ``diff --git`` section."""

    old_path: str
    new_path: str
    is_binary: bool = False
    is_renamed: bool = False
    is_new: bool = False
    is_deleted: bool = False
    hunks: tuple[Hunk, ...] = field(default_factory=tuple)
    stats: FileStats = field(default_factory=FileStats)

    @property
    def path(self) -> str:
        """Display path: the old path for deletions, the new one otherwise."""
        return self.old_path if self.is_deleted else self.new_path


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Aggregate counts over every file in a diff."""

    files_changed: int = 0
    additions: int = 0
    deletions: int = 0


@dataclass(frozen=True, slots=True)
class ParsedDiff:
    """Result of parsing a whole unified diff."""

    files: tuple[FileDiff, ...] = field(default_factory=tuple)
    stats: DiffStats = field(default_factory=DiffStats)


@dataclass(frozen=True, slots=True)
class WordSegment:
    """Run of tokens sharing one diff kind."""

    kind: SegmentKind
    value: str


@dataclass(frozen=True, slots=True)
class SplitRow:
    """One row of a side-by-side view. Either side may be empty."""

    left: Change | None = None
    right: Change | None = None
