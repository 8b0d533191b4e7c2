"""Unified diff parsing.

Turns ``git diff`` output into FileDiff/Hunk/Change objects with running
line numbers. The parser is tolerant: unrecognised lines are ignored and a
hunk whose header does not parse is dropped, but nothing raises on content.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NamedTuple

from gitview.core.errors import require_str
from gitview.core.logging import get_module_logger
from gitview.diff.models import (
    DEV_NULL,
    Change,
    DiffStats,
    FileDiff,
    FileStats,
    Hunk,
    ParsedDiff,
    ParsedDiffLine,
)

log = get_module_logger(__name__)

_HUNK_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_GIT_HEADER_RE = re.compile(r"^diff --git a/(.+) b/(.+)$")

_SECTION_PREFIX = "diff --git"
_HUNK_PREFIX = "@@"
_META_PREFIXES = (_SECTION_PREFIX, "index ", "---", "+++")
_NO_NEWLINE_MARKER = "\\"


class HunkRange(NamedTuple):
    """Line ranges declared by a hunk header."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int


# =============================================================================
# Single-line classification
# =============================================================================


def parse_diff_line(line: str) -> ParsedDiffLine:
    """Classify one raw diff line.

    Precedence: add > del > hunk header > meta > context. ``+++``/``---``
    are file headers here, not changes.
    """
    require_str("parse_diff_line", "line", line)
    if line.startswith("+") and not line.startswith("+++"):
        return ParsedDiffLine("add", line)
    if line.startswith("-") and not line.startswith("---"):
        return ParsedDiffLine("del", line)
    if line.startswith(_HUNK_PREFIX):
        return ParsedDiffLine("hunk", line)
    if line.startswith(_META_PREFIXES):
        return ParsedDiffLine("meta", line)
    return ParsedDiffLine("ctx", line)


def parse_hunk_header(header: str) -> HunkRange | None:
    """Parse ``@@ -10,7 +10,8 @@ ...``. Omitted line counts default to 1."""
    m = _HUNK_RE.match(header)
    if not m:
        return None
    return HunkRange(
        old_start=int(m.group(1)),
        old_lines=int(m.group(2)) if m.group(2) is not None else 1,
        new_start=int(m.group(3)),
        new_lines=int(m.group(4)) if m.group(4) is not None else 1,
    )


# =============================================================================
# Full diff parsing
# =============================================================================


@dataclass
class _FileBuilder:
    """Mutable accumulator for one file section; frozen by build()."""

    old_path: str = ""
    new_path: str = ""
    is_binary: bool = False
    is_renamed: bool = False
    is_new: bool = False
    is_deleted: bool = False
    hunks: list[Hunk] = field(default_factory=list)
    additions: int = 0
    deletions: int = 0

    def build(self) -> FileDiff:
        return FileDiff(
            old_path=self.old_path,
            new_path=self.new_path,
            is_binary=self.is_binary,
            is_renamed=self.is_renamed,
            is_new=self.is_new,
            is_deleted=self.is_deleted,
            hunks=tuple(self.hunks),
            stats=FileStats(additions=self.additions, deletions=self.deletions),
        )


def _extract_path(line: str) -> str:
    """Path from a ``--- a/x`` or ``+++ b/x`` line, prefix stripped."""
    path = line[4:]
    if path == DEV_NULL:
        return DEV_NULL
    if path.startswith(("a/", "b/")):
        return path[2:]
    return path


def split_diff_lines(raw: str) -> list[str]:
    """Split on \\n only, dropping trailing \\r and the empty tail after a final newline."""
    # str.splitlines() would also break on form feeds and other separators
    # that can legitimately appear inside diffed content.
    lines = raw.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _apply_meta(file: _FileBuilder, line: str) -> None:
    if line.startswith(("Binary files", "GIT binary patch")):
        file.is_binary = True
    elif line.startswith("rename from "):
        file.is_renamed = True
        file.old_path = line[len("rename from ") :]
    elif line.startswith("rename to "):
        file.is_renamed = True
        file.new_path = line[len("rename to ") :]
    elif line.startswith("new file mode"):
        file.is_new = True
    elif line.startswith("deleted file mode"):
        file.is_deleted = True
    elif line.startswith("--- "):
        path = _extract_path(line)
        if path == DEV_NULL:
            file.is_new = True
        else:
            file.old_path = path
    elif line.startswith("+++ "):
        path = _extract_path(line)
        if path == DEV_NULL:
            file.is_deleted = True
        else:
            file.new_path = path


def _is_boundary(line: str) -> bool:
    return line.startswith((_HUNK_PREFIX, _SECTION_PREFIX))


def _parse_hunk_body(
    lines: list[str], i: int, header: str, rng: HunkRange, file: _FileBuilder
) -> tuple[Hunk, int]:
    """Consume change lines from ``i`` until the next hunk or section."""
    changes: list[Change] = []
    old_no, new_no = rng.old_start, rng.new_start

    while i < len(lines) and not _is_boundary(lines[i]):
        line = lines[i]
        i += 1
        if line.startswith("+"):
            changes.append(Change("add", line[1:], new_line_no=new_no))
            file.additions += 1
            new_no += 1
        elif line.startswith("-"):
            changes.append(Change("del", line[1:], old_line_no=old_no))
            file.deletions += 1
            old_no += 1
        elif line.startswith(_NO_NEWLINE_MARKER):
            continue
        else:
            content = line[1:] if line.startswith(" ") else line
            changes.append(Change("ctx", content, old_line_no=old_no, new_line_no=new_no))
            old_no += 1
            new_no += 1

    hunk = Hunk(
        header=header,
        old_start=rng.old_start,
        old_lines=rng.old_lines,
        new_start=rng.new_start,
        new_lines=rng.new_lines,
        changes=tuple(changes),
    )
    return hunk, i


def _parse_file(lines: list[str], i: int) -> tuple[FileDiff, int]:
    """Parse one ``diff --git`` section starting at ``lines[i]``."""
    file = _FileBuilder()
    m = _GIT_HEADER_RE.match(lines[i])
    if m:
        file.old_path, file.new_path = m.group(1), m.group(2)
    i += 1

    while i < len(lines) and not _is_boundary(lines[i]):
        _apply_meta(file, lines[i])
        i += 1

    while i < len(lines) and not lines[i].startswith(_SECTION_PREFIX):
        header = lines[i]
        i += 1
        if not header.startswith(_HUNK_PREFIX):
            continue
        rng = parse_hunk_header(header)
        if rng is None:
            log.debug("hunk_header_skipped", header=header, path=file.new_path)
            continue
        hunk, i = _parse_hunk_body(lines, i, header, rng, file)
        file.hunks.append(hunk)

    return file.build(), i


def parse_unified_diff(raw: str) -> ParsedDiff:
    """Parse raw ``git diff`` text into per-file hunks and changes.

    Text before the first ``diff --git`` header is ignored. Empty input gives
    an empty ParsedDiff.
    """
    require_str("parse_unified_diff", "raw", raw)
    lines = split_diff_lines(raw)
    files: list[FileDiff] = []
    additions = deletions = 0
    i = 0

    while i < len(lines):
        if not lines[i].startswith(_SECTION_PREFIX):
            i += 1
            continue
        file, i = _parse_file(lines, i)
        files.append(file)
        additions += file.stats.additions
        deletions += file.stats.deletions

    stats = DiffStats(files_changed=len(files), additions=additions, deletions=deletions)
    log.debug(
        "unified_diff_parsed",
        files=stats.files_changed,
        additions=stats.additions,
        deletions=stats.deletions,
    )
    return ParsedDiff(files=tuple(files), stats=stats)
