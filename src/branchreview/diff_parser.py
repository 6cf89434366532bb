"""Parsers for `git diff` output.

Both parsers are total: unrecognised input yields an empty or zero result
instead of an exception.
"""

import re
from typing import Any, Dict, List, Optional

from branchreview.models import DiffSummary, FileChange, LineChange, LineType


FILE_SEPARATOR = "diff --git"
DEFAULT_EXCERPT_LIMIT = 1000

_FILES_RE = re.compile(r"(\d+)\s+file")
_INSERTIONS_RE = re.compile(r"(\d+)\s+insertion")
_DELETIONS_RE = re.compile(r"(\d+)\s+deletion")
_HEADER_RE = re.compile(r"^\s*a/(.+?)\s+b/")
_HUNK_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


def _leading_int(pattern: re.Pattern[str], line: str) -> int:
    match = pattern.search(line)
    return int(match.group(1)) if match else 0


def parse_summary(stat_text: str) -> DiffSummary:
    """Parse the footer of `git diff --stat` output.

    Example footer: ``3 files changed, 10 insertions(+), 2 deletions(-)``.
    Missing counts default to 0.
    """
    files_changed = insertions = deletions = 0

    for line in stat_text.split("\n"):
        if "file" in line and "changed" in line:
            files_changed = _leading_int(_FILES_RE, line)
            insertions = _leading_int(_INSERTIONS_RE, line)
            deletions = _leading_int(_DELETIONS_RE, line)

    return DiffSummary(
        files_changed=files_changed,
        insertions=insertions,
        deletions=deletions,
    )


def parse_details(
    diff_text: str, excerpt_limit: int = DEFAULT_EXCERPT_LIMIT
) -> List[FileChange]:
    """Parse full `git diff` output into one FileChange per file block."""
    files = []

    # The first segment is whatever precedes the first file header.
    for block in diff_text.split(FILE_SEPARATOR)[1:]:
        file_change = _parse_file_block(block, excerpt_limit)
        if file_change is not None:
            files.append(file_change)

    return files


def _parse_file_block(block: str, excerpt_limit: int) -> Optional[FileChange]:
    """Parse one file's block, or return None if its header is unrecognised."""
    match = _HEADER_RE.match(block)
    if not match:
        return None

    line_changes: List[LineChange] = []
    hunk: Optional[Dict[str, Any]] = None

    for line in block.split("\n")[1:]:
        if line.startswith("@@"):
            hunk = _parse_hunk_header(line)
            continue

        if hunk is None or (hunk["old_left"] <= 0 and hunk["new_left"] <= 0):
            # No line counters are active here: header metadata, the
            # ---/+++ markers, or body lines past the hunk's declared length.
            change = _unnumbered_change(line)
            if change is not None:
                line_changes.append(change)
            continue

        if line.startswith("\\"):
            # "\ No newline at end of file"
            continue

        if line.startswith("+"):
            line_changes.append(LineChange(
                old_line_number=None,
                new_line_number=hunk["new"],
                type=LineType.ADDITION,
                content=line[1:],
            ))
            hunk["new"] += 1
            hunk["new_left"] -= 1
        elif line.startswith("-"):
            line_changes.append(LineChange(
                old_line_number=hunk["old"],
                new_line_number=None,
                type=LineType.DELETION,
                content=line[1:],
            ))
            hunk["old"] += 1
            hunk["old_left"] -= 1
        else:
            line_changes.append(LineChange(
                old_line_number=hunk["old"],
                new_line_number=hunk["new"],
                type=LineType.CONTEXT,
                content=line[1:],
            ))
            hunk["old"] += 1
            hunk["new"] += 1
            hunk["old_left"] -= 1
            hunk["new_left"] -= 1

    insertions = sum(1 for c in line_changes if c.type == LineType.ADDITION)
    deletions = sum(1 for c in line_changes if c.type == LineType.DELETION)

    return FileChange(
        path=match.group(1),
        insertions=insertions,
        deletions=deletions,
        changes=insertions + deletions,
        diff=block[:excerpt_limit],
        line_changes=line_changes,
    )


def _unnumbered_change(line: str) -> Optional[LineChange]:
    """Classify a +/- line seen while no hunk counters are active."""
    if line.startswith("+") and not line.startswith("+++"):
        return LineChange(type=LineType.ADDITION, content=line[1:])
    if line.startswith("-") and not line.startswith("---"):
        return LineChange(type=LineType.DELETION, content=line[1:])
    return None


def _parse_hunk_header(line: str) -> Optional[Dict[str, Any]]:
    """Parse ``@@ -old_start,old_lines +new_start,new_lines @@``."""
    match = _HUNK_RE.match(line)
    if not match:
        return None
    return {
        "old": int(match.group(1)),
        "new": int(match.group(3)),
        "old_left": int(match.group(2) or 1),
        "new_left": int(match.group(4) or 1),
    }
