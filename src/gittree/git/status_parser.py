"""Porcelain status parser.

Reads the NUL-separated output of ``git status --porcelain=v1 -z`` into
StatusEntry objects, and ``git diff --shortstat`` into a DiffStat.
"""

from __future__ import annotations

import re
from typing import List, Optional

from gittree.git.models import DiffStat, StatusCode, StatusEntry

_FILES_CHANGED_RE = re.compile(r"(\d+) files? changed")
_INSERTIONS_RE = re.compile(r"(\d+) insertions?\(\+\)")
_DELETIONS_RE = re.compile(r"(\d+) deletions?\(-\)")

# Rename and copy records are followed by a token holding the source path.
_TWO_PATH_CODES = frozenset({StatusCode.RENAMED, StatusCode.COPIED})


class StatusParseError(Exception):
    """Raised when git status output cannot be understood."""


def _code(char: str, record: str) -> StatusCode:
    try:
        return StatusCode(char)
    except ValueError:
        raise StatusParseError(f"unknown status code {char!r} in record {record!r}") from None


def parse_status(output: str) -> List[StatusEntry]:
    """Parse ``git status --porcelain=v1 -z`` output, preserving order."""
    entries: List[StatusEntry] = []
    tokens = output.split("\0")
    idx = 0

    while idx < len(tokens):
        record = tokens[idx]
        idx += 1
        if not record:
            continue
        if len(record) < 4 or record[2] != " ":
            raise StatusParseError(f"malformed status record: {record!r}")

        index = _code(record[0], record)
        worktree = _code(record[1], record)
        orig_path: Optional[str] = None

        if index in _TWO_PATH_CODES or worktree in _TWO_PATH_CODES:
            if idx >= len(tokens) or not tokens[idx]:
                raise StatusParseError(f"missing source path for record: {record!r}")
            orig_path = tokens[idx]
            idx += 1

        # Nested repositories are reported as a single directory record.
        path = record[3:]
        if len(path) > 1 and path.endswith("/"):
            path = path.rstrip("/")

        entries.append(
            StatusEntry(
                path=path,
                index=index,
                worktree=worktree,
                orig_path=orig_path,
            )
        )

    return entries


def parse_shortstat(output: str, branch: str) -> DiffStat:
    """Parse ``git diff --shortstat``. Empty output means a clean tree."""

    def _count(pattern: re.Pattern[str]) -> int:
        m = pattern.search(output)
        return int(m.group(1)) if m else 0

    return DiffStat(
        branch=branch,
        files_changed=_count(_FILES_CHANGED_RE),
        insertions=_count(_INSERTIONS_RE),
        deletions=_count(_DELETIONS_RE),
    )
