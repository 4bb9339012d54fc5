"""Data models for git status entries and diff statistics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class StatusCode(str, Enum):
    """One column of a porcelain ``XY`` status pair."""

    UNMODIFIED = " "
    MODIFIED = "M"
    TYPE_CHANGED = "T"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNTRACKED = "?"
    IGNORED = "!"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single file reported by ``git status``."""

    path: str
    index: StatusCode
    worktree: StatusCode
    orig_path: Optional[str] = None  # set on renames and copies

    @property
    def segments(self) -> List[str]:
        return self.path.split("/")

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def is_untracked(self) -> bool:
        return self.index == StatusCode.UNTRACKED and self.worktree == StatusCode.UNTRACKED

    @property
    def is_ignored(self) -> bool:
        return self.index == StatusCode.IGNORED and self.worktree == StatusCode.IGNORED


@dataclass(frozen=True)
class DiffStat:
    """Branch name and change counts of the working tree against HEAD."""

    branch: str
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0
