"""Git interface layer — adapter, status parsing, models."""

from gittree.git.adapter import (
    GitError,
    NotARepositoryError,
    get_branch,
    get_diff_stat,
    get_repo_root,
    get_status,
    is_repository_root,
)
from gittree.git.models import DiffStat, StatusCode, StatusEntry
from gittree.git.status_parser import StatusParseError, parse_shortstat, parse_status

__all__ = [
    "DiffStat",
    "GitError",
    "NotARepositoryError",
    "StatusCode",
    "StatusEntry",
    "StatusParseError",
    "get_branch",
    "get_diff_stat",
    "get_repo_root",
    "get_status",
    "is_repository_root",
    "parse_shortstat",
    "parse_status",
]
