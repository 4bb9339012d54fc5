"""Git subprocess wrapper — repository discovery, status, diff statistics."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from gittree.git.models import DiffStat, StatusEntry
from gittree.git.status_parser import parse_shortstat, parse_status


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


class NotARepositoryError(GitError):
    """Raised when the target directory is not inside a git repository."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except NotADirectoryError:
        raise NotARepositoryError(f"not a directory: {cwd}")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        if "not a git repository" in stderr.lower():
            raise NotARepositoryError(f"not a git repository: {cwd}")
        raise GitError(stderr or f"git {args[0]} exited with status {result.returncode}")
    return result.stdout


def is_repository_root(path: Path) -> bool:
    """Return True if *path* itself is the top of a working tree."""
    # .git is a directory, or a file for worktrees and submodules
    return (path / ".git").exists()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the repository enclosing *cwd*."""
    cwd = cwd or Path.cwd()
    if not cwd.is_dir():
        raise NotARepositoryError(f"not a directory: {cwd}")
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    root = out.strip()
    if not root:
        # bare repository or inside .git
        raise NotARepositoryError(f"no working tree at {cwd}")
    return Path(root)


def get_status(repo_root: Path, *, include_ignored: bool = False) -> List[StatusEntry]:
    """Return changed and untracked files, one entry per file."""
    args = ["status", "--porcelain=v1", "-z", "--untracked-files=all"]
    if include_ignored:
        args.append("--ignored")
    return parse_status(_run_git(args, cwd=repo_root))


def get_branch(repo_root: Path) -> str:
    """Return the short name of the checked-out branch (``HEAD`` if detached)."""
    return _run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root).strip()


def get_diff_stat(repo_root: Path) -> DiffStat:
    """Return change counts of the working directory against HEAD."""
    branch = get_branch(repo_root)
    out = _run_git(["diff", "--shortstat", "HEAD"], cwd=repo_root)
    return parse_shortstat(out, branch)
