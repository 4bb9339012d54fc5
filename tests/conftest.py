"""Shared test fixtures — sample porcelain output, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

import pytest


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


def init_repo(path: Path, *, commit: bool = True) -> Path:
    """Create a git repository at *path* on branch ``main``."""
    path.mkdir(parents=True, exist_ok=True)
    _git("init", str(path), cwd=path)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=path)
    _git("config", "user.email", "test@test.com", cwd=path)
    _git("config", "user.name", "Test", cwd=path)
    _git("config", "commit.gpgsign", "false", cwd=path)
    if commit:
        (path / "README.md").write_text("# Test\n")
        _git("add", ".", cwd=path)
        _git("commit", "-m", "init", cwd=path)
    return path


@pytest.fixture(autouse=True)
def _isolate_git(tmp_path: Path, monkeypatch):
    """Keep git from discovering repositories above the test directory."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)


@pytest.fixture
def sample_porcelain() -> str:
    """``git status --porcelain=v1 -z`` output covering every record shape."""
    return "\0".join([
        " M src/main.rs",
        "?? src/lib.rs",
        "A  docs/guide.md",
        "R  new_name.py",
        "old_name.py",
        "MM README.md",
        " D removed.txt",
        "!! build/out.log",
        "",
    ])


@pytest.fixture
def make_repo() -> Callable[..., Path]:
    return init_repo


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit."""
    return init_repo(tmp_path / "repo")
