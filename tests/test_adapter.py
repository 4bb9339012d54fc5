"""Tests for the git subprocess adapter against real repositories."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from gittree.git import adapter
from gittree.git.adapter import (
    GitError,
    NotARepositoryError,
    get_branch,
    get_diff_stat,
    get_repo_root,
    get_status,
    is_repository_root,
)
from gittree.git.models import StatusCode


class TestRepoDiscovery:
    def test_repository_root(self, tmp_git_repo: Path):
        assert is_repository_root(tmp_git_repo)
        assert not is_repository_root(tmp_git_repo.parent)

    def test_root_from_subdirectory(self, tmp_git_repo: Path):
        sub = tmp_git_repo / "a" / "b"
        sub.mkdir(parents=True)
        assert get_repo_root(sub).resolve() == tmp_git_repo.resolve()

    def test_not_a_repository(self, tmp_path: Path):
        plain = tmp_path / "plain"
        plain.mkdir()
        with pytest.raises(NotARepositoryError):
            get_repo_root(plain)

    def test_not_a_directory(self, tmp_path: Path):
        with pytest.raises(NotARepositoryError):
            get_repo_root(tmp_path / "missing")

    def test_not_a_repository_is_git_error(self):
        assert issubclass(NotARepositoryError, GitError)


class TestStatus:
    def test_clean_repository(self, tmp_git_repo: Path):
        assert get_status(tmp_git_repo) == []

    def test_modified_untracked_and_staged(self, tmp_git_repo: Path):
        (tmp_git_repo / "README.md").write_text("# Changed\n")
        (tmp_git_repo / "notes.txt").write_text("todo\n")
        (tmp_git_repo / "src").mkdir()
        (tmp_git_repo / "src" / "app.py").write_text("x = 1\n")
        subprocess.run(["git", "add", "src/app.py"], cwd=tmp_git_repo, capture_output=True)

        entries = {e.path: e for e in get_status(tmp_git_repo)}
        assert entries["README.md"].worktree == StatusCode.MODIFIED
        assert entries["notes.txt"].is_untracked
        assert entries["src/app.py"].index == StatusCode.ADDED

    def test_untracked_directory_listed_per_file(self, tmp_git_repo: Path):
        nested = tmp_git_repo / "new" / "deep"
        nested.mkdir(parents=True)
        (nested / "a.txt").write_text("a\n")
        (nested / "b.txt").write_text("b\n")

        paths = sorted(e.path for e in get_status(tmp_git_repo))
        assert paths == ["new/deep/a.txt", "new/deep/b.txt"]

    def test_ignored_only_on_request(self, tmp_git_repo: Path):
        (tmp_git_repo / ".gitignore").write_text("*.log\n")
        (tmp_git_repo / "debug.log").write_text("noise\n")

        assert "debug.log" not in {e.path for e in get_status(tmp_git_repo)}
        entries = {e.path: e for e in get_status(tmp_git_repo, include_ignored=True)}
        assert entries["debug.log"].is_ignored

    def test_nested_repository_is_one_entry(self, tmp_git_repo: Path, make_repo):
        make_repo(tmp_git_repo / "inner")
        entries = get_status(tmp_git_repo)
        assert [e.path for e in entries] == ["inner"]
        assert entries[0].is_untracked

    def test_status_outside_repository(self, tmp_path: Path):
        plain = tmp_path / "plain"
        plain.mkdir()
        with pytest.raises(NotARepositoryError):
            get_status(plain)


class TestDiffStat:
    def test_branch_name(self, tmp_git_repo: Path):
        assert get_branch(tmp_git_repo) == "main"

    def test_counts(self, tmp_git_repo: Path):
        (tmp_git_repo / "README.md").write_text("# Changed\nmore\n")
        stat = get_diff_stat(tmp_git_repo)
        assert stat.branch == "main"
        assert stat.files_changed == 1
        assert stat.insertions == 2
        assert stat.deletions == 1

    def test_clean(self, tmp_git_repo: Path):
        stat = get_diff_stat(tmp_git_repo)
        assert (stat.files_changed, stat.insertions, stat.deletions) == (0, 0, 0)

    def test_repository_without_commits(self, tmp_path: Path, make_repo):
        repo = make_repo(tmp_path / "empty", commit=False)
        with pytest.raises(GitError):
            get_diff_stat(repo)


class TestGitFailure:
    @pytest.fixture
    def failing_git(self, tmp_path: Path, monkeypatch) -> Path:
        """Put a git on PATH that reports an error without "fatal"."""
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir()
        fake = bin_dir / "git"
        fake.write_text("#!/bin/sh\necho 'error: could not read index' >&2\nexit 1\n")
        fake.chmod(0o755)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        return fake

    @pytest.mark.skipif(sys.platform == "win32", reason="shell script git")
    def test_non_fatal_error_raises(self, tmp_git_repo: Path, failing_git):
        with pytest.raises(GitError, match="could not read index"):
            get_status(tmp_git_repo)

    @pytest.mark.skipif(sys.platform == "win32", reason="shell script git")
    def test_message_has_no_prefix(self, tmp_git_repo: Path, failing_git):
        with pytest.raises(GitError) as exc_info:
            get_status(tmp_git_repo)
        assert str(exc_info.value) == "error: could not read index"


class TestGitMissing:
    def test_missing_binary(self, tmp_path: Path, monkeypatch):
        def _raise(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(adapter.subprocess, "run", _raise)
        with pytest.raises(GitError, match="not installed"):
            get_status(tmp_path)

    def test_timeout(self, tmp_path: Path, monkeypatch):
        def _raise(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="git", timeout=30)

        monkeypatch.setattr(adapter.subprocess, "run", _raise)
        with pytest.raises(GitError, match="timed out"):
            get_status(tmp_path)
