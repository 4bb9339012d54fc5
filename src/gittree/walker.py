"""Locate repositories and turn them into renderable nodes.

A path that is itself a repository root is shown as that repository. A
plain directory is searched up to ``depth`` levels for repositories. When
neither yields anything, the repository enclosing the path is discovered
the way git does and shown instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from gittree.git.adapter import (
    GitError,
    NotARepositoryError,
    get_diff_stat,
    get_repo_root,
    get_status,
    is_repository_root,
)
from gittree.options import TreeOptions
from gittree.tree.builder import build_tree
from gittree.tree.models import Node, SummaryNode, TreeNode

_SKIP_DIRS = frozenset({".git"})


def _display_name(path: Path) -> str:
    return path.name or path.resolve().name or str(path)


def walk_repository(repo_root: Path, name: str, options: TreeOptions) -> TreeNode:
    """Build the status tree of one repository."""
    return build_tree(get_status(repo_root, include_ignored=options.all), name)


def walk_summary(repo_root: Path, name: str) -> SummaryNode:
    return SummaryNode(name=name, stats=get_diff_stat(repo_root))


def _walk_directory(path: Path, depth: int, options: TreeOptions) -> TreeNode:
    tree = TreeNode(name=_display_name(path))
    try:
        children = sorted(path.iterdir())
    except OSError:
        return tree

    for child_path in children:
        if child_path.name in _SKIP_DIRS:
            continue
        try:
            child = walk_path(child_path, depth - 1, options)
        except (OSError, GitError):
            # skip children whose directory or repository cannot be read
            continue
        if child is None:
            continue
        # directories that hold no repository add nothing
        if (
            isinstance(child, TreeNode)
            and child.is_directory
            and not child.children
            and not is_repository_root(child_path)
        ):
            continue
        tree.children[child_path.name] = child
    return tree


def walk_path(path: Path, depth: int, options: TreeOptions) -> Optional[Node]:
    """Return the node for *path*, or None if nothing there is shown."""
    if path.is_dir() and is_repository_root(path):
        name = _display_name(path)
        if options.summary:
            return walk_summary(path, name)
        return walk_repository(path, name, options)

    if path.is_dir() and depth > 0:
        return _walk_directory(path, depth, options)

    return None


def run(path: Path, options: TreeOptions) -> Node:
    """Resolve *path* to a node. Raises NotARepositoryError if nothing is found."""
    node = walk_path(path, options.depth, options)
    if node is not None:
        return node

    if not path.exists():
        raise NotARepositoryError(f"no such file or directory: {path}")
    repo_root = get_repo_root(path if path.is_dir() else path.parent)
    if options.summary:
        return walk_summary(repo_root, _display_name(repo_root))
    return walk_repository(repo_root, _display_name(repo_root), options)
