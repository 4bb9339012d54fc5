"""Build a prefix tree of path segments from status entries."""

from __future__ import annotations

from typing import Iterable, List

from gittree.git.models import StatusEntry
from gittree.tree.models import TreeNode

_SEP = "/"


class PathError(ValueError):
    """Raised for a path that cannot be placed in the tree."""


def validate_path(path: str) -> List[str]:
    """Split *path* into segments, rejecting anything malformed."""
    if not path:
        raise PathError("empty path")
    if path.startswith(_SEP):
        raise PathError(f"path is not relative: {path!r}")
    if path.endswith(_SEP):
        raise PathError(f"path has a trailing separator: {path!r}")

    segments = path.split(_SEP)
    for segment in segments:
        if not segment:
            raise PathError(f"path has an empty segment: {path!r}")
        if segment in (".", ".."):
            raise PathError(f"path has a relative segment: {path!r}")
    return segments


def add_entry(root: TreeNode, entry: StatusEntry) -> TreeNode:
    """Insert *entry* below *root* and return the node holding it.

    A later entry for the same path replaces the earlier one.
    """
    node = root
    for segment in validate_path(entry.path):
        child = node.children.get(segment)
        if not isinstance(child, TreeNode):
            child = TreeNode(name=segment)
            node.children[segment] = child
        node = child
    node.entry = entry
    return node


def build_tree(entries: Iterable[StatusEntry], root_name: str) -> TreeNode:
    """Group *entries* by directory under a root named *root_name*."""
    root = TreeNode(name=root_name)
    for entry in entries:
        add_entry(root, entry)
    return root
