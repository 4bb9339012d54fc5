"""Path-tree renderer — box-drawing guides, status markers, colour.

Pure functions from a node to Rich ``Text``; nothing here touches the
terminal. ``render`` returns the same lines as plain text.
"""

from __future__ import annotations

from typing import List, Tuple

from rich.text import Text

from gittree.git.models import StatusCode, StatusEntry
from gittree.tree.models import Node, SummaryNode, TreeNode

_BRANCH = ("├── ", "│   ")
_LAST_BRANCH = ("└── ", "    ")

_MARKER_STYLE = "color(244)"
_UNCHANGED = "-"

_MARKER = {
    StatusCode.MODIFIED: "M",
    StatusCode.ADDED: "N",
    StatusCode.UNTRACKED: "N",
    StatusCode.DELETED: "D",
    StatusCode.RENAMED: "R",
    StatusCode.COPIED: "C",
    StatusCode.TYPE_CHANGED: "T",
    StatusCode.UNMERGED: "U",
}

_WORKTREE_CHANGED = {StatusCode.MODIFIED, StatusCode.DELETED, StatusCode.TYPE_CHANGED}
_INDEX_CHANGED = {
    StatusCode.MODIFIED,
    StatusCode.DELETED,
    StatusCode.RENAMED,
    StatusCode.COPIED,
    StatusCode.TYPE_CHANGED,
}


def markers(entry: StatusEntry) -> str:
    """Return the two-column ``XY`` marker: index change, worktree change."""
    if entry.is_ignored:
        return _UNCHANGED * 2
    if entry.is_untracked:
        return _UNCHANGED + _MARKER[StatusCode.UNTRACKED]
    return _MARKER.get(entry.index, _UNCHANGED) + _MARKER.get(entry.worktree, _UNCHANGED)


def name_style(entry: StatusEntry) -> str:
    """Rich style for a file name; worktree changes win over index changes."""
    if StatusCode.UNMERGED in (entry.index, entry.worktree):
        return "yellow"
    if entry.is_untracked:
        return "green"
    if entry.is_ignored:
        return "blue"
    if entry.worktree in _WORKTREE_CHANGED:
        return "red"
    if entry.index in _INDEX_CHANGED:
        return "bold red"
    if entry.index == StatusCode.ADDED:
        return "bold green"
    return ""


def _label(node: TreeNode, name: str) -> Text:
    if node.entry is None:
        return Text(name)
    return Text.assemble(
        (markers(node.entry), _MARKER_STYLE),
        " ",
        (name, name_style(node.entry)),
    )


def _summary_line(node: SummaryNode) -> Text:
    stats = node.stats
    return Text.assemble(
        node.name,
        " ",
        (f"[{stats.branch}]", _MARKER_STYLE),
        " +",
        (str(stats.insertions), "green"),
        " -",
        (str(stats.deletions), "red"),
        " (",
        (str(stats.files_changed), "yellow"),
        ")",
    )


def _collapse(node: Node) -> Tuple[Node, str]:
    """Follow a chain of single-child directories, joining their names."""
    name = node.name
    while isinstance(node, TreeNode) and node.entry is None and len(node.children) == 1:
        only = next(iter(node.children.values()))
        if not isinstance(only, TreeNode) or only.entry is not None or not only.children:
            break
        name = f"{name}/{only.name}"
        node = only
    return node, name


def _node_lines(node: Node, name: str, collapse: bool, sort: bool) -> List[Text]:
    if isinstance(node, SummaryNode):
        return [_summary_line(node)]

    lines = [_label(node, name)]
    children = list(node.children.values())
    if sort:
        children.sort(key=lambda child: child.name)

    for i, child in enumerate(children):
        child_name = child.name
        if collapse:
            child, child_name = _collapse(child)
        first, rest = _LAST_BRANCH if i == len(children) - 1 else _BRANCH
        child_lines = _node_lines(child, child_name, collapse, sort)
        lines.append(Text(first) + child_lines[0])
        lines.extend(Text(rest) + line for line in child_lines[1:])

    return lines


def render_lines(node: Node, *, collapse: bool = False, sort: bool = True) -> List[Text]:
    """Render *node* and everything below it, one ``Text`` per line.

    The root is never collapsed into its children.
    """
    return _node_lines(node, node.name, collapse, sort)


def render_text(node: Node, *, collapse: bool = False, sort: bool = True) -> Text:
    """Styled rendering, lines joined with newlines."""
    return Text("\n").join(render_lines(node, collapse=collapse, sort=sort))


def render(node: Node, *, collapse: bool = False, sort: bool = True) -> str:
    """Plain-text rendering."""
    return "\n".join(line.plain for line in render_lines(node, collapse=collapse, sort=sort))
