"""Path tree — models, builder, renderer."""

from gittree.tree.builder import PathError, add_entry, build_tree, validate_path
from gittree.tree.models import Node, SummaryNode, TreeNode
from gittree.tree.renderer import render, render_lines, render_text

__all__ = [
    "Node",
    "PathError",
    "SummaryNode",
    "TreeNode",
    "add_entry",
    "build_tree",
    "render",
    "render_lines",
    "render_text",
    "validate_path",
]
