"""git-tree — tree + git status: displays git status info in a tree."""

__version__ = "0.3.0"
