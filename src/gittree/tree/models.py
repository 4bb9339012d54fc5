"""Tree node models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Union

from gittree.git.models import DiffStat, StatusEntry


@dataclass
class TreeNode:
    """One path segment.

    ``entry`` is set only where git reported an actual file; intermediate
    segments are pure directory groupings.
    """

    name: str
    entry: Optional[StatusEntry] = None
    children: Dict[str, "Node"] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_directory(self) -> bool:
        return self.entry is None

    def iter_entries(self) -> Iterator[StatusEntry]:
        """Yield every entry below this node, depth-first in insertion order."""
        if self.entry is not None:
            yield self.entry
        for child in self.children.values():
            if isinstance(child, TreeNode):
                yield from child.iter_entries()


@dataclass
class SummaryNode:
    """A repository shown as one line of branch and diff statistics."""

    name: str
    stats: DiffStat


Node = Union[TreeNode, SummaryNode]
