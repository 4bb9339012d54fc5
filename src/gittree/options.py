"""Display options collected from command-line flags."""

from __future__ import annotations

from dataclasses import dataclass


class OptionsError(Exception):
    """Raised when a combination of flags is invalid."""


@dataclass
class TreeOptions:
    all: bool = False  # include ignored files
    depth: int = 0  # levels of subdirectories searched for repositories
    summary: bool = False  # one line of diff statistics per repository
    collapse: bool = False  # join single-child directory chains
    sort: bool = True  # lexical sibling order; False keeps git's order
    color: bool = True

    def validate(self) -> "TreeOptions":
        if self.depth < 0:
            raise OptionsError(f"depth must not be negative: {self.depth}")
        return self
