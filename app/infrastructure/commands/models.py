"""Command discovery data models."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class DirectoryNode:
    """A directory discovered while scanning for commands.

    Attributes:
        name: Directory name (not the full path)
        children: Entries in filesystem enumeration order. A plain string is
            a command file name; a DirectoryNode is a nested directory.
    """

    name: str
    children: Tuple["TreeEntry", ...] = ()

    @property
    def child_count(self) -> int:
        return len(self.children)


TreeEntry = Union[str, DirectoryNode]
DirectoryTree = Tuple[TreeEntry, ...]
