"""Directory tree discovery and rendering for command files.

A tree is a tuple of entries in filesystem enumeration order: a string is a
command file name, a DirectoryNode is a nested directory.

Example output of render_tree():

    /
    ├── ping.py
    └── admin (2)
        ├── ban.py
        └── kick.py
"""

import os
from typing import List

from infrastructure.commands.models import DirectoryNode, DirectoryTree, TreeEntry

COMMAND_FILE_SUFFIX = ".py"

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _is_command_entry(entry: os.DirEntry) -> bool:
    """Skip private, hidden and bytecode entries (``_x.py``, ``.git``, ``__pycache__``)."""
    if entry.name.startswith((".", "_")):
        return False
    if entry.is_dir(follow_symlinks=False):
        return True
    return entry.name.endswith(COMMAND_FILE_SUFFIX)


def build_directory_tree(path: str) -> DirectoryTree:
    """Build a directory tree from a path.

    Args:
        path: Directory to scan

    Returns:
        Tuple of tree entries

    Raises:
        FileNotFoundError: If path does not exist
        NotADirectoryError: If path is a file
    """
    result: List[TreeEntry] = []
    with os.scandir(path) as entries:
        for entry in entries:
            if not _is_command_entry(entry):
                continue
            if entry.is_dir(follow_symlinks=False):
                result.append(
                    DirectoryNode(name=entry.name, children=build_directory_tree(entry.path))
                )
            else:
                result.append(entry.name)
    return tuple(result)


def build_paths(base_path: str, tree: DirectoryTree) -> List[str]:
    """Flatten a directory tree into file paths rooted at base_path."""
    paths: List[str] = []
    for entry in tree:
        if isinstance(entry, DirectoryNode):
            paths.extend(build_paths(os.path.join(base_path, entry.name), entry.children))
        elif isinstance(entry, str):
            paths.append(os.path.join(base_path, entry))
        else:
            raise TypeError(f"Invalid element type: {type(entry).__name__}")
    return paths


def render_tree(tree: DirectoryTree) -> str:
    """Render a directory tree with box-drawing connectors.

    Directories are annotated with their child count.
    """
    lines = ["/"]
    _render_entries(tree, "", lines)
    return "\n".join(lines)


def _render_entries(entries: DirectoryTree, prefix: str, lines: List[str]) -> None:
    for index, entry in enumerate(entries):
        is_last = index == len(entries) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        if isinstance(entry, DirectoryNode):
            lines.append(f"{prefix}{connector}{entry.name} ({entry.child_count})")
            _render_entries(entry.children, prefix + (SPACE if is_last else PIPE), lines)
        elif isinstance(entry, str):
            lines.append(f"{prefix}{connector}{entry}")
        else:
            raise TypeError(f"Invalid element type: {type(entry).__name__}")
