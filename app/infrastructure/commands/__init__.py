"""Command discovery framework.

Discovers command modules under a directory tree and registers them by name.

Public API:
    - CommandRegistry: name -> command mapping holder
    - load_commands(): walk a directory and register every command file
    - bootstrap_commands(): load the directory named by COMMANDS_PATH
    - build_directory_tree(), build_paths(), render_tree(): tree helpers
    - DirectoryNode: directory entry in a discovered tree
    - CommandLoadError: raised when a command file cannot be loaded
"""

from infrastructure.commands.bootstrap import bootstrap_commands
from infrastructure.commands.exceptions import CommandError, CommandLoadError
from infrastructure.commands.loader import (
    COMMAND_MODULE_PREFIX,
    import_command_file,
    load_commands,
)
from infrastructure.commands.models import DirectoryNode, DirectoryTree, TreeEntry
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.tree import build_directory_tree, build_paths, render_tree

__all__ = [
    "CommandRegistry",
    "CommandError",
    "CommandLoadError",
    "DirectoryNode",
    "DirectoryTree",
    "TreeEntry",
    "build_directory_tree",
    "build_paths",
    "render_tree",
    "import_command_file",
    "load_commands",
    "bootstrap_commands",
    "COMMAND_MODULE_PREFIX",
]
