"""Filesystem command loader.

Walks a commands directory, imports every command file by path and registers
the resulting module on a registry under its ``name`` attribute.

Usage:

    from infrastructure.commands import CommandRegistry, load_commands

    registry = CommandRegistry("bot")
    load_commands(registry, "commands")

A command file is a plain module:

    # commands/ping.py
    name = "ping"
    description = "Replies with pong"

    def execute(ctx):
        ...

Loading is all-or-nothing: the first file that fails to import (or has no
``name``) aborts the load with a CommandLoadError naming that file.
"""

import importlib.util
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, List

from infrastructure.commands.exceptions import CommandLoadError
from infrastructure.commands.models import DirectoryTree
from infrastructure.commands.registry import CommandRegistry
from infrastructure.commands.tree import build_directory_tree, build_paths, render_tree
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Prefix for sys.modules entries so command files never shadow real packages
COMMAND_MODULE_PREFIX = "_lingo_commands"


def _module_name_for(path: str, base_path: str) -> str:
    relative = Path(os.path.relpath(path, base_path)).with_suffix("")
    return ".".join([COMMAND_MODULE_PREFIX, *relative.parts])


def import_command_file(path: str, base_path: str) -> ModuleType:
    """Import a single command file by path.

    Args:
        path: Path to the ``.py`` file
        base_path: Root of the commands tree (used for the module name)

    Returns:
        The executed module

    Raises:
        ImportError: If no import spec can be built for the path
        Exception: Anything raised while executing the module body
    """
    module_name = _module_name_for(path, base_path)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot build import spec for {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        raise
    return module


def _commit(registry: Any, staged: List[ModuleType]) -> None:
    if isinstance(registry, CommandRegistry):
        for command in staged:
            registry.register(command)
    else:
        for command in staged:
            registry.commands[command.name] = command


def load_commands(registry: Any, base_path: str, silent: bool = False) -> DirectoryTree:
    """Load commands from the provided commands folder.

    Every file is imported and checked before anything is registered, so a
    failed load leaves the registry untouched.

    Args:
        registry: CommandRegistry, or any object exposing a ``commands`` mapping
        base_path: Directory to scan recursively
        silent: Whether to skip printing the directory tree

    Returns:
        The discovered directory tree

    Raises:
        CommandLoadError: If any command file fails to load
        FileNotFoundError: If base_path does not exist
    """
    tree = build_directory_tree(base_path)
    paths = build_paths(base_path, tree)

    staged: List[ModuleType] = []
    for path in paths:
        try:
            command = import_command_file(path, base_path)
            if not hasattr(command, "name"):
                raise AttributeError(f"module {command.__name__} has no attribute 'name'")
        except Exception as e:
            logger.error("command_load_failed", path=path, error=str(e), exc_info=True)
            raise CommandLoadError(path) from e
        staged.append(command)

    _commit(registry, staged)

    if not silent:
        print(render_tree(tree))

    logger.info("commands_loaded", base_path=str(base_path), count=len(paths))
    return tree
