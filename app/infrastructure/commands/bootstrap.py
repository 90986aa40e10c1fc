"""Load the configured commands directory at startup."""

from typing import Any, Optional

from infrastructure.commands.loader import load_commands
from infrastructure.commands.registry import CommandRegistry
from infrastructure.configuration import CommandsSettings
from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings

logger = get_module_logger()


def bootstrap_commands(
    registry: Optional[Any] = None,
    settings: Optional[CommandsSettings] = None,
) -> Any:
    """Load every command under COMMANDS_PATH into a registry.

    This should be called once at application startup.

    Args:
        registry: Target registry; a new CommandRegistry("bot") when unset
        settings: Commands settings; the application settings when unset

    Returns:
        The populated registry

    Raises:
        CommandLoadError: If any command file fails to load
    """
    settings = settings or get_settings().commands
    if registry is None:
        registry = CommandRegistry("bot")

    load_commands(registry, settings.COMMANDS_PATH, silent=settings.COMMANDS_SILENT)
    logger.info(
        "commands_bootstrapped",
        path=settings.COMMANDS_PATH,
        count=len(registry.commands),
    )
    return registry
