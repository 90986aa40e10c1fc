"""Command registry for registration and lookup."""

from typing import Any, Dict, List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CommandRegistry:
    """Registry holding loaded commands keyed by name.

    load_commands() registers through register(). Any other object that
    exposes a ``commands`` dict is written to directly.

    Attributes:
        namespace: Registry namespace (e.g., "bot")
        commands: Dict of registered commands

    Example:
        registry = CommandRegistry("bot")
        load_commands(registry, "commands")
        ping = registry.get_command("ping")
    """

    def __init__(self, namespace: str = "default"):
        """Initialize registry.

        Args:
            namespace: Namespace used in log events
        """
        self.namespace = namespace
        self.commands: Dict[str, Any] = {}

    def register(self, command: Any) -> Any:
        """Register a command object under its ``name`` attribute.

        Args:
            command: Object or module exposing ``name``

        Returns:
            The command, so this can be used as a decorator

        Raises:
            AttributeError: If the command has no ``name``
        """
        name = command.name
        if name in self.commands:
            logger.warning(
                "command_replaced", namespace=self.namespace, name=name
            )
        self.commands[name] = command
        logger.debug("registered_command", namespace=self.namespace, name=name)
        return command

    def get_command(self, name: str) -> Optional[Any]:
        """Get command by name, or None if not registered."""
        return self.commands.get(name)

    def list_commands(self) -> List[Any]:
        """Get all registered commands in registration order."""
        return list(self.commands.values())

    def __contains__(self, name: str) -> bool:
        return name in self.commands

    def __len__(self) -> int:
        return len(self.commands)
