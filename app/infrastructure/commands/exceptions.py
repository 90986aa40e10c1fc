"""Exceptions raised while discovering commands."""


class CommandError(Exception):
    """Base exception for the command framework."""

    pass


class CommandLoadError(CommandError):
    """Raised when a command file cannot be imported or registered.

    The original failure is chained as ``__cause__``.

    Example:
        >>> load_commands(registry, "commands")
        Traceback (most recent call last):
        ...
        CommandLoadError: Invalid command at commands/broken.py
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid command at {path}")
