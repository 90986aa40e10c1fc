"""Command loader feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class CommandsSettings(FeatureSettings):
    """Configuration for filesystem command discovery.

    Environment Variables:
        COMMANDS_PATH: Directory scanned for command modules (default: commands)
        COMMANDS_SILENT: Skip printing the discovered tree (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        load_commands(registry, settings.commands.COMMANDS_PATH)
        ```
    """

    COMMANDS_PATH: str = Field(default="commands", alias="COMMANDS_PATH")
    COMMANDS_SILENT: bool = Field(default=False, alias="COMMANDS_SILENT")
