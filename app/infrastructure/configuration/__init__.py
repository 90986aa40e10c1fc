"""Infrastructure configuration module - public API.

This module provides centralized configuration management for Lingo Bot
using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslatorSettings, CommandsSettings, CacheSettings: Section classes

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_target = settings.translator.TRANSLATOR_DEFAULT_TO
    commands_path = settings.commands.COMMANDS_PATH
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import CommandsSettings, TranslatorSettings
from infrastructure.configuration.infrastructure import CacheSettings

__all__ = [
    "Settings",
    "settings",
    "TranslatorSettings",
    "CommandsSettings",
    "CacheSettings",
]
