"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.commands import CommandsSettings
from infrastructure.configuration.features.translator import TranslatorSettings

__all__ = [
    "CommandsSettings",
    "TranslatorSettings",
]
