"""Unit tests for loading the configured commands directory."""

import pytest

from infrastructure.commands import CommandRegistry, bootstrap_commands
from infrastructure.commands import bootstrap
from infrastructure.configuration import CommandsSettings, Settings

pytestmark = pytest.mark.unit


class TestBootstrapCommands:
    """Tests for bootstrap_commands."""

    def test_loads_configured_path(self, commands_dir, capsys):
        """COMMANDS_PATH is scanned and COMMANDS_SILENT suppresses the tree."""
        settings = CommandsSettings(COMMANDS_PATH=str(commands_dir), COMMANDS_SILENT=True)

        registry = bootstrap_commands(settings=settings)

        assert isinstance(registry, CommandRegistry)
        assert registry.namespace == "bot"
        assert set(registry.commands) == {"ping", "ban"}
        assert capsys.readouterr().out == ""

    def test_prints_tree_when_not_silent(self, tmp_path, write_command, capsys):
        write_command(tmp_path, "ping.py")
        settings = CommandsSettings(COMMANDS_PATH=str(tmp_path), COMMANDS_SILENT=False)

        bootstrap_commands(settings=settings)

        assert capsys.readouterr().out == "/\n└── ping.py\n"

    def test_uses_given_registry(self, command_registry_factory, commands_dir):
        registry = command_registry_factory()
        settings = CommandsSettings(COMMANDS_PATH=str(commands_dir), COMMANDS_SILENT=True)

        assert bootstrap_commands(registry, settings) is registry
        assert "ping" in registry

    def test_reads_application_settings(self, monkeypatch, commands_dir):
        """Without explicit settings the environment configuration is used."""
        monkeypatch.setenv("COMMANDS_PATH", str(commands_dir))
        monkeypatch.setenv("COMMANDS_SILENT", "true")
        monkeypatch.setattr(bootstrap, "get_settings", lambda: Settings())

        registry = bootstrap_commands()

        assert set(registry.commands) == {"ping", "ban"}
