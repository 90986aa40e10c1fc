"""Unit tests for the filesystem command loader."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from infrastructure.commands import (
    CommandRegistry,
    COMMAND_MODULE_PREFIX,
    CommandLoadError,
    import_command_file,
    load_commands,
)

pytestmark = pytest.mark.unit


class TestLoadCommands:
    """Tests for load_commands."""

    def test_registers_every_command(self, command_registry_factory, commands_dir):
        """Top-level and nested commands are registered by name."""
        registry = command_registry_factory()

        load_commands(registry, str(commands_dir), silent=True)

        assert set(registry.commands) == {"ping", "ban"}
        assert registry.commands["ban"].description == "Test command ban"

    def test_accepts_any_object_with_commands(self, commands_dir):
        """A plain object exposing a commands dict works as registry."""

        class Holder:
            def __init__(self):
                self.commands = {}

        holder = Holder()
        load_commands(holder, str(commands_dir), silent=True)

        assert set(holder.commands) == {"ping", "ban"}

    def test_returns_tree(self, command_registry_factory, tmp_path, write_command):
        write_command(tmp_path, "ping.py")

        tree = load_commands(command_registry_factory(), str(tmp_path), silent=True)

        assert tree == ("ping.py",)

    def test_name_attribute_is_key(self, command_registry_factory, tmp_path, write_command):
        """The module's name attribute, not its filename, is the key."""
        write_command(tmp_path, "file.py", 'name = "alias"\n')
        registry = command_registry_factory()

        load_commands(registry, str(tmp_path), silent=True)

        assert list(registry.commands) == ["alias"]

    def test_failing_file_raises(self, command_registry_factory, tmp_path, write_command):
        """A file raising on import aborts the load naming the file."""
        bad = write_command(tmp_path, "bad.py", "raise RuntimeError('boom')\n")

        with pytest.raises(CommandLoadError) as exc_info:
            load_commands(command_registry_factory(), str(tmp_path), silent=True)

        assert exc_info.value.path == str(bad)
        assert str(exc_info.value) == f"Invalid command at {bad}"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_failed_load_registers_nothing(self, command_registry_factory, tmp_path, write_command):
        """Commands loaded before a failing file are not kept."""
        write_command(tmp_path, "good.py")
        write_command(tmp_path, "other.py")
        write_command(tmp_path, "bad.py", "raise RuntimeError('boom')\n")
        registry = command_registry_factory()

        with pytest.raises(CommandLoadError):
            load_commands(registry, str(tmp_path), silent=True)

        assert registry.commands == {}

    def test_uses_registry_register(self, commands_dir):
        """A CommandRegistry receives each command through register()."""
        registry = MagicMock(spec=CommandRegistry)

        load_commands(registry, str(commands_dir), silent=True)

        registered = {call.args[0].name for call in registry.register.call_args_list}
        assert registered == {"ping", "ban"}

    def test_duplicate_names_warn(self, command_registry_factory, tmp_path, write_command):
        """Two files with the same name keep one command and log a warning."""
        write_command(tmp_path, "first.py", 'name = "ping"\n')
        write_command(tmp_path, "second.py", 'name = "ping"\n')
        registry = command_registry_factory()

        with patch("infrastructure.commands.registry.logger") as mock_logger:
            load_commands(registry, str(tmp_path), silent=True)

        assert list(registry.commands) == ["ping"]
        mock_logger.warning.assert_called_once_with(
            "command_replaced", namespace="test", name="ping"
        )

    def test_missing_name_raises(self, command_registry_factory, tmp_path, write_command):
        """A file without a name attribute is invalid."""
        write_command(tmp_path, "nameless.py", "x = 1\n")

        with pytest.raises(CommandLoadError) as exc_info:
            load_commands(command_registry_factory(), str(tmp_path), silent=True)

        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_syntax_error_raises(self, command_registry_factory, tmp_path, write_command):
        write_command(tmp_path, "broken.py", "def (:\n")

        with pytest.raises(CommandLoadError):
            load_commands(command_registry_factory(), str(tmp_path), silent=True)

    def test_prints_tree_unless_silent(self, command_registry_factory, tmp_path, write_command, capsys):
        """The tree is printed by default and suppressed when silent."""
        write_command(tmp_path, "ping.py")

        load_commands(command_registry_factory(), str(tmp_path))
        assert capsys.readouterr().out == "/\n└── ping.py\n"

        load_commands(command_registry_factory(), str(tmp_path), silent=True)
        assert capsys.readouterr().out == ""

    def test_missing_directory(self, command_registry_factory, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_commands(command_registry_factory(), str(tmp_path / "missing"))


class TestImportCommandFile:
    """Tests for import_command_file."""

    def test_module_name_is_namespaced(self, tmp_path, write_command):
        """Modules live under a private prefix in sys.modules."""
        path = write_command(tmp_path, "admin/kick.py")

        module = import_command_file(str(path), str(tmp_path))

        assert module.__name__ == f"{COMMAND_MODULE_PREFIX}.admin.kick"
        assert sys.modules[module.__name__] is module

    def test_failed_import_is_not_left_in_sys_modules(self, tmp_path, write_command):
        path = write_command(tmp_path, "oops.py", "raise ValueError('no')\n")

        with pytest.raises(ValueError):
            import_command_file(str(path), str(tmp_path))

        assert f"{COMMAND_MODULE_PREFIX}.oops" not in sys.modules
