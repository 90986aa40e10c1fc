"""Fixtures for command loader tests."""

import pytest

from infrastructure.commands import CommandRegistry


@pytest.fixture
def command_registry_factory():
    """Factory for creating CommandRegistry instances for testing."""

    def _factory(namespace: str = "test"):
        return CommandRegistry(namespace=namespace)

    return _factory


@pytest.fixture
def write_command():
    """Write a command file under a base directory, creating parents."""

    def _write(base, relative, body=None):
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if body is None:
            body = f'name = "{path.stem}"\ndescription = "Test command {path.stem}"\n'
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def commands_dir(tmp_path, write_command):
    """Commands tree with a top-level file and a nested directory."""
    base = tmp_path / "commands"
    write_command(base, "ping.py")
    write_command(base, "admin/ban.py")
    return base
