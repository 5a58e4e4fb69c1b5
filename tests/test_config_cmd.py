"""
Tests for ConfigCommand — Configuration display and editing
"""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from purpose.commands import config_cmd
from purpose.commands.config_cmd import ConfigCommand
from purpose.presentation.symbols import ASCII


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def cli_mock():
    """CLI stand-in with a mocked ConfigManager."""
    cli = Mock()
    cli.symbols = ASCII
    cli.config_manager = Mock()
    cli.config_manager.display.return_value = "Config display output"
    cli.config_manager.set.return_value = None
    cli.config_manager.project_config_path = Path("/fake/project/.purpose/config.yaml")
    cli.config_manager.user_config_path = Path("/fake/user/.purpose/config.yaml")
    return cli


@pytest.fixture
def config_command(cli_mock):
    command = ConfigCommand(cli_mock)
    cli_mock._config_cmd = command
    return command


# =============================================================================
# Tests
# =============================================================================

class TestShowConfig:

    def test_prints_display(self, config_command, capsys):
        config_command.show_config()
        assert "Config display output" in capsys.readouterr().out


class TestSetConfig:

    def test_success_reloads(self, config_command, cli_mock, capsys):
        assert config_command.set_config("purposes.default", "edit") is None
        out = capsys.readouterr().out
        assert "[OK] Set purposes.default = edit" in out
        assert "/fake/project/.purpose/config.yaml" in out
        cli_mock.reload_config.assert_called_once()

    def test_user_scope_path(self, config_command, cli_mock, capsys):
        config_command.set_config("display.symbols", "ascii", scope="user")
        assert "/fake/user/.purpose/config.yaml" in capsys.readouterr().out
        cli_mock.config_manager.set.assert_called_once_with("display.symbols", "ascii", "user")

    def test_error_returned(self, config_command, cli_mock, capsys):
        cli_mock.config_manager.set.return_value = "Unknown section: x"
        assert config_command.set_config("x.y", "z") == "Unknown section: x"
        assert "[--] Unknown section: x" in capsys.readouterr().out
        cli_mock.reload_config.assert_not_called()


class TestHandle:
    """Argument dispatch."""

    def test_set_splits_on_first_equals(self, config_command, cli_mock):
        args = SimpleNamespace(set="purposes.default=a=b", user=False)
        config_cmd.handle(cli_mock, args)
        cli_mock.config_manager.set.assert_called_once_with("purposes.default", "a=b", "project")

    def test_set_without_equals(self, config_command, cli_mock, capsys):
        args = SimpleNamespace(set="purposes.default", user=False)
        assert config_cmd.handle(cli_mock, args) == "invalid format"
        assert "KEY=VALUE" in capsys.readouterr().out

    def test_no_set_shows(self, config_command, cli_mock, capsys):
        config_cmd.handle(cli_mock, SimpleNamespace(set=None, user=False))
        assert "Config display output" in capsys.readouterr().out
