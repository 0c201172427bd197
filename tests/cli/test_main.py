"""Tests for the CLI entry point."""

import pytest

from hz_catalog import __version__
from hz_catalog.cli import main as cli_main
from hz_catalog.cli.main import app, run
from hz_catalog.core.exceptions import ConfigError, NetworkError
from hz_catalog.core.exit_codes import ExitCode


@pytest.mark.unit
class TestCliHelp:
    def test_help_flag(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "hz-catalog" in result.stdout
        assert "Hazelcast" in result.stdout

    def test_no_args_shows_help(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code == 0 or result.exit_code == 2
        assert "hz-catalog" in result.stdout or "Usage" in result.stdout

    @pytest.mark.parametrize(
        "command",
        [
            "tables",
            "columns",
            "schemas",
            "catalogs",
            "table-types",
            "type-info",
            "info",
        ],
    )
    def test_commands_registered(self, runner, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.unit
class TestCliVersion:
    def test_version_flag(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"hz-catalog {__version__}" in result.stdout

    def test_version_short_flag(self, runner):
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert f"hz-catalog {__version__}" in result.stdout


@pytest.mark.unit
class TestCliVerbose:
    def test_verbose_flag_accepted(self, runner):
        result = runner.invoke(app, ["--help", "--verbose"])
        assert result.exit_code == 0


@pytest.mark.unit
class TestUnknownCommand:
    def test_unknown_command_fails(self, runner):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0


@pytest.mark.unit
class TestRunErrorHandling:
    def _run_raising(self, monkeypatch, error):
        def boom():
            raise error

        monkeypatch.setattr(cli_main, "app", boom)
        with pytest.raises(SystemExit) as exc_info:
            run()
        return exc_info.value.code

    def test_catalog_error_maps_to_exit_code(self, monkeypatch, capsys):
        code = self._run_raising(monkeypatch, ConfigError("Unknown profile: 'x'"))
        assert code == ExitCode.CONFIG_ERROR
        assert "Error: Unknown profile: 'x'" in capsys.readouterr().err

    def test_network_error_exit_code(self, monkeypatch):
        code = self._run_raising(monkeypatch, NetworkError("cluster unreachable"))
        assert code == ExitCode.NETWORK_ERROR

    def test_unexpected_error_exits_one(self, monkeypatch, capsys):
        code = self._run_raising(monkeypatch, RuntimeError("kaput"))
        assert code == 1
        assert "Error: kaput" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch):
        assert self._run_raising(monkeypatch, KeyboardInterrupt()) == 130
