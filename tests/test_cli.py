"""Tests for the root empdir CLI."""

import pytest
from click.testing import CliRunner

from empdir import __version__
from empdir.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "empdir" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/empdir-test.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["run", "shell"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
def test_verbose_logs_to_stderr(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "run", "Add Jason to Accounts"])
    assert result.exit_code == 0
    assert "Batch finished" in result.stderr
    assert '"applied": 1' in result.stderr
    assert "Batch" not in result.stdout


class TestPublicApi:
    def test_top_level_exports(self) -> None:
        from empdir import Directory, StructuralParseError

        directory = Directory()
        with pytest.raises(StructuralParseError):
            directory.apply_command("Add Jason Accounts")
        assert directory.list_all() == {}


@pytest.mark.usefixtures("_isolated_cwd")
def test_env_var_enables_json(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPDIR_JSON_OUTPUT", "true")
    result = cli_runner.invoke(cli, ["run", "Add Jason to Accounts"])
    assert result.exit_code == 0
    assert result.stdout.lstrip().startswith("[")


@pytest.mark.usefixtures("_isolated_cwd")
class TestBareStatement:
    def test_routes_to_run(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "Add", "Jason", "to", "Accounts"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["OK: apply_batch", "Accounts: jason"]

    def test_keyword_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "reset", "department", "of", "Accounts"])
        assert result.exit_code == 0
        assert "No department 'Accounts'" in result.stderr

    def test_malformed_statement_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "Add", "Jason", "Accounts"])
        assert result.exit_code == 1
        assert "Invalid statement" in result.stderr

    def test_unknown_word_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["Hire", "Jason", "to", "Accounts"])
        assert result.exit_code == 2
        assert "No such command" in result.stderr
