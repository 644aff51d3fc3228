"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from exprcalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory with no config overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EXPRCALC_CONFIG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return tmp_path


class TestEvalCommand:
    def test_prints_integer_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "14"

    def test_joins_multiple_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(2", "+", "3)", "*", "4"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "20"

    def test_leading_minus_after_double_dash(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "--5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_decimal_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "7 / 2"])
        assert result.stdout.strip() == "3.5"

    def test_failure_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "10 / 0"])
        assert result.exit_code == 1
        assert result.stdout.strip() == "Error: Division by zero"

    def test_lexer_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 @ 3"])
        assert result.exit_code == 1
        assert "Unexpected character '@' at position 2" in result.stdout


class TestReplCommand:
    def test_session(self, cli_runner: CliRunner) -> None:
        session = "2 + 3 * 4\n\nhelp\n10 / 0\n(2 + 3\n--5\nexit\n1 + 1\n"
        result = cli_runner.invoke(app, ["repl"], input=session)
        assert result.exit_code == 0
        out = result.stdout
        assert "Expression Calculator" in out
        assert "14" in out
        assert "Commands:" in out
        assert "Error: Division by zero" in out
        assert "Error: Mismatched parentheses: missing ')' for '(' at position 0" in out
        assert "Goodbye!" in out
        # Nothing after 'exit' is evaluated
        assert "> 2\n" not in out

    def test_commands_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="HELP\nQuit\n")
        assert result.exit_code == 0
        assert "Commands:" in result.stdout
        assert "Goodbye!" in result.stdout

    def test_clear_keeps_session_alive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="clear\n6 * 7\nexit\n")
        assert result.exit_code == 0
        assert "42" in result.stdout

    def test_end_of_input_exits(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1 + 1\n")
        assert result.exit_code == 0
        assert "> 2\n" in result.stdout
        assert "Goodbye!" in result.stdout

    def test_config_prompt_and_banner(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        config = isolated_cwd / "custom.toml"
        config.write_text('[repl]\nprompt = "calc> "\nbanner = false\n')
        result = cli_runner.invoke(app, ["--config", str(config), "repl"], input="exit\n")
        assert result.exit_code == 0
        assert "calc> " in result.stdout
        assert "Expression Calculator" not in result.stdout

    def test_config_from_working_directory(
        self, cli_runner: CliRunner, isolated_cwd: Path
    ) -> None:
        (isolated_cwd / "exprcalc.toml").write_text("[repl]\nbanner = false\n")
        result = cli_runner.invoke(app, ["repl"], input="exit\n")
        assert "Expression Calculator" not in result.stdout


class TestCalcCommand:
    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "add", "5", "3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "8"

    def test_alias(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "power", "2", "10"])
        assert result.stdout.strip() == "1024"

    def test_sqrt(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "sqrt", "2"])
        assert result.stdout.strip() == "1.4142135623730951"

    def test_negative_operands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "sub", "3", "-2"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_negative_operand_to_sqrt(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "sqrt", "-4"])
        assert result.exit_code == 1
        assert "Cannot calculate square root of a negative number." in result.stdout

    def test_divide_by_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "div", "1", "0"])
        assert result.exit_code == 1
        assert result.stdout.strip() == "Error: Cannot divide by zero."

    def test_wrong_arity(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "sqrt", "1", "2"])
        assert result.exit_code == 1
        assert "Usage: sqrt <n>" in result.stdout

    def test_not_a_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "add", "five", "3"])
        assert result.exit_code == 1
        assert "Invalid number format" in result.stdout

    def test_unknown_operation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["calc", "frobnicate", "1"])
        assert result.exit_code == 1
        assert "Unknown command 'frobnicate'" in result.stdout


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "exprcalc" in result.stdout

    def test_bad_config_exits_2(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "exprcalc.toml").write_text("[logging]\nlevel = \"LOUD\"\n")
        result = cli_runner.invoke(app, ["eval", "1"])
        assert result.exit_code == 2
        assert "Configuration error" in result.stdout
