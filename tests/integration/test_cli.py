"""Integration tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from structured_id.cli.main import cli
from structured_id.models.config import resolve_config
from structured_id.services.codec import validate_id


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


class TestGenerateCommand:
    """Tests for sid generate."""

    def test_generate_default(self, runner: CliRunner, isolated_home: Path) -> None:
        """generate should print one 16-digit ID by default."""
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0
        line = result.output.strip()
        assert len(line) == 16
        assert line.isdigit()

    def test_generate_formatted_mod36(self, runner: CliRunner, isolated_home: Path) -> None:
        """generate should format with the separator and produce valid IDs."""
        result = runner.invoke(
            cli,
            ["-c", "alphanumeric", "-a", "mod36", "--separator", "-", "--seed", "1", "generate", "-n", "3"],
        )

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 3
        config = resolve_config(charset="alphanumeric", algorithm="mod36")
        for line in lines:
            assert line.count("-") == 3
            assert validate_id(line.replace("-", ""), config)

    def test_generate_raw(self, runner: CliRunner, isolated_home: Path) -> None:
        """--raw should skip the separator."""
        result = runner.invoke(cli, ["--separator", "-", "generate", "--raw"])

        assert result.exit_code == 0
        assert "-" not in result.output.strip()

    def test_generate_seed_is_reproducible(self, runner: CliRunner, isolated_home: Path) -> None:
        """The same seed should give the same IDs."""
        first = runner.invoke(cli, ["--seed", "9", "generate", "-n", "2"])
        second = runner.invoke(cli, ["--seed", "9", "generate", "-n", "2"])

        assert first.output == second.output

    def test_generate_incompatible_algorithm(self, runner: CliRunner, isolated_home: Path) -> None:
        """Incompatible charset/algorithm should fail."""
        result = runner.invoke(cli, ["-c", "numeric", "-a", "mod36", "generate"])

        assert result.exit_code != 0
        assert "not valid for charset" in result.output

    def test_generate_invalid_shape(self, runner: CliRunner, isolated_home: Path) -> None:
        """Zero groups should fail."""
        result = runner.invoke(cli, ["-g", "0", "generate"])

        assert result.exit_code != 0
        assert "Invalid shape" in result.output


class TestValidateCommand:
    """Tests for sid validate."""

    def test_valid(self, runner: CliRunner, isolated_home: Path) -> None:
        """A valid Luhn number should exit 0."""
        result = runner.invoke(cli, ["-a", "luhn", "-g", "1", "-s", "11", "validate", "79927398713"])

        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_invalid(self, runner: CliRunner, isolated_home: Path) -> None:
        """A wrong check digit should exit 1."""
        result = runner.invoke(cli, ["-a", "luhn", "-g", "1", "-s", "11", "validate", "79927398710"])

        assert result.exit_code == 1
        assert "Invalid" in result.output

    def test_display_form(self, runner: CliRunner, isolated_home: Path) -> None:
        """--display should strip separators before checking."""
        result = runner.invoke(
            cli,
            ["-a", "luhn", "-g", "2", "-s", "3", "--separator", " ", "validate", "-d", "123 455"],
        )

        assert result.exit_code == 0

    def test_display_wrong_shape(self, runner: CliRunner, isolated_home: Path) -> None:
        """A display form of the wrong shape is invalid, not a crash."""
        result = runner.invoke(cli, ["--separator", "-", "validate", "-d", "1234-5678"])

        assert result.exit_code == 1
        assert "Invalid" in result.output


class TestFormatAndParseCommands:
    """Tests for sid format and sid parse."""

    def test_format(self, runner: CliRunner, isolated_home: Path) -> None:
        """format should insert the separator."""
        result = runner.invoke(cli, ["--separator", "-", "format", "1234567890123456"])

        assert result.exit_code == 0
        assert result.output.strip() == "1234-5678-9012-3456"

    def test_format_wrong_length(self, runner: CliRunner, isolated_home: Path) -> None:
        """format should refuse IDs of the wrong length."""
        result = runner.invoke(cli, ["--separator", "-", "format", "123"])

        assert result.exit_code != 0
        assert "Cannot format" in result.output

    def test_parse(self, runner: CliRunner, isolated_home: Path) -> None:
        """parse should remove the separator."""
        result = runner.invoke(cli, ["--separator", "-", "parse", "1234-5678-9012-3456"])

        assert result.exit_code == 0
        assert result.output.strip() == "1234567890123456"


class TestInfoAndConfigCommands:
    """Tests for sid info and sid config."""

    def test_info(self, runner: CliRunner, isolated_home: Path) -> None:
        """info should show length and entropy."""
        result = runner.invoke(cli, ["-c", "alphanumeric", "-a", "mod36", "info"])

        assert result.exit_code == 0
        assert "16" in result.output
        assert "78 bits" in result.output

    def test_config_init_then_used(self, runner: CliRunner, isolated_home: Path) -> None:
        """Saved defaults should apply to later commands."""
        init = runner.invoke(
            cli, ["-c", "alphanumeric", "-a", "mod36", "-g", "2", "--separator", "-", "config", "init"]
        )
        assert init.exit_code == 0
        assert (Path.cwd() / ".structured-id.yaml").is_file()

        result = runner.invoke(cli, ["generate"])
        assert result.exit_code == 0
        line = result.output.strip().splitlines()[-1]
        assert len(line) == 9
        assert line[4] == "-"

    def test_config_init_refuses_overwrite(self, runner: CliRunner, isolated_home: Path) -> None:
        """config init should not clobber an existing file without --force."""
        assert runner.invoke(cli, ["config", "init"]).exit_code == 0
        assert runner.invoke(cli, ["config", "init"]).exit_code != 0
        assert runner.invoke(cli, ["config", "init", "--force"]).exit_code == 0

    def test_config_show(self, runner: CliRunner, isolated_home: Path) -> None:
        """config show should list effective settings."""
        result = runner.invoke(cli, ["-g", "3", "config", "show"])

        assert result.exit_code == 0
        assert "groupSize" in result.output
        assert "built-in defaults" in result.output

    def test_config_show_key(self, runner: CliRunner, isolated_home: Path) -> None:
        """config show KEY should print a single value."""
        result = runner.invoke(cli, ["-g", "3", "config", "show", "groups"])

        assert result.exit_code == 0
        assert "groups: 3" in result.output

    def test_bad_settings_file(self, runner: CliRunner, isolated_home: Path) -> None:
        """A malformed defaults file should be reported."""
        (Path.cwd() / ".structured-id.yaml").write_text("code:\n  colour: blue\n", encoding="utf-8")
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code != 0
        assert "Unknown settings" in result.output
