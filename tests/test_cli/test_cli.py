"""Tests for the cssbuilder CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "selector" in result.output
        assert "rectangle" in result.output
        assert "decode-rectangle" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_rejects_unknown_log_level(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "LOUD", "selector", "--id", "x"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_id_and_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["selector", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_parts_applied_in_css_order(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "selector",
                "--pseudo-class", "focus",
                "--attr", 'href$=".png"',
                "--element", "a",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_pseudo_element(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "--class", "note", "--pseudo-element", "before"])
        assert result.exit_code == 0
        assert result.output.strip() == ".note::before"

    def test_repeated_and_empty_parts(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["selector", "--id", "", "--class", "a", "--class", "a", "--pseudo-class", "hover"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == ".a.a:hover"

    def test_requires_a_part(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector"])
        assert result.exit_code == 2
        assert "At least one selector part" in result.output

    def test_debug_logging_accepted(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "debug", "selector", "--element", "p"])
        assert result.exit_code == 0
        assert "p" in result.output


# ---------------------------------------------------------------------------
# rectangle / decode-rectangle commands
# ---------------------------------------------------------------------------


class TestRectangleCommand:
    def test_prints_json_and_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rectangle", "10", "20"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == '{"width":10.0,"height":20.0}'
        assert lines[1] == "area: 200"

    def test_indent(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rectangle", "2", "3", "--indent", "2"])
        assert result.exit_code == 0
        assert '  "width": 2.0' in result.output
        assert "area: 6" in result.output


class TestDecodeRectangleCommand:
    def test_decodes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", '{"width": 4, "height": 5}'])
        assert result.exit_code == 0
        assert result.output.strip() == "4 x 5, area: 20"

    def test_parse_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", "{not json"])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_wrong_value_count(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", '{"width": 4}'])
        assert result.exit_code == 1
        assert "Cannot build rectangle" in result.output

    def test_decodes_array(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", "[6, 7]"])
        assert result.exit_code == 0
        assert result.output.strip() == "6 x 7, area: 42"

    def test_scalar_rejected(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", "42"])
        assert result.exit_code == 1
        assert "Cannot build rectangle" in result.output
        assert "Cannot spread a JSON int" in result.output

    def test_parse_error_reports_position(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["decode-rectangle", '{"width": 4,'])
        assert result.exit_code == 1
        assert "Invalid JSON at line 1, column 13" in result.output
