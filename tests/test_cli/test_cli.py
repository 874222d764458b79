"""Tests for the unnest CLI commands."""
from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from unnest import __version__
from unnest.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "flatten nested style sheets" in result.output

    def test_cli_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        for name in ("flatten", "check", "inspect"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# flatten command
# ---------------------------------------------------------------------------


class TestFlattenCommand:
    def test_flatten_to_stdout(self) -> None:
        result = CliRunner().invoke(cli, ["flatten", str(FIXTURES / "variants.css")])
        assert result.exit_code == 0
        assert result.output.startswith("&:hover:focus:active {\n  @slot;\n}\n")

    def test_flatten_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(
            cli, ["flatten", str(FIXTURES / "layered.css"), "-o", str(out)]
        )
        assert result.exit_code == 0
        text = out.read_text()
        assert text.startswith(".a {\n  color: red;\n}\n@layer thing {\n")
        assert text.endswith(".a {\n  color: violet;\n}\n")

    def test_indent_option(self) -> None:
        result = CliRunner().invoke(
            cli, ["flatten", "--indent", "4", str(FIXTURES / "flat.css")]
        )
        assert result.exit_code == 0
        assert "    color: red;\n" in result.output

    def test_nesting_token_option(self, tmp_path: Path) -> None:
        src = tmp_path / "in.css"
        src.write_text(".a { %:hover { color: red; } }")
        result = CliRunner().invoke(cli, ["flatten", "--nesting-token", "%", str(src)])
        assert result.exit_code == 0
        assert result.output == ".a:hover {\n  color: red;\n}\n"

    def test_bad_nesting_token(self) -> None:
        result = CliRunner().invoke(
            cli, ["flatten", "--nesting-token", "&&", str(FIXTURES / "flat.css")]
        )
        assert result.exit_code != 0
        assert "single character" in result.output

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["flatten", str(FIXTURES / "broken.css")])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["flatten", "/nonexistent/x.css"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_flat_file(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "flat.css")])
        assert result.exit_code == 0
        assert "OK: flat.css is flat" in result.output

    def test_nested_file(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "layered.css")])
        assert result.exit_code == 1
        assert "layered.css: 2 rule(s) with nested content" in result.output
        assert "  ERROR [rule=.a]: Style rule contains a nested @layer." in result.output
        assert "Flattening resolves 2 of 2 into 7 top-level node(s)" in result.output
        assert "Advisories" not in result.output

    def test_nested_file_with_advisory(self, tmp_path: Path) -> None:
        src = tmp_path / "empty.css"
        src.write_text(".a { .b {} }")
        result = CliRunner().invoke(cli, ["check", str(src)])
        assert result.exit_code == 1
        assert "Advisories after flattening: 1" in result.output
        assert "  INFO [rule=.a .b]: Style rule has an empty body." in result.output

    def test_flat_file_with_advisory(self, tmp_path: Path) -> None:
        src = tmp_path / "empty.css"
        src.write_text(".a {}")
        result = CliRunner().invoke(cli, ["check", str(src)])
        assert result.exit_code == 0
        assert "OK: empty.css is flat" in result.output
        assert "INFO [rule=.a]" in result.output

    def test_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["check", str(FIXTURES / "broken.css")])
        assert result.exit_code == 1
        assert "Parse error" in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_inspect_counts(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(FIXTURES / "layered.css")])
        assert result.exit_code == 0
        assert "File: layered.css" in result.output
        assert "Source:" in result.output
        assert "Flattened:" in result.output
        assert "Rule depth: 3" in result.output
        assert "Rule depth: 1" in result.output
