"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output
        assert "build" in result.output
        assert "area" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_repeated_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=main", "class=container", "class=editable"])
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_order_violation(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "id=x", "element=div"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "order" in result.output

    def test_duplicate(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "pseudo-element=after", "pseudo-element=before"])
        assert result.exit_code == 1
        assert "at most once" in result.output

    def test_malformed_part(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_requires_parts(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code != 0

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "build", "element=p"])
        assert result.exit_code == 0
        assert "p" in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":10,"height":20}'])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_invalid_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "{"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_not_an_object(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", "[1,2]"])
        assert result.exit_code == 1
        assert "cannot bind" in result.output

    def test_missing_field(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":10}'])
        assert result.exit_code == 1
        assert "missing rectangle field" in result.output

    def test_non_numeric_fields(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":"a","height":"b"}'])
        assert result.exit_code == 1
        assert "width and height must be numbers" in result.output

    def test_string_width_is_rejected(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":"ab","height":3}'])
        assert result.exit_code == 1
        assert "ababab" not in result.output
        assert "width and height must be numbers" in result.output

    def test_boolean_field_is_rejected(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":true,"height":3}'])
        assert result.exit_code == 1
        assert "width and height must be numbers" in result.output

    def test_float_fields(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["area", '{"width":1.5,"height":2}'])
        assert result.exit_code == 0
        assert result.output.strip() == "3.0"
