"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "area" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_selector(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_repeated_classes(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "id=main", "class=container", "class=editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_value_may_contain_equals(self) -> None:
        result = CliRunner().invoke(cli, ["build", "attr=type=text"])
        assert result.exit_code == 0
        assert result.output.strip() == "[type=text]"

    def test_out_of_order_fails(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=x", "id=main"])
        assert result.exit_code == 1
        assert "Selector error" in result.output
        assert "arranged in the following order" in result.output

    def test_duplicate_element_fails(self) -> None:
        result = CliRunner().invoke(cli, ["build", "element=div", "element=p"])
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.output

    def test_unknown_kind_is_usage_error(self) -> None:
        result = CliRunner().invoke(cli, ["build", "tag=div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_parts_required(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "build", "element=div"])
        assert result.exit_code == 0
        assert "div" in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area_from_dimensions(self) -> None:
        result = CliRunner().invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_area_fractional(self) -> None:
        result = CliRunner().invoke(cli, ["area", "2.5", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "7.5"

    def test_area_from_json(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", '{"width":10, "height":20}'])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_to_json(self) -> None:
        result = CliRunner().invoke(cli, ["area", "3", "4", "--to-json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":3.0,"height":4.0}'

    def test_json_array_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", "[1,2]"])
        assert result.exit_code == 1
        assert "Invalid rectangle JSON" in result.output

    def test_json_missing_fields(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", '{"width":10}'])
        assert result.exit_code == 1
        assert "needs numeric width and height" in result.output

    def test_json_string_width_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", '{"width":"a","height":3}'])
        assert result.exit_code == 1
        assert "needs numeric width and height" in result.output

    def test_json_list_width_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", '{"width":[1],"height":2}'])
        assert result.exit_code == 1
        assert "needs numeric width and height" in result.output

    def test_json_bool_height_rejected(self) -> None:
        result = CliRunner().invoke(cli, ["area", "--json", '{"width":2,"height":true}'])
        assert result.exit_code == 1
        assert "needs numeric width and height" in result.output

    def test_json_and_dimensions_together(self) -> None:
        result = CliRunner().invoke(
            cli, ["area", "10", "20", "--json", '{"width":1, "height":2}']
        )
        assert result.exit_code == 2
        assert "not both" in result.output

    def test_missing_arguments(self) -> None:
        result = CliRunner().invoke(cli, ["area"])
        assert result.exit_code == 2
