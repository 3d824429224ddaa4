"""CLI tests using click's CliRunner."""

# pylint: disable=missing-function-docstring

import pytest
import yaml
from click.testing import CliRunner

from tprint.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    return str(tmp_path / "config.yaml")


def test_render_csv(runner, config_file, tmp_path):
    data = tmp_path / "data.csv"
    data.write_text("a,b\nx,yy\n")

    result = runner.invoke(cli, ["--config", config_file, "render", str(data), "--spaces-between", "1"])

    assert result.exit_code == 0
    assert result.output == "a b \nx yy\n"


def test_render_yaml_with_borders(runner, config_file, tmp_path):
    data = tmp_path / "data.yaml"
    data.write_text("columns: [A, Bee]\nrows:\n  - ['1', '22']\n")

    result = runner.invoke(cli, ["--config", config_file, "render", str(data), "--borders"])

    assert result.exit_code == 0
    assert result.output == (
        " =========\n"
        "| A | Bee |\n"
        " =========\n"
        "| 1 | 22  |\n"
        " =========\n"
    )


def test_render_uses_configuration(runner, config_file, tmp_path):
    with open(config_file, "w") as f:
        yaml.safe_dump({"table": {"show_header": False, "spaces_left": 2}}, f)
    data = tmp_path / "data.csv"
    data.write_text("h\nv\n")

    result = runner.invoke(cli, ["--config", config_file, "render", str(data)])

    assert result.exit_code == 0
    assert result.output == "  v\n"


def test_render_from_stdin(runner, config_file):
    result = runner.invoke(
        cli,
        ["--config", config_file, "render", "-", "--format", "csv", "--no-header", "--align", "right"],
        input="head\n1\n22\n",
    )

    assert result.exit_code == 0
    assert result.output == " 1\n22\n"


def test_render_malformed_document_reports_error(runner, config_file, tmp_path):
    data = tmp_path / "bad.yaml"
    data.write_text("rows: []\n")

    result = runner.invoke(cli, ["--config", config_file, "render", str(data)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_render_missing_file(runner, config_file, tmp_path):
    result = runner.invoke(cli, ["--config", config_file, "render", str(tmp_path / "nope.csv")])
    assert result.exit_code == 1


def test_demo(runner, config_file):
    result = runner.invoke(cli, ["--config", config_file, "demo"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2 + 1 + 20 + 1
    assert lines[0].lstrip().startswith("=")
    assert "Align center" in lines[1]
    assert len({len(line) for line in lines[1:] if line.startswith("|")}) == 1


def test_demo_without_borders(runner, config_file):
    result = runner.invoke(cli, ["--config", config_file, "demo", "--no-borders"])

    assert result.exit_code == 0
    assert "=" not in result.output
    assert len(result.output.splitlines()) == 21


def test_config_set_and_show(runner, config_file):
    result = runner.invoke(cli, ["--config", config_file, "config", "set", "table.spaces_between", "4"])
    assert result.exit_code == 0
    assert "Set table.spaces_between = 4" in result.output

    result = runner.invoke(cli, ["--config", config_file, "config", "show"])
    assert result.exit_code == 0
    assert "spaces_between: 4" in result.output


def test_config_set_rejects_unknown_key(runner, config_file):
    result = runner.invoke(cli, ["--config", config_file, "config", "set", "table.colour", "red"])
    assert result.exit_code == 1
    assert "Unknown configuration key" in result.output


def test_render_tsv_splits_on_tabs(runner, config_file, tmp_path):
    data = tmp_path / "data.tsv"
    data.write_text("a\tb\nx\tyy\n")

    result = runner.invoke(cli, ["--config", config_file, "render", str(data), "--spaces-between", "1"])

    assert result.exit_code == 0
    assert result.output == "a b \nx yy\n"


def test_render_custom_delimiter(runner, config_file):
    result = runner.invoke(
        cli,
        ["--config", config_file, "render", "-", "--format", "csv", "--delimiter", ";", "--spaces-between", "1"],
        input="a;b\nx;yy\n",
    )

    assert result.exit_code == 0
    assert result.output == "a b \nx yy\n"


def test_render_rejects_long_delimiter(runner, config_file):
    result = runner.invoke(
        cli,
        ["--config", config_file, "render", "-", "--format", "csv", "--delimiter", "::"],
        input="a::b\n",
    )

    assert result.exit_code == 1
    assert "Delimiter must be a single character" in result.output


def test_config_with_empty_sections(runner, config_file):
    with open(config_file, "w") as f:
        f.write("table:\nlogging:\n")

    result = runner.invoke(cli, ["--config", config_file, "demo"])

    assert result.exit_code == 0
    assert "Align center" in result.output
