import json

import pytest
from typer.testing import CliRunner

from document_converter.cli import app

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path, make_workbook):
    input_dir = tmp_path / "assets"
    input_dir.mkdir()
    make_workbook(input_dir / "people.xlsx", [["name", "age"], ["Ada", 36]])
    (input_dir / "rows.json").write_text('[{"a": 1}]', encoding="utf-8")

    config_path = tmp_path / "converter.yaml"
    config_path.write_text("paths:\n  input: assets\n  output: results\n", encoding="utf-8")
    return tmp_path, config_path


def test_convert_command(workspace):
    root, config_path = workspace

    result = runner.invoke(app, ["--config", str(config_path), "convert", "excel-to-json", "people.xlsx", "people.json"])

    assert result.exit_code == 0, result.output
    assert "Conversion completed successfully!" in result.output
    data = json.loads((root / "results" / "people.json").read_text(encoding="utf-8"))
    assert data == [{"name": "Ada", "age": 36.0}]


def test_convert_failure_exits_with_error(workspace):
    _, config_path = workspace

    result = runner.invoke(app, ["--config", str(config_path), "convert", "excel-to-json", "ghost.xlsx", "ghost.json"])

    assert result.exit_code == 1
    assert "SOURCE_UNAVAILABLE" in result.output


def test_config_from_environment(workspace):
    root, config_path = workspace

    result = runner.invoke(
        app,
        ["convert", "json-to-relational", "rows.json", "rows.db"],
        env={"DOCCONV_CONFIG": str(config_path)},
    )

    assert result.exit_code == 0, result.output
    assert (root / "results" / "rows.db").exists()


def test_unknown_mode_is_a_usage_error(workspace):
    _, config_path = workspace
    result = runner.invoke(app, ["--config", str(config_path), "convert", "csv-to-json", "a", "b"])
    assert result.exit_code == 2


def test_broken_config_exits(tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("json: [1, 2]\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "list", "json-to-excel"])

    assert result.exit_code == 1
    assert "Cannot load configuration" in result.output


def test_list_command(workspace):
    _, config_path = workspace

    result = runner.invoke(app, ["--config", str(config_path), "list", "excel-to-json"])

    assert result.exit_code == 0
    assert "1. people.xlsx" in result.output
    assert "rows.json" not in result.output


def test_menu_runs_conversion_with_default_output_name(workspace):
    root, config_path = workspace

    result = runner.invoke(app, ["--config", str(config_path), "menu"], input="1\n1\n\n5\n")

    assert result.exit_code == 0, result.output
    assert "1. Convert Excel to JSON" in result.output
    assert "Conversion completed successfully!" in result.output
    assert "Goodbye!" in result.output
    assert (root / "results" / "people.json").exists()


def test_menu_reports_invalid_choices_and_keeps_looping(workspace):
    _, config_path = workspace

    result = runner.invoke(app, ["--config", str(config_path), "menu"], input="9\n2\n3\n7\n5\n")

    assert result.exit_code == 0, result.output
    assert "Invalid choice!" in result.output
    assert "No compatible files found" in result.output
    assert "Invalid file selection!" in result.output
    assert "Goodbye!" in result.output


def test_menu_reports_conversion_errors(workspace):
    root, config_path = workspace
    (root / "assets" / "rows.json").write_text('"not rows"', encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "menu"], input="3\n1\nrows.xlsx\n5\n")

    assert result.exit_code == 0
    assert "Error during conversion: FORMAT_ERROR" in result.output
    assert not (root / "results" / "rows.xlsx").exists()


def test_menu_requires_input_directory(tmp_path):
    config_path = tmp_path / "converter.yaml"
    config_path.write_text("paths:\n  input: missing\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path), "menu"], input="5\n")

    assert result.exit_code == 1
    assert "Input directory not found" in result.output
