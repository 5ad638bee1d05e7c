import pytest

from document_converter.config import CONFIG_ENV_VAR, load_config
from document_converter.domain import ObjectRootPolicy


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.input_directory == (tmp_path / "assets").resolve()
    assert config.output_directory == (tmp_path / "results").resolve()
    assert config.json.indent == 2
    assert config.spreadsheet.sheet_name == "Data"
    assert config.relational.default_table == "JsonData"
    assert not config.relational.strict_types
    assert config.object_root_policy is ObjectRootPolicy.REJECT


def test_yaml_file_overrides(tmp_path):
    config_path = tmp_path / "conf" / "converter.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        """
paths:
  input: in
  output: /tmp/docconv-out
json:
  indent: 4
spreadsheet:
  sheet_name: Export
  max_column_width: 30
relational:
  default_table: Imported
  strict_types: true
json_to_excel:
  object_root: first-table
""",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.input_directory == (tmp_path / "conf" / "in").resolve()
    assert str(config.output_directory).endswith("docconv-out")
    assert config.json.indent == 4
    assert config.spreadsheet.sheet_name == "Export"
    assert config.spreadsheet.max_column_width == 30
    assert config.relational.default_table == "Imported"
    assert config.relational.strict_types
    assert config.object_root_policy is ObjectRootPolicy.FIRST_TABLE


def test_environment_variable_names_the_file(tmp_path, monkeypatch):
    config_path = tmp_path / "env.yaml"
    config_path.write_text("json:\n  indent: 0\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))

    config = load_config()

    assert config.json.indent == 0
    assert config.input_directory == (tmp_path / "assets").resolve()


def test_empty_file_gives_defaults(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")
    assert load_config(config_path).json.indent == 2


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "json: 3\n",
        "json:\n  indent: wide\n",
        "spreadsheet:\n  max_column_width: 0\n",
        "json_to_excel:\n  object_root: merge\n",
    ],
)
def test_malformed_config_raises_value_error(tmp_path, content):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_path)


def test_missing_config_file(tmp_path):
    with pytest.raises(OSError):
        load_config(tmp_path / "absent.yaml")
