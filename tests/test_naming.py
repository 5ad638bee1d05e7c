import pytest

from document_converter.domain import SchemaError
from document_converter.sql import sanitize_identifier, sqlite_url, validate_columns, validate_identifier


@pytest.mark.parametrize("name", ["id", "_hidden", "First Name", "col_2", "a" * 64])
def test_valid_identifiers_pass_unchanged(name):
    assert validate_identifier(name) == name


@pytest.mark.parametrize(
    "name",
    ["", "1st", "unit-price", " padded", "trailing ", "sqlite_master", "SQLITE_seq", "a" * 65, "naïve"],
)
def test_invalid_identifiers_are_rejected(name):
    with pytest.raises(SchemaError):
        validate_identifier(name, table="Items")


def test_rejection_carries_suggestion_and_location():
    with pytest.raises(SchemaError) as excinfo:
        validate_identifier("1st value", table="Items")
    assert excinfo.value.table == "Items"
    assert excinfo.value.column == "1st value"
    assert excinfo.value.suggestion == "c_1st_value"


def test_table_rejection_names_the_table():
    with pytest.raises(SchemaError) as excinfo:
        validate_identifier("my.table", kind="table")
    assert excinfo.value.table == "my.table"
    assert excinfo.value.column is None
    assert excinfo.value.suggestion == "my_table"


def test_sanitize_identifier():
    assert sanitize_identifier("Unit Price") == "Unit_Price"
    assert sanitize_identifier("sqlite_stat") == "t_sqlite_stat"
    assert sanitize_identifier("***") == "column"
    assert len(sanitize_identifier("x" * 100)) == 64


def test_duplicate_columns_ignore_case():
    assert validate_columns(["Id", "Name"], table="T") == ["Id", "Name"]
    with pytest.raises(SchemaError) as excinfo:
        validate_columns(["Id", "name", "ID"], table="T")
    assert excinfo.value.column == "ID"


def test_sqlite_url_points_at_file(tmp_path):
    url = sqlite_url(tmp_path / "my data.db")
    assert url.drivername == "sqlite"
    assert url.database == str(tmp_path / "my data.db")
