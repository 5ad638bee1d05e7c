from document_converter.domain import ConversionMode
from document_converter.pipeline import discover_sources


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"")


def test_lists_matching_files_sorted_by_name(tmp_path):
    _touch(tmp_path, "b.xlsx", "A.XLS", "c.xlsm", "d.csv", "people.json", "store.sqlite")
    (tmp_path / "folder.xlsx").mkdir()

    names = [path.name for path in discover_sources(tmp_path, ConversionMode.EXCEL_TO_JSON)]

    assert names == ["A.XLS", "b.xlsx", "c.xlsm"]


def test_each_mode_has_its_own_extensions(tmp_path):
    _touch(tmp_path, "a.db", "b.sqlite3", "c.json", "d.xlsx")

    relational = [path.name for path in discover_sources(tmp_path, ConversionMode.RELATIONAL_TO_JSON)]
    json_files = [path.name for path in discover_sources(tmp_path, ConversionMode.JSON_TO_RELATIONAL)]

    assert relational == ["a.db", "b.sqlite3"]
    assert json_files == ["c.json"]
    assert discover_sources(tmp_path, ConversionMode.JSON_TO_EXCEL) == discover_sources(
        tmp_path, ConversionMode.JSON_TO_RELATIONAL
    )


def test_missing_directory_is_empty(tmp_path):
    assert discover_sources(tmp_path / "nope", ConversionMode.JSON_TO_EXCEL) == []
