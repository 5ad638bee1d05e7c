from pathlib import Path

import pytest
from openpyxl import Workbook
from sqlalchemy import create_engine

from document_converter.config import Config


@pytest.fixture
def config(tmp_path):
    input_dir = tmp_path / "assets"
    input_dir.mkdir()
    return Config(input_directory=input_dir, output_directory=tmp_path / "results")


@pytest.fixture
def make_workbook():
    def _make(path: Path, rows, title: str = "Sheet1") -> Path:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = title
        for row in rows:
            sheet.append(row)
        workbook.save(path)
        return path

    return _make


@pytest.fixture
def make_database():
    """Create a SQLite file from raw DDL/DML statements."""

    def _make(path: Path, *statements: str) -> Path:
        engine = create_engine(f"sqlite:///{path}")
        try:
            with engine.begin() as conn:
                for statement in statements:
                    conn.exec_driver_sql(statement)
        finally:
            engine.dispose()
        return path

    return _make
