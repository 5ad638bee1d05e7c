"""Read the first sheet of a workbook into a RowSet."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import xlrd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..domain import Record, RowSet, SchemaError, SourceUnavailable, Value
from ..inference import classify_cell, classify_xls_cell

logger = logging.getLogger(__name__)

Cells = List[Optional[Value]]


class SpreadsheetReader:
    """Reads ``.xlsx``/``.xlsm`` through openpyxl and ``.xls`` through xlrd.

    Row 0 is the header. Every later row becomes a record holding the cells
    that are present; a missing cell leaves its column absent rather than
    null. Trailing rows without any cell are ignored.
    """

    def read(self, path: str | Path) -> RowSet:
        source = Path(path)
        if not source.is_file():
            raise SourceUnavailable("Workbook not found", path=str(source))

        if source.suffix.lower() == ".xls":
            header, body = self._load_xls(source)
        else:
            header, body = self._load_xlsx(source)

        rowset = self._build(header, body, source)
        logger.info(f"Read {len(rowset)} rows x {len(rowset.columns)} columns from {source.name}")
        return rowset

    # ------------------------------------------------------------------
    # Workbook formats
    # ------------------------------------------------------------------

    def _load_xlsx(self, source: Path) -> Tuple[List[Any], List[Cells]]:
        try:
            workbook = load_workbook(source, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
            raise SourceUnavailable(f"Cannot open workbook: {exc}", path=str(source)) from exc

        try:
            if not workbook.worksheets:
                return [], []
            sheet = workbook.worksheets[0]
            logger.debug(f"Reading sheet '{sheet.title}' of {source.name}")
            header: List[Any] = []
            body: List[Cells] = []
            for index, row in enumerate(sheet.iter_rows(values_only=True)):
                if index == 0:
                    header = list(row)
                else:
                    body.append([classify_cell(value) for value in row])
            return header, body
        finally:
            workbook.close()

    def _load_xls(self, source: Path) -> Tuple[List[Any], List[Cells]]:
        try:
            book = xlrd.open_workbook(str(source), on_demand=True)
        except (xlrd.XLRDError, OSError, EOFError) as exc:
            raise SourceUnavailable(f"Cannot open workbook: {exc}", path=str(source)) from exc

        try:
            if book.nsheets == 0:
                return [], []
            sheet = book.sheet_by_index(0)
            logger.debug(f"Reading sheet '{sheet.name}' of {source.name}")
            header: List[Any] = []
            body: List[Cells] = []
            for index in range(sheet.nrows):
                cells = sheet.row(index)
                if index == 0:
                    header = [cell.value for cell in cells]
                else:
                    body.append([classify_xls_cell(cell, book.datemode) for cell in cells])
            return header, body
        finally:
            book.release_resources()

    # ------------------------------------------------------------------
    # Row set assembly
    # ------------------------------------------------------------------

    def _build(self, header: Sequence[Any], body: List[Cells], source: Path) -> RowSet:
        while body and all(cell is None for cell in body[-1]):
            body.pop()

        columns = self._header_columns(header, source)
        if not columns:
            if body:
                raise SchemaError("Header row is empty but the sheet holds data", path=str(source))
            logger.warning(f"Workbook {source.name} has no header row; producing an empty row set")
            return RowSet()

        rowset = RowSet(columns=columns)
        for cells in body:
            record: Record = {}
            for index, column in enumerate(columns):
                value = cells[index] if index < len(cells) else None
                if value is not None:
                    record[column] = value
            rowset.append(record)
        return rowset

    def _header_columns(self, header: Sequence[Any], source: Path) -> List[str]:
        names = [_header_text(value) for value in header]
        while names and not names[-1]:
            names.pop()

        columns: List[str] = []
        for position, name in enumerate(names, start=1):
            if not name:
                raise SchemaError(f"Header cell {position} is empty", path=str(source))
            if name in columns:
                raise SchemaError(f"Duplicate header at position {position}", path=str(source), column=name)
            columns.append(name)
        return columns


def _header_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def read_spreadsheet(path: str | Path) -> RowSet:
    """Convenience wrapper around :class:`SpreadsheetReader`."""

    return SpreadsheetReader().read(path)


__all__ = ["SpreadsheetReader", "read_spreadsheet"]
