"""Render a RowSet into a single-sheet workbook."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from ..domain import DestinationUnavailable, FormatError, RowSet, Value, ValueKind
from .files import atomic_output

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Data"
DEFAULT_MAX_COLUMN_WIDTH = 60
_WIDTH_PADDING = 2


class SpreadsheetWriter:
    """Writes the header row in schema order, then one row per record.

    Number becomes a numeric cell, Boolean a boolean cell, String text and
    Null empty text. Absent values leave the cell empty. Text cells are
    always stored as strings, so a value such as "=1+1" is never turned into
    a formula.
    """

    def __init__(self, sheet_name: str = DEFAULT_SHEET_NAME, max_column_width: int = DEFAULT_MAX_COLUMN_WIDTH):
        self.sheet_name = sheet_name
        self.max_column_width = max_column_width

    def write(self, rows: RowSet, path: str | Path) -> Path:
        destination = Path(path)
        workbook = Workbook()
        try:
            sheet = workbook.active
            sheet.title = self.sheet_name

            widths: Dict[int, int] = {}
            row_index = 1
            if rows.columns:
                self._write_row(sheet, row_index, rows.columns, list(rows.columns), widths)
                row_index += 1
            for record in rows.records:
                values = [_cell_value(record.get(column)) for column in rows.columns]
                self._write_row(sheet, row_index, rows.columns, values, widths)
                row_index += 1
            self._autosize(sheet, widths)

            with atomic_output(destination) as temp_path:
                try:
                    workbook.save(temp_path)
                except OSError as exc:
                    raise DestinationUnavailable(f"Cannot save workbook: {exc}", path=str(destination)) from exc
        finally:
            workbook.close()

        logger.info(f"Wrote {len(rows)} rows x {len(rows.columns)} columns to {destination.name}")
        return destination

    def _write_row(self, sheet, row_index: int, columns: List[str], values: List[Any], widths: Dict[int, int]) -> None:
        for index, (column, value) in enumerate(zip(columns, values), start=1):
            if value is None:
                continue
            cell = sheet.cell(row=row_index, column=index)
            try:
                cell.value = value
            except IllegalCharacterError as exc:
                raise FormatError(
                    f"Text contains control characters that workbooks cannot store (row {row_index})",
                    column=column,
                ) from exc
            if isinstance(value, str):
                cell.data_type = "s"
            widths[index] = max(widths.get(index, 0), len(_display_text(value)))

    def _autosize(self, sheet, widths: Dict[int, int]) -> None:
        for index, width in widths.items():
            letter = get_column_letter(index)
            sheet.column_dimensions[letter].width = min(width + _WIDTH_PADDING, self.max_column_width)


def _cell_value(value: Optional[Value]) -> Any:
    if value is None:
        return None
    if value.kind is ValueKind.NULL:
        return ""
    return value.to_python()


def _display_text(value: Any) -> str:
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def write_spreadsheet(rows: RowSet, path: str | Path, sheet_name: str = DEFAULT_SHEET_NAME) -> Path:
    """Convenience wrapper around :class:`SpreadsheetWriter`."""

    return SpreadsheetWriter(sheet_name=sheet_name).write(rows, path)


__all__ = ["DEFAULT_SHEET_NAME", "SpreadsheetWriter", "write_spreadsheet"]
