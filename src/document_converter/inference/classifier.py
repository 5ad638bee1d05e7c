"""Classify source-native values into the canonical Value variants.

Checks run in a fixed order: null, numeric, boolean, then string. Python's
``bool`` is a subclass of ``int``, so the numeric check explicitly excludes
it; otherwise ``True`` would classify as ``Number(1.0)``.
"""

from __future__ import annotations

import base64
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Optional

import xlrd
from xlrd.biffh import error_text_from_code

from ..domain import FormatError, Value


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def classify(value: Any) -> Value:
    """Classify a plain Python scalar from openpyxl, json or a DB driver."""

    if value is None:
        return Value.null()
    if _is_numeric(value):
        return Value.number(value)
    if isinstance(value, bool):
        return Value.boolean(value)
    return Value.string(_text(value))


def classify_json_value(value: Any, *, table: Optional[str] = None, column: Optional[str] = None) -> Value:
    """Classify a decoded JSON field value; only flat scalars are accepted."""

    if isinstance(value, (list, dict)):
        kind = "array" if isinstance(value, list) else "object"
        raise FormatError(
            f"Nested {kind} values are not supported; fields must be string, number, boolean or null",
            table=table,
            column=column,
        )
    try:
        return classify(value)
    except OverflowError as exc:
        raise FormatError(
            "Number is too large to represent as a double-precision float",
            table=table,
            column=column,
        ) from exc


def classify_cell(value: Any) -> Optional[Value]:
    """Classify an openpyxl cell value; ``None`` means the cell is absent."""

    if value is None:
        return None
    return classify(value)


def classify_xls_cell(cell: xlrd.sheet.Cell, datemode: int = 0) -> Optional[Value]:
    """Classify a legacy .xls cell by its xlrd cell kind."""

    ctype = cell.ctype
    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None
    if ctype == xlrd.XL_CELL_NUMBER:
        return Value.number(cell.value)
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return Value.boolean(cell.value)
    if ctype == xlrd.XL_CELL_DATE:
        try:
            return Value.string(xlrd.xldate.xldate_as_datetime(cell.value, datemode).isoformat())
        except (xlrd.xldate.XLDateError, ValueError, OverflowError):
            return Value.number(cell.value)
    if ctype == xlrd.XL_CELL_ERROR:
        return Value.string(error_text_from_code.get(cell.value, f"#ERR{cell.value}"))
    return Value.string(_text(cell.value))


def _text(value: Any) -> str:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return str(value)


__all__ = ["classify", "classify_cell", "classify_json_value", "classify_xls_cell"]
