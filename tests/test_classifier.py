from datetime import date, datetime
from decimal import Decimal

import pytest
import xlrd
from xlrd.sheet import Cell

from document_converter.domain import NULL, FormatError, Value, ValueKind
from document_converter.inference import classify, classify_cell, classify_json_value, classify_xls_cell


def test_none_is_null():
    assert classify(None) is NULL
    assert classify(None).is_null


def test_numeric_values_become_double():
    assert classify(3.0) == Value(ValueKind.NUMBER, 3.0)
    assert classify(7) == Value(ValueKind.NUMBER, 7.0)
    assert classify(Decimal("1.25")).payload == pytest.approx(1.25)


def test_bool_is_not_treated_as_number():
    assert classify(True) == Value(ValueKind.BOOLEAN, True)
    assert classify(False).kind is ValueKind.BOOLEAN


def test_numeric_looking_text_stays_string():
    assert classify("3.0") == Value(ValueKind.STRING, "3.0")
    assert classify("true").kind is ValueKind.STRING


def test_dates_and_bytes_render_as_text():
    assert classify(datetime(2024, 1, 2, 3, 4, 5)).payload == "2024-01-02T03:04:05"
    assert classify(date(2024, 1, 2)).payload == "2024-01-02"
    assert classify(b"\x00\x01").payload == "AAE="


def test_json_nested_values_are_rejected():
    with pytest.raises(FormatError) as excinfo:
        classify_json_value({"x": 1}, table="T", column="c")
    assert excinfo.value.table == "T"
    assert excinfo.value.column == "c"

    with pytest.raises(FormatError):
        classify_json_value([1, 2])


def test_json_integer_beyond_double_range_is_format_error():
    with pytest.raises(FormatError) as excinfo:
        classify_json_value(10**400, table="T", column="big")
    assert excinfo.value.table == "T"
    assert excinfo.value.column == "big"


def test_absent_openpyxl_cell():
    assert classify_cell(None) is None
    assert classify_cell(0) == Value.number(0)


def test_xls_cells():
    assert classify_xls_cell(Cell(xlrd.XL_CELL_EMPTY, "")) is None
    assert classify_xls_cell(Cell(xlrd.XL_CELL_BLANK, "")) is None
    assert classify_xls_cell(Cell(xlrd.XL_CELL_NUMBER, 3.0)) == Value.number(3.0)
    assert classify_xls_cell(Cell(xlrd.XL_CELL_BOOLEAN, 1)) == Value.boolean(True)
    assert classify_xls_cell(Cell(xlrd.XL_CELL_TEXT, "abc")) == Value.string("abc")
    assert classify_xls_cell(Cell(xlrd.XL_CELL_ERROR, 0x07)) == Value.string("#DIV/0!")
    assert classify_xls_cell(Cell(xlrd.XL_CELL_DATE, 45292.0), datemode=0) == Value.string("2024-01-01T00:00:00")


def test_as_text():
    assert Value.boolean(True).as_text() == "true"
    assert Value.boolean(False).as_text() == "false"
    assert Value.number(2).as_text() == "2.0"
    assert Value.string("x").as_text() == "x"
    assert NULL.as_text() is None
