"""Enumerations shared by the conversion pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from sqlalchemy import Boolean, Double, Text
from sqlalchemy.types import TypeEngine


class ValueKind(str, Enum):
    """Canonical semantic type of a single data value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class ConversionMode(str, Enum):
    """Supported conversion directions."""

    EXCEL_TO_JSON = "excel-to-json"
    RELATIONAL_TO_JSON = "relational-to-json"
    JSON_TO_EXCEL = "json-to-excel"
    JSON_TO_RELATIONAL = "json-to-relational"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def source_extensions(self) -> Tuple[str, ...]:
        """File extensions accepted as input for this mode (lower case)."""

        if self is ConversionMode.EXCEL_TO_JSON:
            return SPREADSHEET_EXTENSIONS
        if self is ConversionMode.RELATIONAL_TO_JSON:
            return RELATIONAL_EXTENSIONS
        return JSON_EXTENSIONS

    @property
    def output_extension(self) -> str:
        if self is ConversionMode.JSON_TO_EXCEL:
            return ".xlsx"
        if self is ConversionMode.JSON_TO_RELATIONAL:
            return ".db"
        return ".json"


class SqlColumnType(str, Enum):
    """Column types emitted when creating relational tables."""

    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    TEXT = "TEXT"

    @classmethod
    def for_kind(cls, kind: ValueKind) -> "SqlColumnType":
        """Map a value variant to the column type that stores it."""

        if kind is ValueKind.NUMBER:
            return cls.DOUBLE
        if kind is ValueKind.BOOLEAN:
            return cls.BOOLEAN
        return cls.TEXT

    def sqlalchemy_type(self) -> TypeEngine:
        if self is SqlColumnType.DOUBLE:
            return Double()
        if self is SqlColumnType.BOOLEAN:
            return Boolean()
        return Text()

    @property
    def native_kind(self) -> ValueKind:
        """Value variant stored without coercion in a column of this type."""

        if self is SqlColumnType.DOUBLE:
            return ValueKind.NUMBER
        if self is SqlColumnType.BOOLEAN:
            return ValueKind.BOOLEAN
        return ValueKind.STRING


class JsonShape(str, Enum):
    """Top-level shape of a JSON document."""

    ARRAY = "array"    # single table: [ {...}, ... ]
    OBJECT = "object"  # multi table: { "name": [ {...}, ... ], ... }


class ObjectRootPolicy(str, Enum):
    """What JsonToExcel does with an object-shaped (multi table) document."""

    REJECT = "reject"
    FIRST_TABLE = "first-table"


SPREADSHEET_EXTENSIONS: Tuple[str, ...] = (".xlsx", ".xlsm", ".xls")
RELATIONAL_EXTENSIONS: Tuple[str, ...] = (".db", ".sqlite", ".sqlite3")
JSON_EXTENSIONS: Tuple[str, ...] = (".json",)

_MODE_LABELS = {
    ConversionMode.EXCEL_TO_JSON: "Convert Excel to JSON",
    ConversionMode.RELATIONAL_TO_JSON: "Convert Database to JSON",
    ConversionMode.JSON_TO_EXCEL: "Convert JSON to Excel",
    ConversionMode.JSON_TO_RELATIONAL: "Convert JSON to Database",
}


__all__ = [
    "ConversionMode",
    "JSON_EXTENSIONS",
    "JsonShape",
    "ObjectRootPolicy",
    "RELATIONAL_EXTENSIONS",
    "SPREADSHEET_EXTENSIONS",
    "SqlColumnType",
    "ValueKind",
]
