"""Domain model: values, row sets, enumerations and failures."""

from .errors import (
    ConversionFailure,
    DestinationUnavailable,
    FormatError,
    SchemaError,
    SourceUnavailable,
    TypeCoercionLoss,
)
from .models import NULL, NamedRowSet, Record, RowSet, Value
from .types import (
    JSON_EXTENSIONS,
    RELATIONAL_EXTENSIONS,
    SPREADSHEET_EXTENSIONS,
    ConversionMode,
    JsonShape,
    ObjectRootPolicy,
    SqlColumnType,
    ValueKind,
)

__all__ = [
    "ConversionFailure",
    "ConversionMode",
    "DestinationUnavailable",
    "FormatError",
    "JSON_EXTENSIONS",
    "JsonShape",
    "NULL",
    "NamedRowSet",
    "ObjectRootPolicy",
    "RELATIONAL_EXTENSIONS",
    "Record",
    "RowSet",
    "SPREADSHEET_EXTENSIONS",
    "SchemaError",
    "SourceUnavailable",
    "SqlColumnType",
    "TypeCoercionLoss",
    "Value",
    "ValueKind",
]
