"""Failure taxonomy for conversions."""

from __future__ import annotations

from typing import Optional


class ConversionFailure(Exception):
    """Base class for every failure surfaced by a conversion component."""

    code = "CONVERSION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        table: Optional[str] = None,
        column: Optional[str] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.table = table
        self.column = column
        self.suggestion = suggestion


class SourceUnavailable(ConversionFailure):
    """Input path missing, unreadable or not openable in the expected format."""

    code = "SOURCE_UNAVAILABLE"


class DestinationUnavailable(ConversionFailure):
    """Output path not writable or its parent directory is missing."""

    code = "DESTINATION_UNAVAILABLE"


class SchemaError(ConversionFailure):
    """Header or table metadata malformed, or a generated identifier is invalid."""

    code = "SCHEMA_ERROR"


class FormatError(ConversionFailure):
    """JSON does not match the array-of-objects / object-of-arrays contract,
    or holds a value the destination format cannot store.
    """

    code = "FORMAT_ERROR"


class TypeCoercionLoss(ConversionFailure):
    """A column's values disagree with the type inferred from its first record.

    Only raised when strict typing is enabled; otherwise the column is widened
    to text and the loss is reported as a warning.
    """

    code = "TYPE_COERCION_LOSS"


__all__ = [
    "ConversionFailure",
    "DestinationUnavailable",
    "FormatError",
    "SchemaError",
    "SourceUnavailable",
    "TypeCoercionLoss",
]
