"""SQL helpers: identifier rules and engine setup."""

from .engine import open_engine, sqlite_url
from .naming import MAX_IDENTIFIER_LENGTH, sanitize_identifier, validate_columns, validate_identifier

__all__ = [
    "MAX_IDENTIFIER_LENGTH",
    "open_engine",
    "sanitize_identifier",
    "sqlite_url",
    "validate_columns",
    "validate_identifier",
]
