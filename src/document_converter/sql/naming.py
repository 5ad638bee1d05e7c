"""Identifier rules for generated tables and columns.

Names that break the rules are rejected, never rewritten: a silently
mangled column name would no longer match the data it came from.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..domain import SchemaError

MAX_IDENTIFIER_LENGTH = 64
RESERVED_PREFIX = "sqlite_"

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_](?:[A-Za-z0-9_ ]*[A-Za-z0-9_])?$")


def sanitize_identifier(value: str) -> str:
    """Return a SQL-safe variant of ``value``, offered as a suggestion only."""

    cleaned = value.strip().replace(" ", "_").replace("-", "_").replace(".", "_")
    cleaned = "".join(c if c.isascii() and (c.isalnum() or c == "_") else "" for c in cleaned)
    if not cleaned:
        return "column"
    if not (cleaned[0].isalpha() or cleaned[0] == "_"):
        cleaned = f"c_{cleaned}"
    if cleaned.lower().startswith(RESERVED_PREFIX):
        cleaned = f"t_{cleaned}"
    return cleaned[:MAX_IDENTIFIER_LENGTH]


def validate_identifier(name: str, *, kind: str = "column", table: str | None = None) -> str:
    """Check a table or column name against the identifier rules.

    Returns:
        The name unchanged.

    Raises:
        SchemaError: If the name is empty, too long, reserved, or contains
            characters outside letters, digits, underscores and inner spaces.
    """

    problem = None
    if not name:
        problem = "is empty"
    elif len(name) > MAX_IDENTIFIER_LENGTH:
        problem = f"is longer than {MAX_IDENTIFIER_LENGTH} characters"
    elif name.lower().startswith(RESERVED_PREFIX):
        problem = f"uses the reserved prefix '{RESERVED_PREFIX}'"
    elif not _IDENTIFIER_PATTERN.match(name):
        problem = "must start with a letter or underscore and contain only letters, digits, underscores and inner spaces"

    if problem:
        raise SchemaError(
            f"Invalid {kind} name {name!r}: {problem}",
            table=table if kind == "column" else name,
            column=name if kind == "column" else None,
            suggestion=sanitize_identifier(name or ""),
        )
    return name


def validate_columns(columns: Iterable[str], table: str) -> List[str]:
    """Validate every column of a table and reject case-insensitive duplicates."""

    seen = {}
    validated = []
    for column in columns:
        validate_identifier(column, kind="column", table=table)
        key = column.lower()
        if key in seen:
            raise SchemaError(
                f"Column {column!r} duplicates {seen[key]!r} (names are case-insensitive)",
                table=table,
                column=column,
            )
        seen[key] = column
        validated.append(column)
    return validated


__all__ = [
    "MAX_IDENTIFIER_LENGTH",
    "sanitize_identifier",
    "validate_columns",
    "validate_identifier",
]
