"""Intermediate row-set model every format is translated through."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from .types import ValueKind

Payload = Union[str, float, bool, None]


@dataclass(frozen=True, slots=True)
class Value:
    """Tagged value: String, Number (double precision), Boolean or Null."""

    kind: ValueKind
    payload: Payload = None

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(ValueKind.STRING, str(text))

    @classmethod
    def number(cls, number: Any) -> "Value":
        return cls(ValueKind.NUMBER, float(number))

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(ValueKind.BOOLEAN, bool(flag))

    @classmethod
    def null(cls) -> "Value":
        return NULL

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def to_python(self) -> Payload:
        """Plain Python scalar (str, float, bool or None)."""

        return self.payload

    def as_text(self) -> Optional[str]:
        """Textual form used when a value is coerced into a text column."""

        if self.kind is ValueKind.NULL:
            return None
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.payload else "false"
        return str(self.payload)


NULL = Value(ValueKind.NULL)

# One row: column name -> Value, in schema order. Absent columns are omitted.
Record = Dict[str, Value]


@dataclass(slots=True)
class RowSet:
    """Ordered schema plus ordered records.

    The schema is fixed once derived (from a header row or the first record)
    and is never widened by later records.
    """

    columns: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)

    @classmethod
    def from_records(cls, records: List[Record]) -> "RowSet":
        """Build a row set whose schema is the first record's keys."""

        columns = list(records[0].keys()) if records else []
        rowset = cls(columns=columns)
        for record in records:
            rowset.append(record)
        return rowset

    def append(self, record: Record) -> List[str]:
        """Add a record in schema order.

        Keys outside the schema are dropped; their names are returned so the
        caller can report them.
        """

        ordered: Record = {}
        for column in self.columns:
            if column in record:
                ordered[column] = record[column]
        dropped = [key for key in record if key not in ordered]
        self.records.append(ordered)
        return dropped

    def values(self, column: str) -> Iterator[Value]:
        """Populated values of a column, in record order."""

        for record in self.records:
            if column in record:
                yield record[column]

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)


@dataclass(slots=True)
class NamedRowSet:
    """A row set labelled with its table or sheet name."""

    label: str
    rows: RowSet = field(default_factory=RowSet)


__all__ = ["NULL", "NamedRowSet", "Payload", "Record", "RowSet", "Value"]
