"""JSON encoding and decoding of row sets.

Single table data is an array of flat objects. Multi table data is an object
mapping table names to such arrays. Field values are limited to string,
number, boolean and null.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from ..domain import FormatError, JsonShape, NamedRowSet, Record, RowSet
from ..inference import classify_json_value

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


@dataclass(slots=True)
class JsonDocument:
    """Decoded JSON: its root shape plus the tables it holds.

    An array root yields exactly one table whose label is empty.
    """

    shape: JsonShape
    tables: List[NamedRowSet] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def rows(self) -> RowSet:
        """The single row set of an array document."""

        if self.shape is not JsonShape.ARRAY:
            raise FormatError("Expected a top-level array of objects, found an object of tables")
        return self.tables[0].rows


class JsonRowCodec:
    """Converts row sets to and from JSON text."""

    def __init__(self, indent: int | None = DEFAULT_INDENT):
        self.indent = indent

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    def to_data(self, payload: Union[RowSet, List[NamedRowSet]]) -> Union[list, dict]:
        """Plain JSON-ready structure for a row set or a list of named row sets."""

        if isinstance(payload, RowSet):
            return _encode_rows(payload)
        return {named.label: _encode_rows(named.rows) for named in payload}

    def encode(self, payload: Union[RowSet, List[NamedRowSet]]) -> str:
        data = self.to_data(payload)
        try:
            return json.dumps(data, indent=self.indent, ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            raise FormatError(f"Value cannot be represented in JSON: {exc}") from exc

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    def decode(self, text: Union[str, bytes]) -> JsonDocument:
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("utf-8-sig")
            except UnicodeDecodeError as exc:
                raise FormatError(f"Input is not valid UTF-8: {exc}") from exc
        try:
            root = json.loads(text)
        except ValueError as exc:
            raise FormatError(f"Invalid JSON: {exc}") from exc
        return self.from_data(root)

    def from_data(self, root: Any) -> JsonDocument:
        if isinstance(root, list):
            document = JsonDocument(shape=JsonShape.ARRAY)
            rows = self._decode_array(root, label=None, warnings=document.warnings)
            document.tables.append(NamedRowSet(label="", rows=rows))
            return document

        if isinstance(root, dict):
            document = JsonDocument(shape=JsonShape.OBJECT)
            for label, items in root.items():
                if not isinstance(items, list):
                    raise FormatError(
                        f"Table value must be an array of objects, found {_json_type(items)}",
                        table=label,
                    )
                rows = self._decode_array(items, label=label, warnings=document.warnings)
                document.tables.append(NamedRowSet(label=label, rows=rows))
            return document

        raise FormatError(
            f"Top-level JSON must be an array of objects or an object of arrays, found {_json_type(root)}"
        )

    def _decode_array(self, items: List[Any], label: str | None, warnings: List[str]) -> RowSet:
        rowset = RowSet()
        dropped_seen: List[str] = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise FormatError(f"Element {index} must be an object, found {_json_type(item)}", table=label)
            record: Record = {
                key: classify_json_value(value, table=label, column=key) for key, value in item.items()
            }
            if index == 0:
                rowset.columns = list(record.keys())
            for column in rowset.append(record):
                if column in dropped_seen:
                    continue
                dropped_seen.append(column)
                where = f"table '{label}'" if label else "the array"
                message = f"Column '{column}' first appears in element {index} of {where} and is not in the schema; dropped"
                logger.warning(message)
                warnings.append(message)
        return rowset


def _encode_rows(rows: RowSet) -> List[Dict[str, Any]]:
    return [
        {column: record[column].to_python() for column in rows.columns if column in record}
        for record in rows.records
    ]


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = ["DEFAULT_INDENT", "JsonDocument", "JsonRowCodec"]
