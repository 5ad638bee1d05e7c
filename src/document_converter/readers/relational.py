"""Read every user table of a database file into NamedRowSets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from sqlalchemy import MetaData, Table, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from ..domain import NamedRowSet, Record, RowSet, SchemaError, SourceUnavailable
from ..inference import classify
from ..sql import open_engine

logger = logging.getLogger(__name__)


class RelationalReader:
    """Full-table scans of each user table, in table name order.

    Column metadata of the scan becomes the schema; every column is populated
    in every record, with SQL NULL classified as Null.
    """

    def read(self, path: str | Path) -> List[NamedRowSet]:
        source = Path(path)
        if not source.is_file():
            raise SourceUnavailable("Database file not found", path=str(source))

        engine = open_engine(source)
        try:
            with engine.connect() as conn:
                table_names = inspect(conn).get_table_names()
                tables = [self._read_table(conn, name, source) for name in table_names]
        except SQLAlchemyError as exc:
            reason = getattr(exc, "orig", None) or exc
            raise SourceUnavailable(f"Cannot open database: {reason}", path=str(source)) from exc
        finally:
            engine.dispose()

        logger.info(f"Read {len(tables)} tables from {source.name}")
        return tables

    def _read_table(self, conn, name: str, source: Path) -> NamedRowSet:
        try:
            table = Table(name, MetaData(), autoload_with=conn)
            result = conn.execute(select(table))
        except SQLAlchemyError as exc:
            raise SchemaError(f"Cannot read table: {exc}", path=str(source), table=name) from exc

        columns = list(result.keys())
        rowset = RowSet(columns=columns)
        for row in result:
            record: Record = {column: classify(value) for column, value in zip(columns, row)}
            rowset.append(record)
        logger.debug(f"Table '{name}': {len(rowset)} rows, {len(columns)} columns")
        return NamedRowSet(label=name, rows=rowset)


def read_relational(path: str | Path) -> List[NamedRowSet]:
    """Convenience wrapper around :class:`RelationalReader`."""

    return RelationalReader().read(path)


__all__ = ["RelationalReader", "read_relational"]
