"""SQLAlchemy engine construction for single-file SQLite stores."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine


def sqlite_url(path: str | Path) -> URL:
    """URL for a database file; built from parts so the path needs no escaping."""

    return URL.create("sqlite", database=str(Path(path)))


def open_engine(path: str | Path) -> Engine:
    """Create an engine whose transactions also cover DDL.

    pysqlite only opens a transaction before DML, so a CREATE TABLE would
    commit on its own. The driver's transaction handling is switched off and
    BEGIN is emitted explicitly instead.
    """

    engine = create_engine(sqlite_url(path))

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


__all__ = ["open_engine", "sqlite_url"]
