"""Create tables in a database file and insert row sets into them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from sqlalchemy import Column, MetaData, Table, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from ..domain import DestinationUnavailable, NamedRowSet, SchemaError
from ..inference import ColumnPlan, plan_columns
from ..sql import open_engine, validate_columns, validate_identifier
from .files import ensure_parent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TableWriteReport:
    """Outcome for one table."""

    table: str
    rows_written: int = 0
    created: bool = False
    skipped: bool = False
    columns: List[ColumnPlan] = field(default_factory=list)

    @property
    def widened_columns(self) -> List[ColumnPlan]:
        return [plan for plan in self.columns if plan.widened]


class RelationalWriter:
    """Writes each NamedRowSet into the table named after its label.

    Every name is validated before the file is touched. All tables are
    written inside one transaction, so a failure leaves no table
    half-populated; a database file created by a failed write is removed.
    """

    def __init__(self, strict_types: bool = False):
        self.strict_types = strict_types

    def write(self, tables: List[NamedRowSet], path: str | Path) -> List[TableWriteReport]:
        destination = Path(path)
        reports = self._plan(tables)

        ensure_parent(destination)
        created_file = not destination.exists()
        engine = open_engine(destination)
        try:
            try:
                with engine.begin() as conn:
                    for named, report in zip(tables, reports):
                        if report.skipped:
                            logger.warning(f"Table '{named.label}' has no columns; no table created")
                            continue
                        self._write_table(conn, named, report, destination)
            finally:
                engine.dispose()
        except SQLAlchemyError as exc:
            self._discard(destination, created_file)
            reason = getattr(exc, "orig", None) or exc
            raise DestinationUnavailable(f"Database write failed: {reason}", path=str(destination)) from exc
        except Exception:
            self._discard(destination, created_file)
            raise

        written = sum(report.rows_written for report in reports)
        logger.info(f"Wrote {written} rows into {len(reports)} tables of {destination.name}")
        return reports

    def _plan(self, tables: List[NamedRowSet]) -> List[TableWriteReport]:
        seen: Dict[str, str] = {}
        reports: List[TableWriteReport] = []
        for named in tables:
            label = validate_identifier(named.label, kind="table")
            key = label.lower()
            if key in seen:
                raise SchemaError(f"Table {label!r} duplicates {seen[key]!r} (names are case-insensitive)", table=label)
            seen[key] = label

            if not named.rows.columns:
                reports.append(TableWriteReport(table=label, skipped=True))
                continue
            validate_columns(named.rows.columns, table=label)
            plans = plan_columns(named.rows, table=label, strict=self.strict_types)
            reports.append(TableWriteReport(table=label, columns=plans))
        return reports

    def _write_table(self, conn: Connection, named: NamedRowSet, report: TableWriteReport, destination: Path) -> None:
        label = named.label
        if inspect(conn).has_table(label):
            table = Table(label, MetaData(), autoload_with=conn)
            existing = {column.name.lower(): column.name for column in table.columns}
            missing = [plan.name for plan in report.columns if plan.name.lower() not in existing]
            if missing:
                raise SchemaError(
                    f"Existing table lacks columns: {', '.join(missing)}",
                    path=str(destination),
                    table=label,
                    column=missing[0],
                )
            names = {plan.name: existing[plan.name.lower()] for plan in report.columns}
        else:
            metadata = MetaData()
            table = Table(
                label,
                metadata,
                *[Column(plan.name, plan.sql_type.sqlalchemy_type()) for plan in report.columns],
            )
            metadata.create_all(conn)
            report.created = True
            names = {plan.name: plan.name for plan in report.columns}
            logger.debug(
                f"Created table '{label}' ("
                + ", ".join(f"{plan.name} {plan.sql_type.value}" for plan in report.columns)
                + ")"
            )

        params = [
            {names[plan.name]: plan.bind(record.get(plan.name)) for plan in report.columns}
            for record in named.rows.records
        ]
        if params:
            conn.execute(table.insert(), params)
        report.rows_written = len(params)

    def _discard(self, destination: Path, created_file: bool) -> None:
        if created_file:
            destination.unlink(missing_ok=True)


def write_relational(tables: List[NamedRowSet], path: str | Path, strict_types: bool = False) -> List[TableWriteReport]:
    """Convenience wrapper around :class:`RelationalWriter`."""

    return RelationalWriter(strict_types=strict_types).write(tables, path)


__all__ = ["RelationalWriter", "TableWriteReport", "write_relational"]
