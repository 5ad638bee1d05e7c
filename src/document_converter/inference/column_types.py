"""Choose relational column types for a row set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain import RowSet, SqlColumnType, TypeCoercionLoss, Value, ValueKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ColumnPlan:
    """Type decision for one column."""

    name: str
    declared: SqlColumnType
    sql_type: SqlColumnType
    conflicts: List[ValueKind] = field(default_factory=list)

    @property
    def widened(self) -> bool:
        return bool(self.conflicts)

    def bind(self, value: Optional[Value]):
        """Python parameter for an INSERT; absent and Null bind as SQL NULL."""

        if value is None or value.is_null:
            return None
        if self.widened or self.sql_type is SqlColumnType.TEXT:
            return value.as_text()
        return value.to_python()


def plan_columns(rows: RowSet, table: str, strict: bool = False) -> List[ColumnPlan]:
    """Plan column types from the first record, widening conflicts to TEXT.

    The declared type comes from the first record's value (an absent value
    counts as Null, giving TEXT). Every later non-null value whose variant is
    not the one the declared type stores is a conflict; a conflicting column
    is created as TEXT and all its values are written as text.

    Raises:
        TypeCoercionLoss: On the first conflict when ``strict`` is set.
    """

    first = rows.records[0] if rows.records else {}
    plans: List[ColumnPlan] = []
    for column in rows.columns:
        first_value = first.get(column)
        base_kind = first_value.kind if first_value is not None else ValueKind.NULL
        declared = SqlColumnType.for_kind(base_kind)

        conflicts: List[ValueKind] = []
        for value in rows.values(column):
            if value.is_null or value.kind is declared.native_kind:
                continue
            if value.kind not in conflicts:
                conflicts.append(value.kind)

        if conflicts and strict:
            found = ", ".join(kind.value for kind in conflicts)
            raise TypeCoercionLoss(
                f"Column typed {declared.value} from its first record also holds {found} values",
                table=table,
                column=column,
            )

        sql_type = SqlColumnType.TEXT if conflicts else declared
        if conflicts:
            logger.warning(
                f"Column '{column}' in table '{table}' widened from {declared.value} to TEXT "
                f"({', '.join(kind.value for kind in conflicts)} values present)"
            )
        plans.append(ColumnPlan(name=column, declared=declared, sql_type=sql_type, conflicts=conflicts))
    return plans


__all__ = ["ColumnPlan", "plan_columns"]
