"""Value classification and column type inference."""

from .classifier import classify, classify_cell, classify_json_value, classify_xls_cell
from .column_types import ColumnPlan, plan_columns

__all__ = [
    "ColumnPlan",
    "classify",
    "classify_cell",
    "classify_json_value",
    "classify_xls_cell",
    "plan_columns",
]
