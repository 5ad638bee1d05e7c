"""Writers rendering row sets into workbooks, database files and text files."""

from .files import atomic_output, write_text
from .relational import RelationalWriter, TableWriteReport, write_relational
from .spreadsheet import DEFAULT_SHEET_NAME, SpreadsheetWriter, write_spreadsheet

__all__ = [
    "DEFAULT_SHEET_NAME",
    "RelationalWriter",
    "SpreadsheetWriter",
    "TableWriteReport",
    "atomic_output",
    "write_relational",
    "write_spreadsheet",
    "write_text",
]
