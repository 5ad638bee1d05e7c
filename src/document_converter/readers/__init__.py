"""Readers turning spreadsheets and database files into row sets."""

from .relational import RelationalReader, read_relational
from .spreadsheet import SpreadsheetReader, read_spreadsheet

__all__ = ["RelationalReader", "SpreadsheetReader", "read_relational", "read_spreadsheet"]
