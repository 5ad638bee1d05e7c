"""Configuration models for the document converter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..domain.types import ObjectRootPolicy


@dataclass(slots=True)
class JsonSettings:
    """JSON output formatting."""

    indent: int = 2


@dataclass(slots=True)
class SpreadsheetSettings:
    """Workbook output options."""

    sheet_name: str = "Data"
    max_column_width: int = 60


@dataclass(slots=True)
class RelationalSettings:
    """Database output options."""

    default_table: str = "JsonData"
    strict_types: bool = False


@dataclass(slots=True)
class Config:
    """Top-level configuration for the converter."""

    input_directory: Path = field(default_factory=lambda: Path("assets").resolve())
    output_directory: Path = field(default_factory=lambda: Path("results").resolve())
    json: JsonSettings = field(default_factory=JsonSettings)
    spreadsheet: SpreadsheetSettings = field(default_factory=SpreadsheetSettings)
    relational: RelationalSettings = field(default_factory=RelationalSettings)
    object_root_policy: ObjectRootPolicy = ObjectRootPolicy.REJECT

    def resolve_source(self, name: str | Path) -> Path:
        """Input files are named relative to the input directory."""

        candidate = Path(name)
        if not candidate.is_absolute():
            candidate = self.input_directory / candidate
        return candidate.resolve()

    def resolve_output(self, name: str) -> Path:
        return (self.output_directory / name).resolve()


__all__ = ["Config", "JsonSettings", "RelationalSettings", "SpreadsheetSettings"]
