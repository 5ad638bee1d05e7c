"""
Data models for conversion requests and results.

This module contains dataclasses for:
- The conversion request handed over by the command line
- Error details
- Conversion statistics and results
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..domain import ConversionFailure, ConversionMode


@dataclass(slots=True)
class ConversionRequest:
    """One conversion: a mode, an input file and an output file name."""

    mode: ConversionMode
    source: str
    output_name: str


@dataclass(slots=True)
class ErrorDetail:
    """Represents a conversion error."""

    code: str
    message: str
    path: Optional[str] = None
    table: Optional[str] = None
    column: Optional[str] = None
    suggestion: Optional[str] = None

    @classmethod
    def from_failure(cls, failure: ConversionFailure) -> "ErrorDetail":
        return cls(
            code=failure.code,
            message=failure.message,
            path=failure.path,
            table=failure.table,
            column=failure.column,
            suggestion=failure.suggestion,
        )

    def describe(self) -> str:
        location = [
            f"{label} '{value}'"
            for label, value in (("file", self.path), ("table", self.table), ("column", self.column))
            if value
        ]
        text = f"{self.code}: {self.message}"
        if location:
            text += f" ({', '.join(location)})"
        if self.suggestion:
            text += f" - suggestion: {self.suggestion}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        result = {"code": self.code, "message": self.message}
        for key in ("path", "table", "column", "suggestion"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass(slots=True)
class ConversionStats:
    """Statistics about the conversion process."""

    tables: int = 0
    total_rows: int = 0
    columns: int = 0
    widened_columns: int = 0
    processing_time_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ConversionResult:
    """Result of a conversion operation."""

    success: bool
    mode: ConversionMode
    source: Optional[str] = None
    destination: Optional[str] = None
    errors: List[ErrorDetail] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "mode": self.mode.value,
            "source": self.source,
            "destination": self.destination,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "stats": self.stats.to_dict(),
        }


__all__ = ["ConversionRequest", "ConversionResult", "ConversionStats", "ErrorDetail"]
