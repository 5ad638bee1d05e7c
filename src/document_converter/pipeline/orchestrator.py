"""
Conversion Orchestrator
=======================
Selects the reader/writer pair for a conversion mode, drives the pipeline
end to end and reports the outcome as a ConversionResult.

Flows:
- ExcelToJson:       SpreadsheetReader -> JsonRowCodec.encode
- RelationalToJson:  RelationalReader  -> JsonRowCodec.encode (object of arrays)
- JsonToExcel:       JsonRowCodec.decode -> SpreadsheetWriter
- JsonToRelational:  JsonRowCodec.decode -> RelationalWriter
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..codec import JsonDocument, JsonRowCodec
from ..config import Config
from ..domain import (
    ConversionFailure,
    ConversionMode,
    DestinationUnavailable,
    FormatError,
    JsonShape,
    NamedRowSet,
    ObjectRootPolicy,
    RowSet,
    SourceUnavailable,
)
from ..readers import RelationalReader, SpreadsheetReader
from ..writers import RelationalWriter, SpreadsheetWriter, write_text
from .models import ConversionRequest, ConversionResult, ErrorDetail

logger = logging.getLogger(__name__)


class ConversionOrchestrator:
    """
    Runs one conversion per call; nothing is shared between calls except the
    configuration.

    Usage:
        orchestrator = ConversionOrchestrator(load_config("converter.yaml"))
        result = orchestrator.convert(
            ConversionRequest(ConversionMode.EXCEL_TO_JSON, "people.xlsx", "people.json")
        )

        if not result.success:
            for error in result.errors:
                print(error.describe())
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.codec = JsonRowCodec(indent=self.config.json.indent)
        self.spreadsheet_reader = SpreadsheetReader()
        self.relational_reader = RelationalReader()
        self.spreadsheet_writer = SpreadsheetWriter(
            sheet_name=self.config.spreadsheet.sheet_name,
            max_column_width=self.config.spreadsheet.max_column_width,
        )
        self.relational_writer = RelationalWriter(strict_types=self.config.relational.strict_types)

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Resolve the request against the configured directories and run it.

        Conversion failures are reported on the result, never raised.
        """

        start_time = datetime.now()
        result = ConversionResult(success=False, mode=request.mode)
        try:
            source = self.config.resolve_source(request.source)
            result.source = str(source)
            destination = self._resolve_destination(request.output_name)
            result.destination = str(destination)
            self.run(request.mode, source, destination, result)
            result.success = True
        except ConversionFailure as failure:
            logger.warning(f"{request.mode.value} failed: {failure.code}: {failure.message}")
            result.errors.append(ErrorDetail.from_failure(failure))
        except Exception as exc:
            logger.exception("Unexpected error during conversion")
            result.errors.append(ErrorDetail(code="CONVERSION_ERROR", message=f"Unexpected error: {exc}"))

        result.stats.processing_time_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        return result

    def run(
        self,
        mode: ConversionMode,
        source: str | Path,
        destination: str | Path,
        result: Optional[ConversionResult] = None,
    ) -> ConversionResult:
        """Run one flow between explicit paths.

        Raises:
            ConversionFailure: Any component failure, unchanged.
        """

        source = Path(source)
        destination = Path(destination)
        if result is None:
            result = ConversionResult(success=False, mode=mode, source=str(source), destination=str(destination))

        logger.info(f"{mode.value}: {source} -> {destination}")
        if mode is ConversionMode.EXCEL_TO_JSON:
            self._excel_to_json(source, destination, result)
        elif mode is ConversionMode.RELATIONAL_TO_JSON:
            self._relational_to_json(source, destination, result)
        elif mode is ConversionMode.JSON_TO_EXCEL:
            self._json_to_excel(source, destination, result)
        elif mode is ConversionMode.JSON_TO_RELATIONAL:
            self._json_to_relational(source, destination, result)
        else:
            raise ValueError(f"Unsupported conversion mode: {mode}")

        result.success = True
        return result

    # =========================================================================
    # FLOWS
    # =========================================================================

    def _excel_to_json(self, source: Path, destination: Path, result: ConversionResult) -> None:
        rows = self.spreadsheet_reader.read(source)
        write_text(destination, self.codec.encode(rows))
        self._count(result, [rows])

    def _relational_to_json(self, source: Path, destination: Path, result: ConversionResult) -> None:
        tables = self.relational_reader.read(source)
        if not tables:
            result.warnings.append(f"No user tables found in {source.name}; writing an empty object")
        write_text(destination, self.codec.encode(tables))
        self._count(result, [named.rows for named in tables])

    def _json_to_excel(self, source: Path, destination: Path, result: ConversionResult) -> None:
        document = self._load_json(source, result)
        if document.shape is JsonShape.OBJECT:
            rows = self._first_table(document, source, result)
        else:
            rows = document.rows
        self.spreadsheet_writer.write(rows, destination)
        self._count(result, [rows])

    def _json_to_relational(self, source: Path, destination: Path, result: ConversionResult) -> None:
        document = self._load_json(source, result)
        if document.shape is JsonShape.ARRAY:
            tables = [NamedRowSet(label=self.config.relational.default_table, rows=document.rows)]
        else:
            tables = document.tables

        reports = self.relational_writer.write(tables, destination)
        for report in reports:
            if report.skipped:
                result.warnings.append(f"Table '{report.table}' has no records; no table created")
            for plan in report.widened_columns:
                found = ", ".join(kind.value for kind in plan.conflicts)
                result.warnings.append(
                    f"TYPE_COERCION_LOSS: column '{plan.name}' of table '{report.table}' is "
                    f"{plan.declared.value} in its first record but also holds {found} values; stored as TEXT"
                )
            result.stats.widened_columns += len(report.widened_columns)
        self._count(result, [named.rows for named in tables])

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _load_json(self, source: Path, result: ConversionResult) -> JsonDocument:
        if not source.is_file():
            raise SourceUnavailable("JSON file not found", path=str(source))
        try:
            raw = source.read_bytes()
        except OSError as exc:
            raise SourceUnavailable(f"Cannot read JSON file: {exc}", path=str(source)) from exc

        try:
            document = self.codec.decode(raw)
        except FormatError as failure:
            if failure.path is None:
                failure.path = str(source)
            raise
        result.warnings.extend(document.warnings)
        return document

    def _first_table(self, document: JsonDocument, source: Path, result: ConversionResult) -> RowSet:
        if self.config.object_root_policy is ObjectRootPolicy.REJECT:
            raise FormatError(
                "A single sheet needs a top-level array of objects; found an object of tables",
                path=str(source),
                suggestion="set json_to_excel.object_root to 'first-table' or convert one table at a time",
            )
        if not document.tables:
            raise FormatError("JSON object holds no tables", path=str(source))

        first = document.tables[0]
        if len(document.tables) > 1:
            skipped = ", ".join(named.label for named in document.tables[1:])
            result.warnings.append(f"Using first table '{first.label}'; ignored: {skipped}")
        return first.rows

    def _resolve_destination(self, output_name: str) -> Path:
        name = (output_name or "").strip()
        if not name or name in (".", "..") or Path(name).name != name:
            raise DestinationUnavailable(f"Output name must be a plain file name, got {output_name!r}")
        try:
            self.config.output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DestinationUnavailable(
                f"Cannot create output directory: {exc}", path=str(self.config.output_directory)
            ) from exc
        return self.config.resolve_output(name)

    @staticmethod
    def _count(result: ConversionResult, rowsets) -> None:
        rowsets = list(rowsets)
        result.stats.tables = len(rowsets)
        result.stats.total_rows = sum(len(rows) for rows in rowsets)
        result.stats.columns = sum(len(rows.columns) for rows in rowsets)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def convert_file(
    mode: ConversionMode,
    source: str | Path,
    destination: str | Path,
    config: Optional[Config] = None,
) -> ConversionResult:
    """
    Convert one file between explicit paths.

    Args:
        mode: Conversion direction
        source: Input file path
        destination: Output file path
        config: Optional configuration overrides

    Returns:
        ConversionResult with success flag, warnings and error details
    """
    orchestrator = ConversionOrchestrator(config)
    start_time = datetime.now()
    result = ConversionResult(success=False, mode=mode, source=str(source), destination=str(destination))
    try:
        orchestrator.run(mode, source, destination, result)
    except ConversionFailure as failure:
        result.success = False
        result.errors.append(ErrorDetail.from_failure(failure))
    except Exception as exc:
        logger.exception("Unexpected error during conversion")
        result.success = False
        result.errors.append(ErrorDetail(code="CONVERSION_ERROR", message=f"Unexpected error: {exc}"))
    result.stats.processing_time_ms = int((datetime.now() - start_time).total_seconds() * 1000)
    return result


__all__ = ["ConversionOrchestrator", "convert_file"]
