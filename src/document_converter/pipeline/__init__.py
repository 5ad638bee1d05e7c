"""Conversion pipeline: requests, results, file discovery and orchestration."""

from .discovery import discover_sources
from .models import ConversionRequest, ConversionResult, ConversionStats, ErrorDetail
from .orchestrator import ConversionOrchestrator, convert_file

__all__ = [
    "ConversionOrchestrator",
    "ConversionRequest",
    "ConversionResult",
    "ConversionStats",
    "ErrorDetail",
    "convert_file",
    "discover_sources",
]
