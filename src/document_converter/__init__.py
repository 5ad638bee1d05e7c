"""Convert tabular data between Excel workbooks, SQLite database files and JSON."""

from .codec import JsonRowCodec
from .config import Config, load_config
from .domain import ConversionFailure, ConversionMode, NamedRowSet, RowSet, Value, ValueKind
from .pipeline import ConversionOrchestrator, ConversionRequest, ConversionResult, convert_file
from .version import __version__

__all__ = [
    "Config",
    "ConversionFailure",
    "ConversionMode",
    "ConversionOrchestrator",
    "ConversionRequest",
    "ConversionResult",
    "JsonRowCodec",
    "NamedRowSet",
    "RowSet",
    "Value",
    "ValueKind",
    "__version__",
    "convert_file",
    "load_config",
]
