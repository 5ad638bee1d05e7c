"""Configuration management helpers."""

from .loader import CONFIG_ENV_VAR, load_config
from .schema import Config, JsonSettings, RelationalSettings, SpreadsheetSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "JsonSettings",
    "RelationalSettings",
    "SpreadsheetSettings",
    "load_config",
]
