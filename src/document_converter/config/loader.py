"""Utilities for loading converter configuration files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..domain.types import ObjectRootPolicy
from .schema import Config, JsonSettings, RelationalSettings, SpreadsheetSettings

CONFIG_ENV_VAR = "DOCCONV_CONFIG"

_DEFAULT_INPUT_DIR = Path("assets")
_DEFAULT_OUTPUT_DIR = Path("results")


def load_config(path: Optional[str | Path] = None) -> Config:
    """Load configuration from a YAML file.

    Without a path the ``DOCCONV_CONFIG`` environment variable is consulted;
    without either, defaults apply and directories resolve against the
    current working directory.
    """

    if path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        path = env_path or None

    if path is None:
        return Config(
            input_directory=_DEFAULT_INPUT_DIR.resolve(),
            output_directory=_DEFAULT_OUTPUT_DIR.resolve(),
        )

    config_path = Path(path).expanduser().resolve()
    with config_path.open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle) or {}

    if not isinstance(raw_data, dict):
        raise ValueError("Configuration root must be a mapping.")

    base_dir = config_path.parent
    paths_data = _section(raw_data, "paths")
    json_data = _section(raw_data, "json")
    sheet_data = _section(raw_data, "spreadsheet")
    relational_data = _section(raw_data, "relational")
    json_to_excel = _section(raw_data, "json_to_excel")

    return Config(
        input_directory=_resolve_directory(paths_data.get("input"), base_dir, _DEFAULT_INPUT_DIR),
        output_directory=_resolve_directory(paths_data.get("output"), base_dir, _DEFAULT_OUTPUT_DIR),
        json=JsonSettings(indent=_coerce_int(json_data.get("indent", 2), "json.indent", minimum=0)),
        spreadsheet=SpreadsheetSettings(
            sheet_name=str(sheet_data.get("sheet_name", "Data")),
            max_column_width=_coerce_int(
                sheet_data.get("max_column_width", 60), "spreadsheet.max_column_width", minimum=1
            ),
        ),
        relational=RelationalSettings(
            default_table=str(relational_data.get("default_table", "JsonData")),
            strict_types=bool(relational_data.get("strict_types", False)),
        ),
        object_root_policy=_parse_object_root(json_to_excel.get("object_root")),
    )


def _section(raw_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw_data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected a mapping for {name}.")
    return value


def _resolve_directory(value: Optional[str], base_dir: Path, fallback: Path) -> Path:
    if value:
        candidate = Path(value)
    else:
        candidate = fallback
    if not candidate.is_absolute():
        candidate = (base_dir / candidate).resolve()
    else:
        candidate = candidate.resolve()
    return candidate


def _coerce_int(value: Any, name: str, minimum: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected an integer for {name}, got {value!r}.")
    if number < minimum:
        raise ValueError(f"{name} must be at least {minimum}.")
    return number


def _parse_object_root(value: Any) -> ObjectRootPolicy:
    if not value:
        return ObjectRootPolicy.REJECT
    try:
        return ObjectRootPolicy(str(value).lower())
    except ValueError:
        allowed = ", ".join(policy.value for policy in ObjectRootPolicy)
        raise ValueError(f"json_to_excel.object_root must be one of: {allowed}.")


__all__ = ["CONFIG_ENV_VAR", "load_config"]
