"""
Configuration models and YAML I/O for igc-decode.

Defines the Pydantic models that map 1:1 to a decode config YAML file,
plus helpers for loading and saving it.

Key models:
- DecodeConfig: Top-level config (reader + output).
- ReaderConfig: Text decoding and the per-line failure policy.
- OutputConfig: Output directory, format, and which tables to export.

Key functions:
- load_config(path) -> DecodeConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from igc_decode.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

TABLE_NAMES = ("fixes", "task", "headers", "events", "failures")

OnError = Literal["raise", "collect", "skip"]


class ReaderConfig(BaseModel):
    """How IGC files are read and what happens to lines that fail to decode."""

    encoding: str = Field("utf-8", description="Text encoding of the IGC file")
    encoding_errors: Literal["strict", "replace", "ignore"] = Field(
        "replace", description="How undecodable bytes are handled"
    )
    on_error: OnError = Field(
        "collect",
        description=(
            "'raise' stops at the first bad line, 'collect' keeps failures "
            "alongside records, 'skip' logs and drops them"
        ),
    )
    keep_unrecognised: bool = Field(
        True, description="If False, lines with unknown record tags are dropped"
    )


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )
    tables: list[str] = Field(
        default_factory=lambda: list(TABLE_NAMES),
        description="Tables to export, any of: " + ", ".join(TABLE_NAMES),
    )

    @field_validator("tables")
    @classmethod
    def _check_tables(cls, tables: list[str]) -> list[str]:
        if not tables:
            raise ValueError("At least one table must be selected for export.")
        unknown = [t for t in tables if t not in TABLE_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown table name(s): {unknown}. Available: {list(TABLE_NAMES)}"
            )
        return tables


class DecodeConfig(BaseModel):
    """Top-level configuration for igc-decode."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> DecodeConfig:
    """Load and validate a decode config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return DecodeConfig.model_validate(raw)


def save_config(config: DecodeConfig, path: str | Path) -> None:
    """Serialize a DecodeConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# igc-decode configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
