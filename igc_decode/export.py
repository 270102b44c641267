"""
Exporter for igc-decode.

Writes the tables built from a decoded flight log to the output
directory in the configured format (CSV or Parquet).

Output file naming convention:
  {table_name}.{format}  -- e.g., "fixes.parquet", "task.csv"

Parquet preserves column dtypes, so decimal degrees and altitudes load
back without re-parsing.  CSV is there for spreadsheets and other tools
that do not read Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from igc_decode.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_tables(
    tables: dict[str, pd.DataFrame],
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Write tables to disk, one file per table.

    The output directory is created recursively if it does not exist.

    Args:
        tables: Dict mapping table_name -> DataFrame.
        output_dir: Directory to write files into (created if needed).
        output_format: "csv" or "parquet".

    Returns:
        List of file paths (as strings) that were written, in table order.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for table_name, df in tables.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported table '%s' -> %s (%d rows, %d cols)",
            table_name,
            file_path.name,
            len(df),
            len(df.columns),
        )

    return written
