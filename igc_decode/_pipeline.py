"""
Internal decode -> tables -> export orchestration for igc-decode.

Kept out of ``__init__.py`` so the public ``export_log()`` and the
demo script share one sequence.  Not part of the public API.
"""

from __future__ import annotations

import logging

from igc_decode.config import OutputConfig
from igc_decode.export import export_tables
from igc_decode.flight_log import FlightLog

logger = logging.getLogger(__name__)


def run_export(log: FlightLog, output: OutputConfig) -> list[str]:
    """Build the configured tables for *log* and write them to disk.

    Steps:
      1. Build each table named in ``output.tables``.
      2. Export them to ``output.output_dir`` in ``output.output_format``.

    Returns:
        List of output file paths that were written.
    """
    tables = log.to_tables(output.tables)
    written = export_tables(
        tables=tables,
        output_dir=output.output_dir,
        output_format=output.output_format,
    )
    logger.info("Export complete for %s: wrote %d files", log.source, len(written))
    return written
