"""
igc-decode: typed decoding of IGC flight-recorder logs.

Public API surface:

- ``parse_line(line)`` -- decode a single line into a typed record
  (or ``Unrecognised`` for unknown record tags).

- ``read_log(path, config=None)`` -- decode a whole IGC file into a
  ``FlightLog``, applying the configured per-line failure policy.

- ``decode_lines(lines, config=None)`` -- same, for lines already in
  memory.

- ``export_log(path, output_dir=None, config=None)`` -- decode a file and
  write its tables (fixes, task, headers, events, failures) as CSV or
  Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path

from igc_decode._pipeline import run_export
from igc_decode.config import DecodeConfig, load_config, save_config
from igc_decode.detect import detect_kind, is_turnpoint_line, parse_line
from igc_decode.exceptions import IgcDecodeError, ParsingError
from igc_decode.flight_log import FlightLog
from igc_decode.reader import decode_lines, read_log as _read_log
from igc_decode.records import Record, Unrecognised

__all__ = [
    "DecodeConfig",
    "FlightLog",
    "IgcDecodeError",
    "ParsingError",
    "Record",
    "Unrecognised",
    "decode_lines",
    "detect_kind",
    "export_log",
    "is_turnpoint_line",
    "load_config",
    "parse_line",
    "read_log",
    "save_config",
]

logger = logging.getLogger(__name__)


def _resolve_config(config: DecodeConfig | str | Path | None) -> DecodeConfig:
    if config is None:
        return DecodeConfig()
    if isinstance(config, DecodeConfig):
        return config
    return load_config(config)


def read_log(
    path: str | Path,
    config: DecodeConfig | str | Path | None = None,
) -> FlightLog:
    """Decode an IGC file.

    Args:
        path: Path to the ``.igc`` file.
        config: A ``DecodeConfig``, a path to a config YAML, or ``None``
            for defaults.

    Returns:
        A ``FlightLog`` with the decoded records and any collected failures.

    Raises:
        FileNotFoundError: If *path* (or the config path) does not exist.
        ParsingError: If ``reader.on_error`` is ``"raise"`` and a line fails.
    """
    cfg = _resolve_config(config)
    return _read_log(path, cfg.reader)


def export_log(
    path: str | Path,
    output_dir: str | None = None,
    config: DecodeConfig | str | Path | None = None,
) -> list[str]:
    """Decode an IGC file and export its tables.

    Args:
        path: Path to the ``.igc`` file.
        output_dir: Overrides ``config.output.output_dir`` when given.
        config: A ``DecodeConfig``, a path to a config YAML, or ``None``
            for defaults.

    Returns:
        Paths of the files written.

    Raises:
        ParsingError: If ``reader.on_error`` is ``"raise"`` and a line fails.
        ExportError: If a table cannot be written.
    """
    cfg = _resolve_config(config)
    if output_dir is not None:
        cfg = cfg.model_copy(
            update={"output": cfg.output.model_copy(update={"output_dir": output_dir})}
        )
    logger.info("export_log() -- path=%s, output_dir=%s", path, cfg.output.output_dir)

    log = _read_log(path, cfg.reader)
    return run_export(log, cfg.output)
