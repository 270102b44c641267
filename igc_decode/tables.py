"""
Tabular views of a decoded flight log.

Turns the records of a ``FlightLog`` into pandas DataFrames, one per
table name:

- ``fixes``:    one row per B record; signed decimal degrees plus one
                column per I-record extension mnemonic.
- ``task``:     the C declaration and turnpoints in file order.
- ``headers``:  H records.
- ``events``:   E records.
- ``failures``: lines the reader collected as failures.

Extension values are kept as strings: their units and scaling depend on
the mnemonic and the recorder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import numpy as np
import pandas as pd

from igc_decode.config import TABLE_NAMES
from igc_decode.primitives import RawCoord
from igc_decode.records import BRecord, CRecordDeclaration, CRecordTurnpoint, ERecord, HRecord

if TYPE_CHECKING:
    from igc_decode.flight_log import FlightLog

logger = logging.getLogger(__name__)

_FIX_COLUMNS = ["line_no", "time", "latitude", "longitude", "fix_valid", "pressure_alt", "gps_alt"]
_TASK_COLUMNS = [
    "line_no", "kind", "latitude", "longitude", "name",
    "task_id", "turnpoint_count", "declared",
]
_HEADER_COLUMNS = ["line_no", "source", "mnemonic", "data"]
_EVENT_COLUMNS = ["line_no", "time", "mnemonic", "text"]
_FAILURE_COLUMNS = ["line_no", "error", "record_kind", "field", "text", "line"]


def signed_degrees(coords: list[RawCoord]) -> np.ndarray:
    """Vectorised ``RawCoord.to_decimal()`` over a list of coordinates."""
    if not coords:
        return np.empty(0, dtype=float)
    arr = np.array(
        [(c.degrees, c.minutes, c.minutes_fraction, c.sign.sign) for c in coords],
        dtype=float,
    )
    degrees, minutes, fraction, sign = arr.T
    return sign * (degrees + (minutes + fraction / 1000.0) / 60.0)


def build_fixes(log: FlightLog) -> pd.DataFrame:
    """One row per B record, with extension columns from the I record."""
    rows = [(d.line_no, d.record) for d in log.lines if isinstance(d.record, BRecord)]
    fixes = [r for _, r in rows]

    df = pd.DataFrame(
        {
            "line_no": [n for n, _ in rows],
            "time": [r.timestamp.isoformat() for r in fixes],
            "latitude": signed_degrees([r.position.lat for r in fixes]),
            "longitude": signed_degrees([r.position.lon for r in fixes]),
            "fix_valid": [r.fix_valid for r in fixes],
            "pressure_alt": [r.pressure_alt for r in fixes],
            "gps_alt": [r.gps_alt for r in fixes],
        },
        columns=_FIX_COLUMNS,
    )

    i_record = log.fix_extensions
    if i_record is not None:
        extracted = [r.extension_values(i_record.definition) for r in fixes]
        for ext in i_record.definition.extensions:
            df[ext.mnemonic] = [values.get(ext.mnemonic) for values in extracted]
    return df


def build_task(log: FlightLog) -> pd.DataFrame:
    """The declared task: declaration row first, then turnpoints, in file order."""
    rows = []
    for decoded in log.lines:
        record = decoded.record
        if isinstance(record, CRecordDeclaration):
            rows.append({
                "line_no": decoded.line_no,
                "kind": "declaration",
                "latitude": np.nan,
                "longitude": np.nan,
                "name": record.name,
                "task_id": record.task_id,
                "turnpoint_count": record.turnpoint_count,
                "declared": f"{record.date.isoformat()}T{record.time.isoformat()}",
            })
        elif isinstance(record, CRecordTurnpoint):
            rows.append({
                "line_no": decoded.line_no,
                "kind": "turnpoint",
                "latitude": record.position.lat.to_decimal(),
                "longitude": record.position.lon.to_decimal(),
                "name": record.name,
                "task_id": None,
                "turnpoint_count": None,
                "declared": None,
            })
    return pd.DataFrame(rows, columns=_TASK_COLUMNS)


def build_headers(log: FlightLog) -> pd.DataFrame:
    rows = [
        {"line_no": d.line_no, "source": d.record.source,
         "mnemonic": d.record.mnemonic, "data": d.record.data}
        for d in log.lines if isinstance(d.record, HRecord)
    ]
    return pd.DataFrame(rows, columns=_HEADER_COLUMNS)


def build_events(log: FlightLog) -> pd.DataFrame:
    rows = [
        {"line_no": d.line_no, "time": d.record.time.isoformat(),
         "mnemonic": d.record.mnemonic, "text": d.record.text}
        for d in log.lines if isinstance(d.record, ERecord)
    ]
    return pd.DataFrame(rows, columns=_EVENT_COLUMNS)


def build_failures(log: FlightLog) -> pd.DataFrame:
    rows = [
        {"line_no": exc.line_no, "error": exc.label, "record_kind": exc.record_kind,
         "field": exc.field, "text": exc.text, "line": exc.line}
        for exc in log.failures
    ]
    return pd.DataFrame(rows, columns=_FAILURE_COLUMNS)


_BUILDERS: dict[str, Callable[[FlightLog], pd.DataFrame]] = {
    "fixes": build_fixes,
    "task": build_task,
    "headers": build_headers,
    "events": build_events,
    "failures": build_failures,
}


def build_tables(log: FlightLog, names: list[str] | None = None) -> dict[str, pd.DataFrame]:
    """Build the requested tables, in the order given.

    Raises:
        ValueError: If a name is not one of ``TABLE_NAMES``.
    """
    names = list(TABLE_NAMES) if names is None else names
    tables: dict[str, pd.DataFrame] = {}
    for name in names:
        if name not in _BUILDERS:
            raise ValueError(f"Unknown table '{name}'. Available: {list(TABLE_NAMES)}")
        tables[name] = _BUILDERS[name](log)
        logger.debug("Built table '%s' (%d rows)", name, len(tables[name]))
    return tables
