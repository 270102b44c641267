"""
Decoded flight log handle.

A ``FlightLog`` holds the outcome of decoding one IGC file line by
line: every successfully decoded record together with the failures the
reader collected.  It offers convenience accessors for the parts most
callers want (header fields, fixes, the declared task) and can turn
itself into pandas tables via ``to_tables()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from igc_decode.exceptions import ParsingError
from igc_decode.records import (
    BRecord,
    CRecordDeclaration,
    CRecordTurnpoint,
    ERecord,
    HRecord,
    IRecord,
    JRecord,
    KRecord,
    Record,
    Unrecognised,
)


@dataclass(frozen=True)
class DecodedLine:
    """One successfully decoded line and where it came from."""

    line_no: int
    record: Record


@dataclass
class FlightLog:
    """Records and failures decoded from one IGC source.

    Attributes:
        source: File path or other label of the input.
        lines: Decoded lines in file order.
        failures: Collected ``ParsingError``s, each with ``line_no`` set.
    """

    source: str
    lines: list[DecodedLine] = field(default_factory=list)
    failures: list[ParsingError] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"FlightLog(source={self.source!r}, records={len(self.lines)}, "
            f"failures={len(self.failures)})"
        )

    @property
    def records(self) -> list[Record]:
        return [decoded.record for decoded in self.lines]

    def of_type(self, record_cls: type) -> list:
        return [r for r in self.records if isinstance(r, record_cls)]

    @property
    def fixes(self) -> list[BRecord]:
        return self.of_type(BRecord)

    @property
    def events(self) -> list[ERecord]:
        return self.of_type(ERecord)

    @property
    def unrecognised(self) -> list[Unrecognised]:
        return self.of_type(Unrecognised)

    @property
    def headers(self) -> dict[str, str]:
        """Header values keyed by mnemonic (first occurrence wins)."""
        result: dict[str, str] = {}
        for record in self.of_type(HRecord):
            result.setdefault(record.mnemonic, record.value)
        return result

    @property
    def fix_extensions(self) -> IRecord | None:
        found = self.of_type(IRecord)
        return found[0] if found else None

    @property
    def k_extensions(self) -> JRecord | None:
        found = self.of_type(JRecord)
        return found[0] if found else None

    @property
    def declaration(self) -> CRecordDeclaration | None:
        found = self.of_type(CRecordDeclaration)
        return found[0] if found else None

    @property
    def turnpoints(self) -> list[CRecordTurnpoint]:
        return self.of_type(CRecordTurnpoint)

    @property
    def k_records(self) -> list[KRecord]:
        return self.of_type(KRecord)

    def to_tables(self, names: list[str] | None = None) -> dict[str, pd.DataFrame]:
        """Build the named tables (default: all).  See ``igc_decode.tables``."""
        from igc_decode.tables import build_tables

        return build_tables(self, names)
