"""
D record: differential GPS.

    D Q SSSS
    D 2 0100

``Q`` is ``1`` for plain GPS, ``2`` for DGPS; ``SSSS`` is the station id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.exceptions import ParsingError
from igc_decode.records.base import BaseRecord, require_length, require_tag

MIN_LENGTH = 6

GPS = "1"
DGPS = "2"


@dataclass(frozen=True)
class DRecord(BaseRecord):
    tag: ClassVar[str] = "D"
    kind: ClassVar[str] = "D"

    gps_qualifier: str
    station_id: str

    @classmethod
    def parse(cls, line: str) -> DRecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)

        qualifier = line[1]
        if qualifier not in (GPS, DGPS):
            raise ParsingError(
                "GPS qualifier must be '1' (GPS) or '2' (DGPS)",
                record_kind=cls.kind,
                field="gps_qualifier",
                text=qualifier,
                line=line,
            )
        return cls(gps_qualifier=qualifier, station_id=line[2:6])

    @property
    def is_differential(self) -> bool:
        return self.gps_qualifier == DGPS
