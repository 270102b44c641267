"""
F record: satellite constellation in use, as two-character satellite ids.

    F HHMMSS (NN)*
    F 160240 04 06 09 12 36 24 22 18 21
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.exceptions import ParsingError
from igc_decode.primitives import Time, parse_time
from igc_decode.records.base import BaseRecord, primitive, require_length, require_tag

MIN_LENGTH = 7
SATELLITE_ID_WIDTH = 2


@dataclass(frozen=True)
class FRecord(BaseRecord):
    tag: ClassVar[str] = "F"
    kind: ClassVar[str] = "F"

    time: Time
    satellites: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> FRecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)

        ids = line[MIN_LENGTH:]
        if len(ids) % SATELLITE_ID_WIDTH:
            raise ParsingError(
                "satellite list must be whole two-character ids",
                record_kind=cls.kind,
                field="satellites",
                text=ids,
                line=line,
            )
        return cls(
            time=primitive(parse_time, line, 1, 7, cls.kind, "time"),
            satellites=tuple(
                ids[i : i + SATELLITE_ID_WIDTH] for i in range(0, len(ids), SATELLITE_ID_WIDTH)
            ),
        )
