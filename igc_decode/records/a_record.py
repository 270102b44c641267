"""
A record: flight recorder manufacturer and serial, always the first line.

    A MMM NNN [id extension]
    A XCS AAA Thermal Pro
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.records.base import BaseRecord, require_length, require_tag, trailer

MIN_LENGTH = 7


@dataclass(frozen=True)
class ARecord(BaseRecord):
    tag: ClassVar[str] = "A"
    kind: ClassVar[str] = "A"

    manufacturer: str
    unique_id: str
    id_extension: str | None = None

    @classmethod
    def parse(cls, line: str) -> ARecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)
        return cls(
            manufacturer=line[1:4],
            unique_id=line[4:7],
            id_extension=trailer(line, MIN_LENGTH),
        )
