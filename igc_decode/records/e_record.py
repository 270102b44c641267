"""
E record: a timed event such as a pilot event (``PEV``).

    E HHMMSS CCC [text]
    E 104533 PEV
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.primitives import Time, parse_time
from igc_decode.records.base import BaseRecord, primitive, require_length, require_tag, trailer

MIN_LENGTH = 10


@dataclass(frozen=True)
class ERecord(BaseRecord):
    tag: ClassVar[str] = "E"
    kind: ClassVar[str] = "E"

    time: Time
    mnemonic: str
    text: str | None = None

    @classmethod
    def parse(cls, line: str) -> ERecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)
        return cls(
            time=primitive(parse_time, line, 1, 7, cls.kind, "time"),
            mnemonic=line[7:10],
            text=trailer(line, MIN_LENGTH),
        )
