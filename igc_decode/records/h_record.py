"""
H record: file header.

    H S CCC data
    H F DTE 230718
    H F PLT PILOTINCHARGE: Jane Doe

``S`` is the data source: ``F`` (flight recorder), ``O`` (observer) or
``P`` (pilot).  ``data`` keeps everything after the mnemonic verbatim,
including any ``LONGNAME:`` prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.exceptions import ParsingError
from igc_decode.records.base import BaseRecord, require_length, require_tag

MIN_LENGTH = 5

SOURCES = {"F": "flight recorder", "O": "official observer", "P": "pilot"}


@dataclass(frozen=True)
class HRecord(BaseRecord):
    tag: ClassVar[str] = "H"
    kind: ClassVar[str] = "H"

    source: str
    mnemonic: str
    data: str = ""

    @classmethod
    def parse(cls, line: str) -> HRecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)

        source = line[1]
        if source not in SOURCES:
            raise ParsingError(
                f"header source must be one of {sorted(SOURCES)}",
                record_kind=cls.kind,
                field="source",
                text=source,
                line=line,
            )
        return cls(source=source, mnemonic=line[2:5], data=line[5:])

    @property
    def value(self) -> str:
        """``data`` with any ``LONGNAME:`` prefix removed and whitespace stripped."""
        _, sep, rest = self.data.partition(":")
        return (rest if sep else self.data).strip()
