"""
G and L records: free text with no internal structure.

G lines carry the security signature; L lines carry logbook comments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.records.base import BaseRecord, require_tag


@dataclass(frozen=True)
class GRecord(BaseRecord):
    tag: ClassVar[str] = "G"
    kind: ClassVar[str] = "G"

    data: str = ""

    @classmethod
    def parse(cls, line: str) -> GRecord:
        require_tag(line, cls.tag, cls.kind)
        return cls(data=line[1:])


@dataclass(frozen=True)
class LRecord(BaseRecord):
    tag: ClassVar[str] = "L"
    kind: ClassVar[str] = "L"

    log_string: str = ""

    @classmethod
    def parse(cls, line: str) -> LRecord:
        require_tag(line, cls.tag, cls.kind)
        return cls(log_string=line[1:])


@dataclass(frozen=True)
class Unrecognised:
    """A line whose leading tag is not a known record kind.

    Not an error: the format tolerates unknown kinds, and callers can
    skip or log these and carry on.
    """

    line: str

    @property
    def tag(self) -> str:
        return self.line[:1]
