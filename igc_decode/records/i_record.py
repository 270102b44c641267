"""
I and J records: extension definitions for B and K records respectively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.records.base import BaseRecord, require_tag
from igc_decode.records.extension import COUNT_WIDTHS, ExtensionDefRecord


@dataclass(frozen=True)
class IRecord(BaseRecord):
    """Extensions appended to every B record after column 35."""

    tag: ClassVar[str] = "I"
    kind: ClassVar[str] = "I"

    definition: ExtensionDefRecord

    @classmethod
    def parse(cls, line: str) -> IRecord:
        require_tag(line, cls.tag, cls.kind)
        return cls(ExtensionDefRecord.parse(line, COUNT_WIDTHS[cls.tag], cls.kind))

    def __str__(self) -> str:
        return self.definition.format(self.tag)


@dataclass(frozen=True)
class JRecord(BaseRecord):
    """Extensions appended to every K record after column 7."""

    tag: ClassVar[str] = "J"
    kind: ClassVar[str] = "J"

    definition: ExtensionDefRecord

    @classmethod
    def parse(cls, line: str) -> JRecord:
        require_tag(line, cls.tag, cls.kind)
        return cls(ExtensionDefRecord.parse(line, COUNT_WIDTHS[cls.tag], cls.kind))

    def __str__(self) -> str:
        return self.definition.format(self.tag)
