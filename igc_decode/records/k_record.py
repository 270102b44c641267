"""
K record: a timed data record whose columns are declared by the J record.

    K HHMMSS [extensions]
    K 160245 090
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.primitives import Time, parse_time
from igc_decode.records.base import BaseRecord, primitive, require_length, require_tag
from igc_decode.records.extension import ExtensionDefRecord

MIN_LENGTH = 7


@dataclass(frozen=True)
class KRecord(BaseRecord):
    tag: ClassVar[str] = "K"
    kind: ClassVar[str] = "K"

    time: Time
    extension_string: str = ""

    @classmethod
    def parse(cls, line: str) -> KRecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)
        return cls(
            time=primitive(parse_time, line, 1, 7, cls.kind, "time"),
            extension_string=line[MIN_LENGTH:],
        )

    def extension_values(self, definition: ExtensionDefRecord) -> dict[str, str]:
        """Split ``extension_string`` using the file's J-record definition."""
        return definition.extract(self.extension_string, offset=MIN_LENGTH)
