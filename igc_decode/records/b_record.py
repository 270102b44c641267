"""
B record: a GPS fix.

    B HHMMSS DDMMmmmN DDDMMmmmE V PPPPP GGGGG [extensions]
    B 110135 5206343N 00006198W A 00587 00558

``V`` is ``A`` for a 3D fix and ``V`` for a 2D fix or no GPS data.
Pressure and GNSS altitudes are in metres and may be negative
(``-0012``).  Anything after column 35 belongs to the extensions
declared by the file's I record and is kept verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.exceptions import ParsingError
from igc_decode.primitives import RawPosition, Time, parse_position, parse_time
from igc_decode.records.base import (
    BaseRecord,
    primitive,
    require_length,
    require_tag,
    signed_digits,
)
from igc_decode.records.extension import ExtensionDefRecord

MIN_LENGTH = 35

_VALIDITY = {"A": True, "V": False}


@dataclass(frozen=True)
class BRecord(BaseRecord):
    """A single fix.

    Attributes:
        timestamp: UTC time of the fix.
        position: Raw latitude/longitude.
        fix_valid: ``True`` for a 3D fix (``A``), ``False`` otherwise (``V``).
        pressure_alt: Pressure altitude in metres.
        gps_alt: GNSS altitude in metres.
        extension_string: Text after column 35 (``""`` if none).
    """

    tag: ClassVar[str] = "B"
    kind: ClassVar[str] = "B"

    timestamp: Time
    position: RawPosition
    fix_valid: bool
    pressure_alt: int
    gps_alt: int
    extension_string: str = ""

    @classmethod
    def parse(cls, line: str) -> BRecord:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, MIN_LENGTH, cls.kind)

        validity = line[24]
        if validity not in _VALIDITY:
            raise ParsingError(
                "fix validity must be 'A' or 'V'",
                record_kind=cls.kind,
                field="fix_valid",
                text=validity,
                line=line,
            )

        return cls(
            timestamp=primitive(parse_time, line, 1, 7, cls.kind, "timestamp"),
            position=primitive(parse_position, line, 7, 24, cls.kind, "position"),
            fix_valid=_VALIDITY[validity],
            pressure_alt=signed_digits(line, 25, 30, cls.kind, "pressure_alt"),
            gps_alt=signed_digits(line, 30, 35, cls.kind, "gps_alt"),
            extension_string=line[MIN_LENGTH:],
        )

    def extension_values(self, definition: ExtensionDefRecord) -> dict[str, str]:
        """Split ``extension_string`` using the file's I-record definition."""
        return definition.extract(self.extension_string, offset=MIN_LENGTH)
