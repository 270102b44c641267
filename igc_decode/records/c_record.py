"""
C records: task declaration and task turnpoints.

The ``C`` tag is shared by two structurally different lines:

- a *declaration* line, which opens the task block::

      C DDMMYY HHMMSS DDMMYY TTTT NN [task name]
      C 230718 092044 000000 0002 04 Foo task

- a *turnpoint* line, one per task point::

      C DDMMmmmN DDDMMmmmE [point name]
      C 5156040N 00038120W LBZ-Leighton Buzzard NE

Which one a line is gets decided by ``igc_decode.detect.is_turnpoint_line``;
the decoders here assume the caller has already made that choice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from igc_decode.primitives import Date, RawPosition, Time, parse_date, parse_position, parse_time
from igc_decode.records.base import (
    BaseRecord,
    digits,
    primitive,
    require_length,
    require_tag,
    trailer,
)

DECLARATION_MIN_LENGTH = 25
TURNPOINT_MIN_LENGTH = 18


@dataclass(frozen=True)
class CRecordDeclaration(BaseRecord):
    """The task declaration line that precedes the turnpoint lines.

    Attributes:
        date: Date the task was declared.
        time: Time the task was declared.
        flight_date: Intended flight date; ``000000`` is common and kept as-is.
        task_id: Task number for the day (0-9999).
        turnpoint_count: Number of turnpoints, excluding takeoff/start/finish/landing.
        name: Free-text task name, or ``None`` when the line stops at column 25.
    """

    tag: ClassVar[str] = "C"
    kind: ClassVar[str] = "C (declaration)"

    date: Date
    time: Time
    flight_date: Date
    task_id: int
    turnpoint_count: int
    name: str | None = None

    @classmethod
    def parse(cls, line: str) -> CRecordDeclaration:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, DECLARATION_MIN_LENGTH, cls.kind)

        return cls(
            date=primitive(parse_date, line, 1, 7, cls.kind, "date"),
            time=primitive(parse_time, line, 7, 13, cls.kind, "time"),
            flight_date=primitive(parse_date, line, 13, 19, cls.kind, "flight_date"),
            task_id=digits(line, 19, 23, cls.kind, "task_id"),
            turnpoint_count=digits(line, 23, 25, cls.kind, "turnpoint_count"),
            name=trailer(line, DECLARATION_MIN_LENGTH),
        )


@dataclass(frozen=True)
class CRecordTurnpoint(BaseRecord):
    """A single task point: position plus optional name."""

    tag: ClassVar[str] = "C"
    kind: ClassVar[str] = "C (turnpoint)"

    position: RawPosition
    name: str | None = None

    @classmethod
    def parse(cls, line: str) -> CRecordTurnpoint:
        require_tag(line, cls.tag, cls.kind)
        require_length(line, TURNPOINT_MIN_LENGTH, cls.kind)

        return cls(
            position=primitive(parse_position, line, 1, 18, cls.kind, "position"),
            name=trailer(line, TURNPOINT_MIN_LENGTH),
        )
