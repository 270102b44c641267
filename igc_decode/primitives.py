"""
Primitive field parsers for IGC lines.

Dates, times and latitude/longitude pairs appear in the same fixed
micro-format across many record kinds:

- date:      ``DDMMYY``          (6 chars)
- time:      ``HHMMSS``          (6 chars)
- latitude:  ``DDMMmmmN``        (8 chars, hemisphere ``N``/``S``)
- longitude: ``DDDMMmmmE``       (9 chars, hemisphere ``E``/``W``)
- position:  latitude + longitude (17 chars)

Each parser takes an exact-width substring and either returns a typed
value or raises ``PrimitiveParseError``.  Dates are syntactic only: a
flight date of ``000000`` is accepted and yields ``Date(0, 0, 2000)``.
Times and coordinates are range-checked.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from enum import Enum

from igc_decode.exceptions import PrimitiveParseError

_DIGITS = re.compile(r"[0-9]+")

DATE_WIDTH = 6
TIME_WIDTH = 6
LATITUDE_WIDTH = 8
LONGITUDE_WIDTH = 9
POSITION_WIDTH = LATITUDE_WIDTH + LONGITUDE_WIDTH


class Compass(str, Enum):
    """Hemisphere letter of a coordinate."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def sign(self) -> int:
        return -1 if self in (Compass.SOUTH, Compass.WEST) else 1


@dataclass(frozen=True)
class Date:
    """A ``DDMMYY`` date, years mapped onto 2000-2099."""

    day: int
    month: int
    year: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_date(self) -> dt.date:
        """Convert to ``datetime.date``; raises ``ValueError`` for e.g. ``00/00``."""
        return dt.date(self.year, self.month, self.day)


@dataclass(frozen=True)
class Time:
    """An ``HHMMSS`` UTC time of day."""

    hours: int
    minutes: int
    seconds: int

    def isoformat(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def to_time(self) -> dt.time:
        return dt.time(self.hours, self.minutes, self.seconds)


@dataclass(frozen=True)
class RawCoord:
    """One coordinate exactly as written: degrees, minutes, thousandths of a minute."""

    degrees: int
    minutes: int
    minutes_fraction: int
    sign: Compass

    def to_decimal(self) -> float:
        """Signed decimal degrees (south and west negative)."""
        minutes = self.minutes + self.minutes_fraction / 1000
        return self.sign.sign * (self.degrees + minutes / 60)


@dataclass(frozen=True)
class RawPosition:
    lat: RawCoord
    lon: RawCoord


def _digits(primitive: str, text: str, start: int, end: int) -> int:
    chunk = text[start:end]
    if len(chunk) != end - start or not _DIGITS.fullmatch(chunk):
        raise PrimitiveParseError(primitive, text, f"expected digits at [{start}:{end}]")
    return int(chunk)


def _check_width(primitive: str, text: str, width: int) -> None:
    if len(text) != width:
        raise PrimitiveParseError(
            primitive, text, f"expected {width} characters, got {len(text)}"
        )


def parse_date(text: str) -> Date:
    """Parse ``DDMMYY``.  No calendar validation is applied."""
    _check_width("date", text, DATE_WIDTH)
    day = _digits("date", text, 0, 2)
    month = _digits("date", text, 2, 4)
    year = _digits("date", text, 4, 6)
    return Date(day=day, month=month, year=2000 + year)


def parse_time(text: str) -> Time:
    """Parse ``HHMMSS``."""
    _check_width("time", text, TIME_WIDTH)
    hours = _digits("time", text, 0, 2)
    minutes = _digits("time", text, 2, 4)
    seconds = _digits("time", text, 4, 6)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise PrimitiveParseError("time", text, "component out of range")
    return Time(hours=hours, minutes=minutes, seconds=seconds)


def _parse_coord(
    primitive: str,
    text: str,
    degree_digits: int,
    max_degrees: int,
    hemispheres: tuple[Compass, Compass],
) -> RawCoord:
    _check_width(primitive, text, degree_digits + 6)
    degrees = _digits(primitive, text, 0, degree_digits)
    minutes = _digits(primitive, text, degree_digits, degree_digits + 2)
    fraction = _digits(primitive, text, degree_digits + 2, degree_digits + 5)

    letter = text[-1]
    allowed = {c.value: c for c in hemispheres}
    if letter not in allowed:
        raise PrimitiveParseError(
            primitive, text, f"hemisphere must be one of {sorted(allowed)}, got {letter!r}"
        )
    if degrees > max_degrees or minutes > 59:
        raise PrimitiveParseError(primitive, text, "component out of range")
    return RawCoord(
        degrees=degrees,
        minutes=minutes,
        minutes_fraction=fraction,
        sign=allowed[letter],
    )


def parse_latitude(text: str) -> RawCoord:
    """Parse ``DDMMmmmN`` / ``DDMMmmmS``."""
    return _parse_coord("latitude", text, 2, 90, (Compass.NORTH, Compass.SOUTH))


def parse_longitude(text: str) -> RawCoord:
    """Parse ``DDDMMmmmE`` / ``DDDMMmmmW``."""
    return _parse_coord("longitude", text, 3, 180, (Compass.EAST, Compass.WEST))


def parse_position(text: str) -> RawPosition:
    """Parse a 17-character latitude/longitude pair."""
    _check_width("position", text, POSITION_WIDTH)
    return RawPosition(
        lat=parse_latitude(text[:LATITUDE_WIDTH]),
        lon=parse_longitude(text[LATITUDE_WIDTH:]),
    )
