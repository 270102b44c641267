"""
Base record class and shared field-slicing helpers for igc-decode.

Every record kind implements this interface. The contract is:
1. ``parse(line)`` takes one line (no line terminator) whose first
   character is the record's ``tag`` and returns a frozen record.
2. Any failure is raised as a ``ParsingError`` subclass carrying the
   record kind, field name and offending substring.

The helpers below do the slicing so each decoder reads as a list of
``(offset, width, field)`` extractions.  Offsets are 0-based and
end-exclusive.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, TypeVar

from igc_decode.exceptions import (
    LineTooShortError,
    MalformedNumericError,
    MalformedPrimitiveError,
    PrimitiveParseError,
    UnexpectedTagError,
)

T = TypeVar("T")

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


class BaseRecord(ABC):
    """Abstract base class for IGC record kinds.

    Subclasses are frozen dataclasses that set ``tag`` (the leading
    character) and ``kind`` (a readable name used in diagnostics).
    """

    tag: ClassVar[str]
    kind: ClassVar[str]

    @classmethod
    @abstractmethod
    def parse(cls, line: str):
        """Decode one line into a record of this kind.

        Raises:
            ParsingError: If the line does not have this kind's shape.
        """


def require_tag(line: str, tag: str, kind: str) -> None:
    if not line or line[0] != tag:
        raise UnexpectedTagError(
            f"expected a line starting with {tag!r}",
            record_kind=kind,
            text=line[:1],
            line=line,
        )


def require_length(line: str, minimum: int, kind: str) -> None:
    if len(line) < minimum:
        raise LineTooShortError(
            f"need at least {minimum} characters, got {len(line)}",
            record_kind=kind,
            text=line,
            line=line,
        )


def digits(line: str, start: int, end: int, kind: str, field: str) -> int:
    """Parse ``line[start:end]`` as exactly ``end - start`` decimal digits."""
    chunk = line[start:end]
    if len(chunk) != end - start or not _UNSIGNED.fullmatch(chunk):
        raise MalformedNumericError(
            f"{field} must be {end - start} decimal digits",
            record_kind=kind,
            field=field,
            text=chunk,
            line=line,
        )
    return int(chunk)


def signed_digits(line: str, start: int, end: int, kind: str, field: str) -> int:
    """Like ``digits`` but allows a leading minus sign (e.g. ``-0012``)."""
    chunk = line[start:end]
    if len(chunk) != end - start or not _SIGNED.fullmatch(chunk):
        raise MalformedNumericError(
            f"{field} must be a {end - start}-character signed integer",
            record_kind=kind,
            field=field,
            text=chunk,
            line=line,
        )
    return int(chunk)


def primitive(
    parser: Callable[[str], T],
    line: str,
    start: int,
    end: int,
    kind: str,
    field: str,
) -> T:
    """Run a primitive parser on ``line[start:end]``, wrapping its failure."""
    chunk = line[start:end]
    try:
        return parser(chunk)
    except PrimitiveParseError as exc:
        raise MalformedPrimitiveError(
            exc.reason,
            record_kind=kind,
            field=field,
            text=chunk,
            line=line,
        ) from exc


def trailer(line: str, start: int) -> str | None:
    """Optional free text from ``start`` on; ``None`` iff the line ends there."""
    if len(line) > start:
        return line[start:]
    return None
