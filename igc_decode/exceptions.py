"""
Custom exception hierarchy for igc-decode.

Every line-level failure derives from ``ParsingError`` and carries enough
context to produce a precise diagnostic: the record kind being decoded,
the field name, the offending substring, and the originating line.  The
reader fills in ``line_no`` when it knows it.

Unrecognised record tags are *not* errors; the dispatcher returns an
``Unrecognised`` record for them instead.
"""

from __future__ import annotations


class IgcDecodeError(Exception):
    """Base exception for all igc-decode errors."""


class PrimitiveParseError(IgcDecodeError, ValueError):
    """Raised by the date/time/position primitives on a malformed substring.

    Decoders never let this escape directly; they wrap it in
    ``MalformedPrimitiveError`` so the record kind and field are known.
    """

    def __init__(self, primitive: str, text: str, reason: str) -> None:
        self.primitive = primitive
        self.text = text
        self.reason = reason
        super().__init__(f"invalid {primitive} {text!r}: {reason}")


class ParsingError(IgcDecodeError):
    """Raised when a line cannot be decoded into a record.

    Attributes:
        record_kind: Name of the record kind being decoded (e.g. ``"C"``).
        field: Name of the field that failed, or ``None`` for whole-line
            failures.
        text: The offending substring (may be empty).
        line: The full line that was being decoded.
        line_no: 1-based line number, set by the reader when available.
    """

    label = "parse error"

    def __init__(
        self,
        message: str,
        *,
        record_kind: str | None = None,
        field: str | None = None,
        text: str | None = None,
        line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.record_kind = record_kind
        self.field = field
        self.text = text
        self.line = line
        self.line_no: int | None = None

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        parts = [f"{where}{self.label}: {self.message}"]
        if self.record_kind is not None:
            parts.append(f"kind={self.record_kind}")
        if self.field is not None:
            parts.append(f"field={self.field}")
        if self.text is not None:
            parts.append(f"text={self.text!r}")
        if self.line is not None:
            parts.append(f"line={self.line!r}")
        return " | ".join(parts)


class EmptyLineError(ParsingError):
    """Raised when the dispatcher receives a line with no leading tag byte."""

    label = "empty line"


class LineTooShortError(ParsingError):
    """Raised when a line is shorter than the minimum for its record kind."""

    label = "line too short"


class MalformedNumericError(ParsingError):
    """Raised when a fixed-width numeric slice is not purely decimal digits."""

    label = "malformed numeric field"


class MalformedPrimitiveError(ParsingError):
    """Raised when a delegated date/time/position parse fails.

    The underlying ``PrimitiveParseError`` is chained as ``__cause__``.
    """

    label = "malformed primitive"


class UnexpectedTagError(ParsingError):
    """Raised when a decoder is handed a line whose tag is not its own.

    The dispatcher never does this, so seeing it means a caller invoked a
    kind-specific decoder directly with the wrong line.
    """

    label = "unexpected leading tag"


class ConfigValidationError(IgcDecodeError):
    """Raised when a decode config file is empty or inconsistent."""


class ExportError(IgcDecodeError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
