"""
Extension definitions shared by I and J records.

An I record declares extra columns appended to every B (fix) record; a
J record does the same for K records.  Both use one layout::

    <tag> NN (SS FF CCC) * NN
    I     03  36 38 FXA   39 41 ENL   42 46 TAS

where ``NN`` is the number of extensions, ``SS``/``FF`` are the 1-based,
inclusive start and end columns in the target record, and ``CCC`` is the
three-letter mnemonic.  Columns are not checked for overlap or ordering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from igc_decode.records.base import digits, require_length

logger = logging.getLogger(__name__)

ENTRY_WIDTH = 7

# Width of the count field, per record tag that embeds an extension list
COUNT_WIDTHS: dict[str, int] = {"I": 2, "J": 2}


@dataclass(frozen=True)
class Extension:
    """One extension column definition (1-based, inclusive columns)."""

    mnemonic: str
    start_byte: int
    end_byte: int

    def extract(self, line: str, offset: int = 0) -> str | None:
        """Return the slice of *line* this extension addresses.

        *offset* is the number of leading columns already cut from *line*,
        e.g. 35 when passing only the extension part of a B record.
        Returns ``None`` when the line is too short to hold the whole field.
        """
        if len(line) < self.end_byte - offset or self.start_byte <= offset:
            return None
        return line[self.start_byte - 1 - offset : self.end_byte - offset]

    def format(self) -> str:
        if len(self.mnemonic) != 3:
            raise ValueError(f"Extension mnemonic must be 3 characters: {self.mnemonic!r}")
        for column in (self.start_byte, self.end_byte):
            if not 0 <= column <= 99:
                raise ValueError(
                    f"Extension column {column} does not fit in 2 digits ({self.mnemonic})"
                )
        return f"{self.start_byte:02d}{self.end_byte:02d}{self.mnemonic}"


@dataclass(frozen=True)
class ExtensionDefRecord:
    """Count plus ordered extension list, as carried by I and J records."""

    num_extensions: int
    extensions: tuple[Extension, ...] = ()

    @classmethod
    def parse(
        cls,
        line: str,
        count_width: int = 2,
        kind: str = "extension definition",
    ) -> ExtensionDefRecord:
        """Decode the count field and extension entries that follow the tag.

        Args:
            line: Full line including the leading tag character.
            count_width: Number of digits in the count field.
            kind: Record kind name used in diagnostics.

        Raises:
            MalformedNumericError: If the count or a column is not decimal.
            LineTooShortError: If the line cannot hold the declared entries.
        """
        count_end = 1 + count_width
        require_length(line, count_end, kind)
        count = digits(line, 1, count_end, kind, "num_extensions")
        require_length(line, count_end + count * ENTRY_WIDTH, kind)

        extensions = []
        for i in range(count):
            offset = count_end + i * ENTRY_WIDTH
            extensions.append(
                Extension(
                    mnemonic=line[offset + 4 : offset + 7],
                    start_byte=digits(line, offset, offset + 2, kind, f"extensions[{i}].start"),
                    end_byte=digits(line, offset + 2, offset + 4, kind, f"extensions[{i}].end"),
                )
            )

        trailing = len(line) - (count_end + count * ENTRY_WIDTH)
        if trailing:
            logger.debug("Ignoring %d trailing characters after %s", trailing, kind)
        return cls(num_extensions=count, extensions=tuple(extensions))

    def format(self, tag: str) -> str:
        """Render the canonical line for the record kind *tag* (``"I"`` or ``"J"``).

        Raises:
            ValueError: If *tag* does not embed extensions, or a count, column
                or mnemonic does not fit its fixed width.
        """
        if tag not in COUNT_WIDTHS:
            raise ValueError(
                f"Record kind {tag!r} has no extension list. "
                f"Supported kinds: {sorted(COUNT_WIDTHS)}"
            )
        width = COUNT_WIDTHS[tag]
        if not 0 <= self.num_extensions < 10**width:
            raise ValueError(
                f"Extension count {self.num_extensions} does not fit in {width} digits"
            )
        body = "".join(ext.format() for ext in self.extensions)
        return f"{tag}{self.num_extensions:0{width}d}{body}"

    def extract(self, line: str, offset: int = 0) -> dict[str, str]:
        """Map each mnemonic to its slice of a B or K *line*.

        Extensions that run past the end of the line are left out.
        See ``Extension.extract`` for *offset*.
        """
        values: dict[str, str] = {}
        for ext in self.extensions:
            value = ext.extract(line, offset)
            if value is not None:
                values[ext.mnemonic] = value
        return values
