"""
Record dispatch for IGC lines.

Routes each line to the decoder for its record kind by looking at the
leading tag character.  Tag ``C`` is shared by two line shapes, so for
it a second character is inspected as well.

Dispatch algorithm:
1. Empty line -> ``EmptyLineError`` (there is no tag to inspect).
2. Tag ``C``: ``is_turnpoint_line()`` decides between
   ``CRecordTurnpoint`` and ``CRecordDeclaration``.
3. Any other known tag -> its decoder from the tag map.
4. Unknown tag -> ``Unrecognised(line)``; never an error.

Decoder failures propagate unchanged to the caller.
"""

from __future__ import annotations

import logging

from igc_decode.exceptions import EmptyLineError
from igc_decode.records import (
    ARecord,
    BaseRecord,
    BRecord,
    CRecordDeclaration,
    CRecordTurnpoint,
    DRecord,
    ERecord,
    FRecord,
    GRecord,
    HRecord,
    IRecord,
    JRecord,
    KRecord,
    LRecord,
    Record,
    Unrecognised,
)

logger = logging.getLogger(__name__)

# Index of the latitude hemisphere letter in a C turnpoint line.  In a
# declaration line the same column holds a digit of the declaration time.
_HEMISPHERE_INDEX = 8
_HEMISPHERES = frozenset("NS")

# Maps leading tag -> record class (C is handled separately)
_DECODER_MAP: dict[str, type[BaseRecord]] = {
    record_cls.tag: record_cls
    for record_cls in (
        ARecord,
        BRecord,
        DRecord,
        ERecord,
        FRecord,
        GRecord,
        HRecord,
        IRecord,
        JRecord,
        KRecord,
        LRecord,
    )
}


def is_turnpoint_line(line: str) -> bool:
    """True if a ``C`` line has the turnpoint shape rather than the declaration shape.

    A turnpoint line's 9th character is the latitude hemisphere (``N``/``S``);
    a declaration line has a digit there.  Lines too short to have a 9th
    character are treated as declarations (whose decoder then reports the
    short line).
    """
    return len(line) > _HEMISPHERE_INDEX and line[_HEMISPHERE_INDEX] in _HEMISPHERES


def detect_kind(line: str) -> type[BaseRecord] | type[Unrecognised]:
    """Return the record class ``parse_line`` would use for *line*.

    Raises:
        EmptyLineError: If *line* is empty.
    """
    if not line:
        raise EmptyLineError("line has no record tag", line=line)

    tag = line[0]
    if tag == CRecordDeclaration.tag:
        return CRecordTurnpoint if is_turnpoint_line(line) else CRecordDeclaration
    return _DECODER_MAP.get(tag, Unrecognised)


def parse_line(line: str) -> Record:
    """Decode one IGC line into a typed record.

    Args:
        line: A single line with its line terminator already removed.

    Returns:
        The decoded record, or ``Unrecognised`` for an unknown leading tag.

    Raises:
        EmptyLineError: If *line* is empty.
        ParsingError: If the tag is known but the line does not decode.
    """
    record_cls = detect_kind(line)
    if record_cls is Unrecognised:
        logger.debug("Unrecognised record tag %r", line[0])
        return Unrecognised(line)
    return record_cls.parse(line)
