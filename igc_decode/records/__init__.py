"""
Record kinds for igc-decode.

Each IGC line is identified by its first character.  This sub-package
holds one frozen dataclass per record kind, all derived from
``BaseRecord`` (see base.py), plus the ``Unrecognised`` marker used for
tags outside the format.

``Record`` is the closed union of every value the dispatcher
(``igc_decode.detect.parse_line``) can return.
"""

from __future__ import annotations

from typing import Union

from igc_decode.records.a_record import ARecord
from igc_decode.records.b_record import BRecord
from igc_decode.records.base import BaseRecord
from igc_decode.records.c_record import CRecordDeclaration, CRecordTurnpoint
from igc_decode.records.d_record import DRecord
from igc_decode.records.e_record import ERecord
from igc_decode.records.extension import Extension, ExtensionDefRecord
from igc_decode.records.f_record import FRecord
from igc_decode.records.h_record import HRecord
from igc_decode.records.i_record import IRecord, JRecord
from igc_decode.records.k_record import KRecord
from igc_decode.records.text_records import GRecord, LRecord, Unrecognised

Record = Union[
    ARecord,
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
    Unrecognised,
]

__all__ = [
    "ARecord",
    "BRecord",
    "BaseRecord",
    "CRecordDeclaration",
    "CRecordTurnpoint",
    "DRecord",
    "ERecord",
    "Extension",
    "ExtensionDefRecord",
    "FRecord",
    "GRecord",
    "HRecord",
    "IRecord",
    "JRecord",
    "KRecord",
    "LRecord",
    "Record",
    "Unrecognised",
]
