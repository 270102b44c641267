"""
Unit tests for the line reader (igc_decode.reader).

Uses the shared sample log from conftest, written to ``tmp_path`` where
a real file is needed.
"""

from __future__ import annotations

import pytest

from igc_decode.config import ReaderConfig
from igc_decode.exceptions import LineTooShortError, MalformedPrimitiveError, ParsingError
from igc_decode.flight_log import DecodedLine
from igc_decode.reader import decode_lines, iter_decoded, read_log
from igc_decode.records import BRecord, CRecordDeclaration, CRecordTurnpoint, Unrecognised
from tests.conftest import SAMPLE_IGC_LINES


class TestIterDecoded:
    """Tests for iter_decoded()."""

    def test_strips_line_terminators(self):
        items = list(iter_decoded(["HFDTE230718\r\n", "HFDTE230718\n"]))
        assert all(isinstance(i, DecodedLine) for i in items)
        assert items[0].record.data == "230718"
        assert items[1].line_no == 2

    def test_collect_yields_errors(self):
        items = list(iter_decoded(["ZZZ", "C2307", "HFDTE230718"], on_error="collect"))
        assert isinstance(items[1], LineTooShortError)
        assert items[1].line_no == 2

    def test_skip_drops_errors(self):
        items = list(iter_decoded(["C2307", "HFDTE230718"], on_error="skip"))
        assert len(items) == 1
        assert items[0].line_no == 2

    def test_raise_attaches_line_number(self):
        with pytest.raises(LineTooShortError) as exc_info:
            list(iter_decoded(["HFDTE230718", "C2307"], on_error="raise"))
        assert exc_info.value.line_no == 2
        assert str(exc_info.value).startswith("line 2: ")

    def test_blank_line_is_a_failure(self):
        items = list(iter_decoded(["HFDTE230718", ""]))
        assert isinstance(items[1], ParsingError)

    def test_bad_policy(self):
        with pytest.raises(ValueError, match="on_error"):
            list(iter_decoded([], on_error="ignore"))


class TestDecodeLines:
    """Tests for decode_lines() over the shared sample."""

    def test_collect(self):
        log = decode_lines(SAMPLE_IGC_LINES)
        assert len(log.lines) == 17
        assert [e.line_no for e in log.failures] == [17, 18]
        assert isinstance(log.failures[0], MalformedPrimitiveError)
        assert isinstance(log.failures[1], LineTooShortError)

    def test_skip(self):
        log = decode_lines(SAMPLE_IGC_LINES, ReaderConfig(on_error="skip"))
        assert len(log.lines) == 17
        assert log.failures == []

    def test_raise(self):
        with pytest.raises(MalformedPrimitiveError) as exc_info:
            decode_lines(SAMPLE_IGC_LINES, ReaderConfig(on_error="raise"))
        assert exc_info.value.line_no == 17

    def test_drop_unrecognised(self):
        log = decode_lines(SAMPLE_IGC_LINES, ReaderConfig(keep_unrecognised=False))
        assert log.unrecognised == []
        assert len(log.lines) == 16

    def test_keeps_file_order(self):
        log = decode_lines(SAMPLE_IGC_LINES)
        line_nos = [d.line_no for d in log.lines]
        assert line_nos == sorted(line_nos)
        c_records = [
            r for r in log.records if isinstance(r, (CRecordDeclaration, CRecordTurnpoint))
        ]
        assert isinstance(c_records[0], CRecordDeclaration)
        assert all(isinstance(r, CRecordTurnpoint) for r in c_records[1:])


class TestReadLog:
    """Tests for read_log() against a file on disk."""

    def test_reads_crlf_file(self, sample_igc_path):
        log = read_log(sample_igc_path)
        assert log.source == str(sample_igc_path)
        assert len(log.fixes) == 2
        assert all(isinstance(f, BRecord) for f in log.fixes)
        assert log.unrecognised == [Unrecognised("ZUNKNOWN")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_log(tmp_path / "nope.igc")

    def test_undecodable_bytes_replaced(self, tmp_path):
        path = tmp_path / "latin.igc"
        path.write_bytes(b"HFPLTPILOTINCHARGE: J\xf6rg\r\n")
        log = read_log(path)
        assert log.headers["PLT"] == "J\ufffdrg"
