"""
Unit tests for DataFrame builders (igc_decode.tables).
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from igc_decode.primitives import Compass, RawCoord
from igc_decode.reader import decode_lines
from igc_decode.tables import build_tables, signed_degrees
from tests.conftest import SAMPLE_IGC_LINES


@pytest.fixture
def sample_log():
    return decode_lines(SAMPLE_IGC_LINES)


class TestSignedDegrees:
    def test_matches_scalar_conversion(self):
        coords = [
            RawCoord(52, 6, 343, Compass.NORTH),
            RawCoord(0, 6, 198, Compass.WEST),
            RawCoord(33, 30, 0, Compass.SOUTH),
        ]
        result = signed_degrees(coords)
        np.testing.assert_allclose(result, [c.to_decimal() for c in coords])

    def test_empty(self):
        assert signed_degrees([]).shape == (0,)


class TestBuildTables:
    """Tests for build_tables() over the shared sample."""

    def test_fixes(self, sample_log):
        fixes = build_tables(sample_log, ["fixes"])["fixes"]
        assert list(fixes.columns) == [
            "line_no", "time", "latitude", "longitude", "fix_valid",
            "pressure_alt", "gps_alt", "FXA", "ENL", "TAS",
        ]
        assert len(fixes) == 2
        first = fixes.iloc[0]
        assert first["time"] == "11:01:35"
        assert first["latitude"] == pytest.approx(52 + 6.343 / 60)
        assert first["longitude"] == pytest.approx(-6.198 / 60)
        assert first["pressure_alt"] == 587
        assert first["FXA"] == "020"
        assert first["TAS"] == "01234"

    def test_fixes_without_i_record(self):
        log = decode_lines(["B1101355206343N00006198WA0058700558"])
        fixes = build_tables(log, ["fixes"])["fixes"]
        assert list(fixes.columns)[-1] == "gps_alt"

    def test_task(self, sample_log):
        task = build_tables(sample_log, ["task"])["task"]
        assert list(task["kind"]) == ["declaration", "turnpoint", "turnpoint"]
        assert task.iloc[0]["declared"] == "2018-07-23T09:20:44"
        assert task.iloc[0]["task_id"] == 2
        assert pd.isna(task.iloc[0]["latitude"])
        assert task.iloc[1]["name"] == "LBZ-Leighton Buzzard NE"
        assert task.iloc[1]["latitude"] == pytest.approx(51.934)

    def test_headers_and_events(self, sample_log):
        tables = build_tables(sample_log, ["headers", "events"])
        assert list(tables["headers"]["mnemonic"]) == ["DTE", "PLT", "GTY"]
        assert tables["events"].iloc[0]["mnemonic"] == "PEV"
        assert tables["events"].iloc[0]["text"] == "pilot event"

    def test_failures(self, sample_log):
        failures = build_tables(sample_log, ["failures"])["failures"]
        assert list(failures["line_no"]) == [17, 18]
        assert list(failures["error"]) == ["malformed primitive", "line too short"]
        assert failures.iloc[0]["field"] == "timestamp"

    def test_default_builds_all(self, sample_log):
        assert list(sample_log.to_tables()) == ["fixes", "task", "headers", "events", "failures"]

    def test_empty_log(self):
        tables = build_tables(decode_lines([]))
        assert all(df.empty for df in tables.values())

    def test_unknown_name(self, sample_log):
        with pytest.raises(ValueError, match="Unknown table"):
            build_tables(sample_log, ["gliders"])
