"""
Unit tests for the exporter (igc_decode.export).

Tests CSV and Parquet export, directory creation and error handling
using pytest's tmp_path fixture.
"""

from __future__ import annotations

import pandas as pd
import pytest

from igc_decode.exceptions import ExportError
from igc_decode.export import export_tables


def _make_tables() -> dict[str, pd.DataFrame]:
    """Build a pair of small DataFrames for testing."""
    return {
        "fixes": pd.DataFrame({
            "line_no": [10, 11],
            "time": ["11:01:35", "11:01:45"],
            "latitude": [52.105717, 52.104317],
            "longitude": [-0.1033, -0.104917],
            "gps_alt": [558, 564],
        }),
        "headers": pd.DataFrame({
            "line_no": [2],
            "source": ["F"],
            "mnemonic": ["DTE"],
            "data": ["230718"],
        }),
    }


class TestExportCSV:
    """Tests for CSV export."""

    def test_basic_csv_export(self, tmp_path):
        paths = export_tables(_make_tables(), tmp_path, output_format="csv")
        assert len(paths) == 2
        assert all(p.endswith(".csv") for p in paths)
        assert (tmp_path / "fixes.csv").exists()
        assert (tmp_path / "headers.csv").exists()

    def test_csv_round_trip(self, tmp_path):
        export_tables(_make_tables(), tmp_path, output_format="csv")
        loaded = pd.read_csv(tmp_path / "fixes.csv")
        assert list(loaded.columns) == ["line_no", "time", "latitude", "longitude", "gps_alt"]
        assert loaded["gps_alt"].iloc[0] == 558


class TestExportParquet:
    """Tests for Parquet export."""

    def test_parquet_round_trip(self, tmp_path):
        export_tables(_make_tables(), tmp_path, output_format="parquet")
        loaded = pd.read_parquet(tmp_path / "fixes.parquet")
        pd.testing.assert_frame_equal(loaded, _make_tables()["fixes"])

    def test_creates_nested_directory(self, tmp_path):
        out = tmp_path / "a" / "b"
        export_tables(_make_tables(), out)
        assert (out / "fixes.parquet").exists()


class TestExportErrors:
    """Tests for error handling."""

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_tables(_make_tables(), tmp_path, output_format="xlsx")

    def test_write_failure_wrapped(self, tmp_path):
        blocker = tmp_path / "fixes.csv"
        blocker.mkdir()
        with pytest.raises(ExportError, match="fixes.csv"):
            export_tables(_make_tables(), tmp_path, output_format="csv")
