"""
Unit tests for date/time/position primitives (igc_decode.primitives).
"""

from __future__ import annotations

import datetime as dt

import pytest

from igc_decode.exceptions import PrimitiveParseError
from igc_decode.primitives import (
    Compass,
    Date,
    RawCoord,
    RawPosition,
    Time,
    parse_date,
    parse_latitude,
    parse_longitude,
    parse_position,
    parse_time,
)


class TestParseDate:
    """Tests for parse_date()."""

    def test_basic(self):
        assert parse_date("230718") == Date(day=23, month=7, year=2018)

    def test_zero_date_is_accepted(self):
        """No calendar validation: 000000 is a common 'unset' flight date."""
        assert parse_date("000000") == Date(day=0, month=0, year=2000)

    def test_isoformat_passes_raw_digits(self):
        assert parse_date("000000").isoformat() == "2000-00-00"

    def test_to_date_rejects_impossible_date(self):
        with pytest.raises(ValueError):
            parse_date("000000").to_date()

    def test_to_date(self):
        assert parse_date("230718").to_date() == dt.date(2018, 7, 23)

    @pytest.mark.parametrize("text", ["23071", "2307189", "23O718", "", "23 718"])
    def test_malformed(self, text):
        with pytest.raises(PrimitiveParseError):
            parse_date(text)


class TestParseTime:
    """Tests for parse_time()."""

    def test_basic(self):
        assert parse_time("092044") == Time(hours=9, minutes=20, seconds=44)

    def test_to_time(self):
        assert parse_time("235959").to_time() == dt.time(23, 59, 59)

    @pytest.mark.parametrize("text", ["240000", "236000", "235960"])
    def test_out_of_range(self, text):
        with pytest.raises(PrimitiveParseError, match="out of range"):
            parse_time(text)

    def test_non_digit(self):
        with pytest.raises(PrimitiveParseError):
            parse_time("09204x")

    def test_non_ascii_digit(self):
        """Unicode digits are not decimal digits in this format."""
        with pytest.raises(PrimitiveParseError):
            parse_time("09204٣")


class TestParseCoordinates:
    """Tests for parse_latitude(), parse_longitude() and parse_position()."""

    def test_latitude(self):
        assert parse_latitude("5156040N") == RawCoord(51, 56, 40, Compass.NORTH)

    def test_longitude(self):
        assert parse_longitude("00038120W") == RawCoord(0, 38, 120, Compass.WEST)

    def test_latitude_rejects_east(self):
        with pytest.raises(PrimitiveParseError, match="hemisphere"):
            parse_latitude("5156040E")

    def test_longitude_rejects_north(self):
        with pytest.raises(PrimitiveParseError, match="hemisphere"):
            parse_longitude("00038120N")

    def test_latitude_out_of_range(self):
        with pytest.raises(PrimitiveParseError, match="out of range"):
            parse_latitude("9100000N")

    def test_minutes_out_of_range(self):
        with pytest.raises(PrimitiveParseError, match="out of range"):
            parse_longitude("00060000E")

    def test_position(self):
        assert parse_position("5156040N00038120W") == RawPosition(
            lat=RawCoord(51, 56, 40, Compass.NORTH),
            lon=RawCoord(0, 38, 120, Compass.WEST),
        )

    def test_position_wrong_width(self):
        with pytest.raises(PrimitiveParseError, match="17 characters"):
            parse_position("5156040N0003812W")

    def test_to_decimal_signs(self):
        assert RawCoord(51, 56, 40, Compass.NORTH).to_decimal() == pytest.approx(51.934)
        assert RawCoord(0, 38, 120, Compass.WEST).to_decimal() == pytest.approx(-0.635333, abs=1e-6)
        assert RawCoord(33, 30, 0, Compass.SOUTH).to_decimal() == pytest.approx(-33.5)
