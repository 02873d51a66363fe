# ==============================================================================
# Curve Sight - Horizontal Curve and Sight Distance Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Tests for Station Formatting Module
====================================

Tests the station parsing and formatting utilities used for
US customary station notation (e.g., "10284+50.00").
"""

import pytest

from curve_sight.core.errors import ParseError
from curve_sight.core.station_formatting import (
    parse_station,
    format_station,
    validate_station_input,
)


class TestParseStation:
    """Tests for parse_station function."""

    @pytest.mark.unit
    def test_parse_standard_format(self):
        """Test parsing standard station format '10+50.00'."""
        assert parse_station("10+50.00") == 1050.0

    @pytest.mark.unit
    def test_parse_large_station(self):
        """Test parsing a large station value."""
        assert parse_station("10284+50") == 1028450.0

    @pytest.mark.unit
    def test_parse_with_spaces(self):
        """Test parsing station with surrounding spaces."""
        assert parse_station("  10+50.00  ") == 1050.0

    @pytest.mark.unit
    def test_parse_plain_number(self):
        """Test parsing plain numeric value."""
        assert parse_station("1050.0") == 1050.0

    @pytest.mark.unit
    def test_parse_numeric_input(self):
        """Test that numbers pass straight through."""
        assert parse_station(472.58) == 472.58

    @pytest.mark.unit
    def test_parse_zero_station(self):
        """Test parsing zero station."""
        assert parse_station("0+00.00") == 0.0

    @pytest.mark.unit
    def test_parse_back_station(self):
        """Test that a negative major station offsets away from zero."""
        assert parse_station("-1+50") == -150.0

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["invalid", "", "10+", "+50", "1+2+3", "10+abc", "10+-5"])
    def test_parse_invalid_raises(self, text):
        """Test that invalid input raises ParseError."""
        with pytest.raises(ParseError):
            parse_station(text)

    @pytest.mark.unit
    def test_parse_error_names_field(self):
        """Test that the error reports the field name."""
        with pytest.raises(ParseError) as exc_info:
            parse_station("abc", "PI station")
        assert exc_info.value.field == "PI station"


class TestFormatStation:
    """Tests for format_station function."""

    @pytest.mark.unit
    def test_format_basic(self):
        """Test basic station formatting."""
        assert format_station(1050.0) == "10+50.00"

    @pytest.mark.unit
    def test_format_zero(self):
        """Test formatting zero station."""
        assert format_station(0.0) == "0+00.00"

    @pytest.mark.unit
    def test_format_large_value(self):
        """Test formatting large station value."""
        assert format_station(1028450.0) == "10284+50.00"

    @pytest.mark.unit
    def test_format_small_value(self):
        """Test formatting small station value."""
        assert format_station(5.25) == "0+05.25"

    @pytest.mark.unit
    def test_format_no_decimals(self):
        """Test formatting without decimals."""
        assert format_station(1050.4, decimals=0) == "10+50"

    @pytest.mark.unit
    def test_format_rounds_up_to_next_station(self):
        """Test that rounding carries into the next full station."""
        assert format_station(1099.999) == "11+00.00"

    @pytest.mark.unit
    def test_format_negative(self):
        """Test formatting negative station (back station)."""
        assert format_station(-50.0) == "-0+50.00"


class TestValidateStationInput:
    """Tests for validate_station_input function."""

    @pytest.mark.unit
    def test_valid_station_format(self):
        """Test validation of valid station format."""
        is_valid, error = validate_station_input("10+50.00")
        assert is_valid is True
        assert error == ""

    @pytest.mark.unit
    def test_invalid_format(self):
        """Test validation rejects invalid format."""
        is_valid, error = validate_station_input("not a station")
        assert is_valid is False
        assert "station" in error


class TestRoundTrip:
    """Test that parse and format are inverse operations."""

    @pytest.mark.unit
    @pytest.mark.parametrize("station", [0.0, 100.0, 1050.0, 15025.50, 1028450.0])
    def test_round_trip(self, station):
        """Test that parse(format(x)) == x."""
        assert parse_station(format_station(station)) == pytest.approx(station)
