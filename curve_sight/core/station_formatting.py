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
Station Formatting Utilities

Handles conversion between station notation (XX+XX.XX) and numeric values.

Stationing Notation (US Customary, 100 ft full stations):
  Examples: 0+00 = 0 ft, 5+47.23 = 547.23 ft, 10284+50 = 1028450 ft
"""

import math
from typing import Tuple, Union

from .errors import ParseError


# Length of one full station
STATION_LENGTH = 100.0


def parse_station(station_str: Union[str, float], field: str = "station") -> float:
    """
    Parse station input and convert to numeric value.

    Accepts formats:
    - "10+50.25" → 1050.25
    - "10284+50" → 1028450.0
    - "472.58" → 472.58 (no + symbol)
    - 472.58 → 472.58 (already numeric)

    Args:
        station_str: Station string or numeric value
        field: Input field name used in error messages

    Returns:
        Numeric station value

    Raises:
        ParseError: If input format is invalid
    """
    if isinstance(station_str, bool):
        raise ParseError(field, station_str, "not a station")

    # Already a number
    if isinstance(station_str, (int, float)):
        value = float(station_str)
        if not math.isfinite(value):
            raise ParseError(field, station_str, "station must be finite")
        return value

    if station_str is None:
        raise ParseError(field, station_str, "no value")

    text = str(station_str).strip()
    if not text:
        raise ParseError(field, station_str, "no value")

    if '+' in text:
        parts = text.split('+')
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            raise ParseError(field, station_str, "expected format XX+XX.XX")

        try:
            major = float(parts[0])
            minor = float(parts[1])
        except ValueError:
            raise ParseError(field, station_str, "non-numeric values found")

        if minor < 0:
            raise ParseError(field, station_str, "offset after '+' must be non-negative")

        # Back stations ("-1+50") count the offset away from zero
        if parts[0].strip().startswith('-'):
            value = major * STATION_LENGTH - minor
        else:
            value = major * STATION_LENGTH + minor
    else:
        try:
            value = float(text)
        except ValueError:
            raise ParseError(field, station_str, "not a number")

    if not math.isfinite(value):
        raise ParseError(field, station_str, "station must be finite")
    return value


def format_station(station_value: float, decimals: int = 2) -> str:
    """
    Format numeric station value to standard notation.

    Args:
        station_value: Numeric station value
        decimals: Number of decimal places (default: 2)

    Returns:
        Formatted station string

    Examples:
        >>> format_station(1028450.0)
        '10284+50.00'
        >>> format_station(547.23)
        '5+47.23'
        >>> format_station(-50.0)
        '-0+50.00'
    """
    sign = "-" if station_value < 0 else ""
    # Round first so 99.999 does not render as "0+100.00"
    magnitude = round(abs(station_value), decimals)
    major = int(magnitude // STATION_LENGTH)
    minor = magnitude - major * STATION_LENGTH

    if decimals > 0:
        return f"{sign}{major}+{minor:0{3 + decimals}.{decimals}f}"
    return f"{sign}{major}+{int(round(minor)):02d}"


def validate_station_input(station_str: str) -> Tuple[bool, str]:
    """
    Validate station input format.

    Args:
        station_str: Station string to validate

    Returns:
        Tuple of (is_valid, error_message)
        If valid, error_message is empty string
    """
    try:
        parse_station(station_str)
        return True, ""
    except ParseError as e:
        return False, str(e)


__all__ = [
    "STATION_LENGTH",
    "parse_station",
    "format_station",
    "validate_station_input",
]
