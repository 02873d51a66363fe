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
Measures Module
================

Typed values parsed from the raw text a user types into a form:
angles, lengths and design speeds.

Angle Notation:
- Decimal degrees: "63.2594"
- Degrees, minutes, seconds: 63d15'34"  (minutes and seconds optional)
  Examples: 63d = 63.0, 63d15' = 63.25, 63d15'34" = 63.259444
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from .errors import ParseError
from .logging_config import get_logger

logger = get_logger(__name__)

_DMS_PATTERN = re.compile(
    r"""^\s*
    (?P<deg>[+-]?\d+(?:\.\d*)?)\s*[d°]\s*
    (?:(?P<min>\d+(?:\.\d*)?)\s*')?\s*
    (?:(?P<sec>\d+(?:\.\d*)?)\s*")?\s*$""",
    re.VERBOSE,
)


@dataclass(frozen=True)
class Angle:
    """Directional measure held in both radians and decimal degrees.

    Build with from_degrees / from_radians / parse_angle so both fields
    always agree.

    Attributes:
        radians: Angle in radians
        decimal_degrees: Angle in decimal degrees

    Example:
        >>> delta = parse_angle("63d15'34\\"")
        >>> print(f"{delta.decimal_degrees:.4f}")
        63.2594
    """

    radians: float
    decimal_degrees: float

    @classmethod
    def from_degrees(cls, decimal_degrees: float) -> "Angle":
        """Create an angle from decimal degrees."""
        decimal_degrees = float(decimal_degrees)
        return cls(radians=decimal_degrees * math.pi / 180.0, decimal_degrees=decimal_degrees)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        """Create an angle from radians."""
        radians = float(radians)
        return cls(radians=radians, decimal_degrees=radians * 180.0 / math.pi)

    @property
    def dms(self) -> tuple:
        """Split into (degrees, minutes, seconds); sign carried on degrees."""
        total_seconds = abs(self.decimal_degrees) * 3600.0
        degrees, remainder = divmod(total_seconds, 3600.0)
        minutes, seconds = divmod(remainder, 60.0)
        sign = -1 if self.decimal_degrees < 0 else 1
        return int(degrees) * sign, int(minutes), seconds


def parse_angle(text: str, field: str = "curve angle") -> Angle:
    """
    Parse angle text in decimal degrees or D d M ' S " notation.

    Accepts formats:
    - "63.2594" → 63.2594°
    - "63d15'34\"" → 63.259444°
    - "63d15'" → 63.25°
    - "63d" → 63.0°

    Args:
        text: Raw angle text
        field: Input field name used in error messages

    Returns:
        Angle with radians and decimal degrees populated

    Raises:
        ParseError: If text matches neither notation
    """
    if text is None:
        raise ParseError(field, text, "no value")

    raw = str(text).strip()
    if not raw:
        raise ParseError(field, text, "no value")

    match = _DMS_PATTERN.match(raw)
    if match:
        degrees = float(match.group("deg"))
        minutes = float(match.group("min") or 0.0)
        seconds = float(match.group("sec") or 0.0)
        if minutes >= 60.0 or seconds >= 60.0:
            raise ParseError(field, text, "minutes and seconds must be below 60")

        magnitude = abs(degrees) + minutes / 60.0 + seconds / 3600.0
        sign = -1.0 if raw.startswith("-") else 1.0
        return Angle.from_degrees(sign * magnitude)

    try:
        value = float(raw)
    except ValueError:
        raise ParseError(field, text, "expected decimal degrees or D d M ' S \" notation")

    if not math.isfinite(value):
        raise ParseError(field, text, "angle must be finite")
    return Angle.from_degrees(value)


def coerce_length(text: str, field: str = "length") -> float:
    """
    Coerce free-form numeric text to a non-negative length.

    Args:
        text: Raw text such as "818.5" (thousands separators are rejected)
        field: Input field name used in error messages

    Returns:
        Length as float

    Raises:
        ParseError: If text is blank, non-numeric, non-finite or negative
    """
    raw = "" if text is None else str(text).strip()
    if not raw:
        raise ParseError(field, text, "no value")

    try:
        value = float(raw)
    except ValueError:
        raise ParseError(field, text, "not a number")

    if not math.isfinite(value):
        raise ParseError(field, text, "length must be finite")
    if value < 0:
        raise ParseError(field, text, "length must be non-negative")
    return value


def coerce_speed(text: Optional[str], field: str = "design speed") -> float:
    """
    Coerce design speed text to a non-negative number.

    Blank input means no design speed was given and returns 0.0.

    Raises:
        ParseError: If text is non-numeric, non-finite or negative
    """
    raw = "" if text is None else str(text).strip()
    if not raw:
        return 0.0

    try:
        value = float(raw)
    except ValueError:
        raise ParseError(field, text, "not a number")

    if not math.isfinite(value) or value < 0:
        raise ParseError(field, text, "speed must be a non-negative number")
    return value


def coerce_optional_length(text: Optional[str], field: str) -> float:
    """Coerce an optional length, falling back to 0.0 when blank or unparsable.

    The sign is left to the caller: "-40" is a number, and the geometry
    that consumes it decides whether a negative value describes a curve.
    """
    raw = "" if text is None else str(text).strip()
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s; using 0.0", ParseError(field, text, "not a number"))
        return 0.0

    if not math.isfinite(value):
        logger.warning("%s; using 0.0", ParseError(field, text, "length must be finite"))
        return 0.0
    return value


def coerce_optional_speed(text: Optional[str], field: str = "design speed") -> float:
    """Coerce an optional design speed, falling back to 0.0 when unparsable."""
    try:
        return coerce_speed(text, field)
    except ParseError as exc:
        logger.warning("%s; using 0.0", exc)
        return 0.0


__all__ = [
    "Angle",
    "parse_angle",
    "coerce_length",
    "coerce_speed",
    "coerce_optional_length",
    "coerce_optional_speed",
]
