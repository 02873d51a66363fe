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
Curve Sight Exceptions
=======================

Every failure raised by the curve solver, the station propagator and the
sight distance tables derives from CurveSightError. Each class also derives
from the closest builtin exception, so existing ``except ValueError`` style
handlers keep working.
"""

from typing import Optional


class CurveSightError(Exception):
    """Base class for all Curve Sight errors."""


class ParseError(CurveSightError, ValueError):
    """Malformed numeric, angle or station text.

    Attributes:
        field: Name of the input field that failed to parse
        value: The raw text that was rejected
    """

    def __init__(self, field: str, value: object, reason: Optional[str] = None):
        self.field = field
        self.value = value
        message = f"Invalid {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedMethodError(CurveSightError, NotImplementedError):
    """Requested curve build method has no implementation."""


class GeometryError(CurveSightError, ValueError):
    """Inputs parse but describe an impossible curve."""


class DesignSpeedLookupError(CurveSightError, LookupError):
    """Design speed is not a row of the reference table."""

    def __init__(self, design_speed: object, source: str = ""):
        self.design_speed = design_speed
        self.source = source
        where = f" {source}" if source else ""
        super().__init__(f"Design speed {design_speed} isn't in table{where}")


class ConfigError(CurveSightError, ValueError):
    """Reference table content is malformed."""


class TableIOError(CurveSightError, OSError):
    """Reference table file could not be read."""


__all__ = [
    "CurveSightError",
    "ParseError",
    "UnsupportedMethodError",
    "GeometryError",
    "DesignSpeedLookupError",
    "ConfigError",
    "TableIOError",
]
