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
Curve Sight Core Module

Pure Python curve geometry and sight distance logic.
This module contains:
- Logging configuration
- Typed measures parsed from form text (angles, lengths, speeds, stations)
- Horizontal curve solving and stationing (horizontal_curve)
- Design-manual sight distance tables (sight_distance)
"""

# Import logging configuration first (no dependencies)
from .logging_config import get_logger, setup_logging

from .errors import (
    CurveSightError,
    ParseError,
    UnsupportedMethodError,
    GeometryError,
    DesignSpeedLookupError,
    ConfigError,
    TableIOError,
)
from .measures import Angle, parse_angle, coerce_length, coerce_speed
from .station_formatting import parse_station, format_station, validate_station_input

from . import sight_distance
from . import horizontal_curve

__all__ = [
    "get_logger",
    "setup_logging",
    "CurveSightError",
    "ParseError",
    "UnsupportedMethodError",
    "GeometryError",
    "DesignSpeedLookupError",
    "ConfigError",
    "TableIOError",
    "Angle",
    "parse_angle",
    "coerce_length",
    "coerce_speed",
    "parse_station",
    "format_station",
    "validate_station_input",
    "sight_distance",
    "horizontal_curve",
]
