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
Horizontal curve input definitions.
"""

from enum import Enum


class StationDefinition(Enum):
    """Which reference point the input station describes."""
    PC = "PC"   # Point of Curvature
    PI = "PI"   # Point of Intersection (default)
    PT = "PT"   # Point of Tangency

    def next(self) -> "StationDefinition":
        """Rotate PC -> PI -> PT -> PC."""
        order = list(StationDefinition)
        return order[(order.index(self) + 1) % len(order)]


class BuildDefinition(Enum):
    """Which pair of dimensions the curve is built from."""
    RADIUS_CURVE_ANGLE = "RADIUS_CURVE_ANGLE"
    RADIUS_TANGENT = "RADIUS_TANGENT"   # Not implemented

    def next(self) -> "BuildDefinition":
        """Toggle between the two build methods."""
        if self is BuildDefinition.RADIUS_CURVE_ANGLE:
            return BuildDefinition.RADIUS_TANGENT
        return BuildDefinition.RADIUS_CURVE_ANGLE


__all__ = ["StationDefinition", "BuildDefinition"]
