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
Horizontal Curve Design Constants
==================================

Empirical constants from US customary curve tables (feet).

Degree of Curve (arc definition):
    D = 5729.6 / R
    where:
        D = central angle subtended by a 100 ft arc (degrees)
        R = curve radius (ft)

Horizontal Sightline Offset (HSO):
    S = (R / 28.65) * acos((R - m) / R)   (acos in degrees)
    where:
        S = stopping sight distance along the curve (ft)
        m = lateral offset from centerline to the obstruction (ft)
"""

# Degrees subtended by a 100 ft arc at a 1 ft radius
DEGREE_OF_CURVE_CONSTANT = 5729.6

# Degrees-to-feet conversion in the sightline offset formula
SIGHT_DISTANCE_CONSTANT = 28.65

# Deflection angle limits (degrees, exclusive)
MIN_DEFLECTION_DEGREES = 0.0
MAX_DEFLECTION_DEGREES = 180.0

__all__ = [
    "DEGREE_OF_CURVE_CONSTANT",
    "SIGHT_DISTANCE_CONSTANT",
    "MIN_DEFLECTION_DEGREES",
    "MAX_DEFLECTION_DEGREES",
]
