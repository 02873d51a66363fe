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
Horizontal Curve Package
=========================

Simple circular curve design from partial survey input.

This package provides:
- Curve dimensions from radius and deflection angle
- PC / PI / PT station propagation from any one known station
- Deflection-angle staking tables at a station interval

Example:
    >>> from curve_sight.core.horizontal_curve import HorizontalData, StationDefinition
    >>> data = HorizontalData(
    ...     input_station_method=StationDefinition.PC,
    ...     input_station="100+00",
    ...     input_radius="818.5",
    ...     input_curve_angle="63d15'34\\"",
    ... )
    >>> curve = data.to_horizontal_curve()
    >>> print(f"PT: {curve.stations.pt}")
"""

# Input definitions
from .definitions import StationDefinition, BuildDefinition

# Curve dimensions
from .curve_geometry import (
    HorizontalDimensions,
    calculate_sight_distance,
    calculate_dimensions,
    solve_dimensions,
)

# Stationing
from .stationing import (
    Station,
    HorizontalStations,
    stations_from_known,
    propagate_stations,
)

# Staking layout
from .layout import CurvePoint, layout_curve

# Form input
from .curve_data import HorizontalCurve, HorizontalData

__all__ = [
    # Definitions
    "StationDefinition",
    "BuildDefinition",
    # Dimensions
    "HorizontalDimensions",
    "calculate_sight_distance",
    "calculate_dimensions",
    "solve_dimensions",
    # Stations
    "Station",
    "HorizontalStations",
    "stations_from_known",
    "propagate_stations",
    # Layout
    "CurvePoint",
    "layout_curve",
    # Input
    "HorizontalCurve",
    "HorizontalData",
]
