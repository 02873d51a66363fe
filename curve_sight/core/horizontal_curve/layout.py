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
Curve Layout Module
====================

Deflection-angle staking table for a solved curve: one row at the PC,
one at every even station interval inside the curve, one at the end of
the arc (PC + L).

For a point an arc length l past the PC:
    deflection = l / (2R)       (radians, measured at the PC from the tangent)
    chord      = 2R * sin(deflection)
"""

import math
from dataclasses import dataclass
from typing import List

import numpy as np

from ..errors import GeometryError
from ..logging_config import get_logger
from ..measures import Angle
from .stationing import Station

logger = get_logger(__name__)

# Stations closer than this to PC or PT are not repeated as interval points
STATION_TOLERANCE = 1e-6


@dataclass(frozen=True)
class CurvePoint:
    """One row of the staking table.

    Attributes:
        station: Station of the point
        arc_length: Arc distance from the PC
        deflection: Deflection angle from the back tangent at the PC
        chord: Straight distance from the PC
    """

    station: Station
    arc_length: float
    deflection: Angle
    chord: float


def interval_station_values(pc: float, pt: float, interval: float) -> np.ndarray:
    """Even multiples of ``interval`` strictly between pc and pt."""
    if interval <= 0 or not math.isfinite(interval):
        raise GeometryError(f"Station interval must be positive, got {interval}")

    first = math.floor(pc / interval) + 1
    last = math.ceil(pt / interval)
    values = np.arange(first, last, dtype=float) * interval
    inside = (values > pc + STATION_TOLERANCE) & (values < pt - STATION_TOLERANCE)
    return values[inside]


def layout_curve(curve, interval: float) -> List[CurvePoint]:
    """Build the staking table of a HorizontalCurve.

    Args:
        curve: Solved HorizontalCurve
        interval: Station interval, e.g. 50.0 or 100.0

    Returns:
        CurvePoints ordered from PC to PT

    Raises:
        GeometryError: If interval is not positive
    """
    radius = curve.dimensions.radius
    pc = curve.stations.pc.value
    # End of arc; equals stations.pt unless the PI was the known station
    pt = pc + curve.dimensions.curve_length

    inner = interval_station_values(pc, pt, interval)
    values = np.concatenate(([pc], inner, [pt]))
    arcs = values - pc
    deflections = arcs / (2.0 * radius)
    chords = 2.0 * radius * np.sin(deflections)

    logger.debug("Laid out %d points at %.2f interval", len(values), interval)

    return [
        CurvePoint(
            station=Station(value=float(value)),
            arc_length=float(arc),
            deflection=Angle.from_radians(float(deflection)),
            chord=float(chord),
        )
        for value, arc, deflection, chord in zip(values, arcs, deflections, chords)
    ]


__all__ = ["CurvePoint", "interval_station_values", "layout_curve"]
