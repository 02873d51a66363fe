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
Curve Stationing Module
========================

Propagates stations between the three reference points of a circular
curve. Station increases from PC toward PT:

    | known | PC      | PI      | PT      |
    |-------|---------|---------|---------|
    | PC    | known   | PC + T  | PC + L  |
    | PI    | PI - T  | known   | PI + T  |
    | PT    | PT - L  | PT - T  | known   |

From a known PI both ends sit one tangent away; from a known PC or PT
the other end sits one arc length away.
"""

from dataclasses import dataclass
from typing import Union

from ..logging_config import get_logger
from ..station_formatting import format_station, parse_station
from .curve_geometry import HorizontalDimensions
from .definitions import StationDefinition

logger = get_logger(__name__)


@dataclass(frozen=True)
class Station:
    """Position along the alignment.

    Attributes:
        value: Station value (ft)
        elevation: Always 0.0, elevations are not derived for horizontal curves
    """

    value: float
    elevation: float = 0.0

    def offset(self, distance: float) -> "Station":
        """Station ``distance`` ahead (negative for back)."""
        return Station(value=self.value + distance)

    def __str__(self):
        return format_station(self.value)


@dataclass(frozen=True)
class HorizontalStations:
    """PC, PI and PT stations of one curve."""

    pc: Station
    pi: Station
    pt: Station


def stations_from_known(
    definition: StationDefinition,
    known: Station,
    dimensions: HorizontalDimensions
) -> HorizontalStations:
    """Compute the other two reference stations from a known one.

    Args:
        definition: Which reference point ``known`` is
        known: The known station
        dimensions: Solved curve dimensions

    Returns:
        HorizontalStations with all three points populated
    """
    tangent = dimensions.tangent
    curve_length = dimensions.curve_length

    if definition is StationDefinition.PC:
        stations = HorizontalStations(
            pc=known,
            pi=known.offset(tangent),
            pt=known.offset(curve_length),
        )
    elif definition is StationDefinition.PI:
        stations = HorizontalStations(
            pc=known.offset(-tangent),
            pi=known,
            pt=known.offset(tangent),
        )
    elif definition is StationDefinition.PT:
        stations = HorizontalStations(
            pc=known.offset(-curve_length),
            pi=known.offset(-tangent),
            pt=known,
        )
    else:
        raise ValueError(f"Unknown station definition: {definition!r}")

    logger.debug(
        "Stations from %s: PC %s, PI %s, PT %s",
        definition.value, stations.pc, stations.pi, stations.pt
    )
    return stations


def propagate_stations(
    definition: StationDefinition,
    station: Union[str, float],
    dimensions: HorizontalDimensions
) -> HorizontalStations:
    """Parse the known station text and propagate it to PC, PI and PT.

    Raises:
        ParseError: If the station text is malformed
    """
    known = Station(value=parse_station(station, "station"))
    return stations_from_known(definition, known, dimensions)


__all__ = [
    "Station",
    "HorizontalStations",
    "stations_from_known",
    "propagate_stations",
]
