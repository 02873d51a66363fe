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
Horizontal Curve Input Module
==============================

HorizontalData holds the raw text of a horizontal curve form and turns it
into a solved HorizontalCurve. Parsing happens only here, at the edge;
everything downstream works with typed, frozen values.

Example:
    >>> data = HorizontalData(
    ...     input_station_method=StationDefinition.PI,
    ...     input_station="10284+50",
    ...     input_radius="818.5",
    ...     input_curve_angle="63d15'34\\"",
    ...     input_design_speed="65",
    ...     input_m="40",
    ... )
    >>> curve = data.to_horizontal_curve()
    >>> print(curve.stations.pc)
"""

from dataclasses import dataclass
from typing import List, Optional

from ..errors import ConfigError
from ..logging_config import get_logger
from ..measures import coerce_length
from ..sight_distance import (
    DesignStandard,
    SightDistanceCheck,
    SightDistanceReference,
    SightDistanceSettings,
    SightType,
    check_sight_distance,
)
from .curve_geometry import HorizontalDimensions, solve_dimensions
from .definitions import BuildDefinition, StationDefinition
from .layout import CurvePoint, layout_curve
from .stationing import HorizontalStations, propagate_stations

logger = get_logger(__name__)


@dataclass(frozen=True)
class HorizontalCurve:
    """Solved curve: dimensions plus PC, PI and PT stations."""

    dimensions: HorizontalDimensions
    stations: HorizontalStations


@dataclass(frozen=True)
class HorizontalData:
    """Raw form input for one horizontal curve.

    Attributes:
        input_station_method: Which reference point input_station is
        input_build_method: Pair of dimensions the curve is built from
        input_station: Known station text, e.g. "10284+50"
        input_radius: Radius text
        input_curve_angle: Deflection angle text, e.g. 63d15'34"
        input_station_interval: Staking interval text, e.g. "50"
        input_sight_type: Sight distance to check
        input_design_speed: Design speed text (mph), blank for none
        input_m: Obstruction offset text, blank for none
        input_design_standard: Manual whose tables apply
        sustained_downgrade: Downgrade steeper than 3% and longer than one
            mile; decided by the caller
    """

    input_station_method: StationDefinition = StationDefinition.PI
    input_build_method: BuildDefinition = BuildDefinition.RADIUS_CURVE_ANGLE
    input_station: str = ""
    input_radius: str = ""
    input_curve_angle: str = ""
    input_station_interval: str = ""
    input_sight_type: SightType = SightType.STOPPING
    input_design_speed: str = ""
    input_m: str = ""
    input_design_standard: DesignStandard = DesignStandard.CALTRANS_HDM
    sustained_downgrade: bool = False

    def to_dimensions(self) -> HorizontalDimensions:
        return solve_dimensions(
            self.input_build_method,
            self.input_radius,
            self.input_curve_angle,
            self.input_m,
            self.input_design_speed,
        )

    def to_stations(self, dimensions: HorizontalDimensions) -> HorizontalStations:
        return propagate_stations(self.input_station_method, self.input_station, dimensions)

    def to_horizontal_curve(self) -> HorizontalCurve:
        """Solve dimensions, then stations.

        Raises:
            ParseError, UnsupportedMethodError, GeometryError
        """
        dimensions = self.to_dimensions()
        stations = self.to_stations(dimensions)
        return HorizontalCurve(dimensions=dimensions, stations=stations)

    def to_curve_layout(self, curve: Optional[HorizontalCurve] = None) -> List[CurvePoint]:
        """Staking table at input_station_interval.

        Args:
            curve: Already solved curve for this input (solved if omitted)
        """
        interval = coerce_length(self.input_station_interval, "station interval")
        return layout_curve(curve or self.to_horizontal_curve(), interval)

    def evaluate_sight_distance(
        self,
        reference: Optional[SightDistanceReference] = None,
        curve: Optional[HorizontalCurve] = None
    ) -> SightDistanceCheck:
        """Check the curve's sight distance against its design standard.

        Args:
            reference: Tables loaded at startup; loaded on demand if omitted
            curve: Already solved curve for this input (solved if omitted)

        Raises:
            ConfigError: If reference belongs to another design standard
            DesignSpeedLookupError: If the design speed is not tabulated
        """
        if reference is None:
            reference = SightDistanceReference.load(
                SightDistanceSettings(design_standard=self.input_design_standard)
            )
        elif reference.settings.design_standard is not self.input_design_standard:
            raise ConfigError(
                f"Reference tables are {reference.settings.design_standard.value}, "
                f"input requires {self.input_design_standard.value}"
            )

        curve = curve or self.to_horizontal_curve()
        return check_sight_distance(
            curve.dimensions,
            reference,
            self.input_sight_type,
            self.sustained_downgrade,
        )


__all__ = ["HorizontalCurve", "HorizontalData"]
