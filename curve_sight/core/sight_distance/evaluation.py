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
Compare the sight distance a curve provides with the design minimum.
"""

from dataclasses import dataclass

from ..logging_config import get_logger
from .settings import SightType
from .tables import SightDistanceReference

logger = get_logger(__name__)


@dataclass(frozen=True)
class SightDistanceCheck:
    """Available versus required sight distance.

    Attributes:
        sight_type: Sight distance checked
        design_speed: Design speed used for the lookup
        available: Sight distance the curve provides
        required: Minimum from the design table (downgrade applied)
        sustained_downgrade: Whether the downgrade factor was requested
    """

    sight_type: SightType
    design_speed: float
    available: float
    required: float
    sustained_downgrade: bool = False

    @property
    def adequate(self) -> bool:
        return self.available >= self.required

    @property
    def margin(self) -> float:
        """Available minus required; negative when inadequate."""
        return self.available - self.required


def check_sight_distance(
    dimensions,
    reference: SightDistanceReference,
    sight_type: SightType = SightType.STOPPING,
    sustained_downgrade: bool = False
) -> SightDistanceCheck:
    """Check a solved curve against the table minimum for its design speed.

    Args:
        dimensions: HorizontalDimensions of the curve
        reference: Loaded sight distance tables
        sight_type: Sight distance to check
        sustained_downgrade: Apply the sustained downgrade factor

    Raises:
        DesignSpeedLookupError: If the curve's design speed is not tabulated
    """
    required = reference.min_sight_distance(
        dimensions.design_speed, sight_type, sustained_downgrade
    )
    check = SightDistanceCheck(
        sight_type=sight_type,
        design_speed=dimensions.design_speed,
        available=dimensions.sight_distance,
        required=required,
        sustained_downgrade=sustained_downgrade,
    )

    if not check.adequate:
        logger.warning(
            "%s sight distance %.1f is below the %.1f minimum at %g mph",
            sight_type.value.title(), check.available, check.required,
            check.design_speed
        )
    return check


__all__ = ["SightDistanceCheck", "check_sight_distance"]
