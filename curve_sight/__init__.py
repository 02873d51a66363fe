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
Curve Sight
Version 0.1.0

Horizontal curve layout and sight distance checks from partial
survey and design input.
"""

from .core.horizontal_curve import (
    BuildDefinition,
    HorizontalCurve,
    HorizontalData,
    StationDefinition,
)
from .core.sight_distance import (
    DesignStandard,
    DowngradePolicy,
    SightDistanceReference,
    SightDistanceSettings,
    SightType,
)

__version__ = "0.1.0"

__all__ = [
    "BuildDefinition",
    "HorizontalCurve",
    "HorizontalData",
    "StationDefinition",
    "DesignStandard",
    "DowngradePolicy",
    "SightDistanceReference",
    "SightDistanceSettings",
    "SightType",
    "__version__",
]
