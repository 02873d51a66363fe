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
Sight Distance Package
=======================

Design-manual sight distance tables and curve checks.

Example:
    >>> from curve_sight.core.sight_distance import SightDistanceReference, SightType
    >>> reference = SightDistanceReference.load()
    >>> round(reference.min_sight_distance(65, SightType.STOPPING, sustained_downgrade=True), 1)
    792.0
"""

from .settings import (
    SightType,
    DesignStandard,
    DowngradePolicy,
    SightDistanceSettings,
)

from .tables import (
    SightDistanceTable,
    SightDistanceReference,
    parse_table,
    load_table,
    lookup_min_sight_distance,
)

from .evaluation import SightDistanceCheck, check_sight_distance

__all__ = [
    # Settings
    "SightType",
    "DesignStandard",
    "DowngradePolicy",
    "SightDistanceSettings",
    # Tables
    "SightDistanceTable",
    "SightDistanceReference",
    "parse_table",
    "load_table",
    "lookup_min_sight_distance",
    # Checks
    "SightDistanceCheck",
    "check_sight_distance",
]
