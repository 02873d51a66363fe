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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the Curve Sight test suite.
"""

from pathlib import Path

import pytest

from curve_sight.core.horizontal_curve import (
    BuildDefinition,
    HorizontalData,
    StationDefinition,
)
from curve_sight.core.sight_distance import SightDistanceReference


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")


# =============================================================================
# Curve Fixtures
# =============================================================================

# Survey example: R = 818.5 ft, delta = 63d15'34"
SAMPLE_RADIUS = "818.5"
SAMPLE_CURVE_ANGLE = "63d15'34\""


@pytest.fixture
def pi_curve_data() -> HorizontalData:
    """Curve input with a known PI station."""
    return HorizontalData(
        input_station_method=StationDefinition.PI,
        input_build_method=BuildDefinition.RADIUS_CURVE_ANGLE,
        input_station="10284+50",
        input_radius=SAMPLE_RADIUS,
        input_curve_angle=SAMPLE_CURVE_ANGLE,
        input_design_speed="65",
        input_m="40",
    )


@pytest.fixture
def pc_curve_data() -> HorizontalData:
    """Curve input with a known PC station."""
    return HorizontalData(
        input_station_method=StationDefinition.PC,
        input_build_method=BuildDefinition.RADIUS_CURVE_ANGLE,
        input_station="100+00",
        input_radius=SAMPLE_RADIUS,
        input_curve_angle=SAMPLE_CURVE_ANGLE,
        input_design_speed="65",
        input_m="40",
    )


# =============================================================================
# Table Fixtures
# =============================================================================

@pytest.fixture
def sample_table_lines() -> list:
    """Small sight distance table with header lines.

    Returns:
        Lines in the look_up file format
    """
    return [
        "Table 201.1 Sight Distance Standards",
        "",
        "Speed  Stopping  Passing",
        "(mph)  (ft)      (ft)",
        "30     200       1100",
        "45     360       1650",
        "65     660       2300",
    ]


@pytest.fixture
def table_dir(tmp_path, sample_table_lines) -> Path:
    """Directory holding both table files in the look_up format.

    Args:
        tmp_path: pytest's tmp_path fixture

    Returns:
        Path to a directory usable as SightDistanceSettings.table_dir
    """
    (tmp_path / "table_201-1.txt").write_text("\n".join(sample_table_lines) + "\n")
    (tmp_path / "table_201-7.txt").write_text(
        "Table 201.7 Decision Sight Distance\n30 450\n65 1050\n"
    )
    return tmp_path


@pytest.fixture(scope="session")
def caltrans_reference() -> SightDistanceReference:
    """Bundled Caltrans HDM tables, loaded once per session."""
    return SightDistanceReference.load()
