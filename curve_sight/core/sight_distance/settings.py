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
Sight Distance Settings
========================

Sight types, design standards and the runtime choices that control
table loading and the sustained downgrade adjustment.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..errors import ConfigError
from .constants import (
    CALTRANS_HDM_DIR,
    DECISION_SIGHT_DISTANCE_TABLE,
    LOOK_UP_DIR,
    PASSING_COLUMN,
    PRIMARY_COLUMN,
    SIGHT_DISTANCE_TABLE,
    SUSTAINED_DOWNGRADE_FACTOR,
)


class SightType(Enum):
    """Sight distance being checked."""
    STOPPING = "STOPPING"
    PASSING = "PASSING"
    DECISION = "DECISION"

    @property
    def table_file(self) -> str:
        """Table file holding this sight type (STOPPING and PASSING share one)."""
        if self is SightType.DECISION:
            return DECISION_SIGHT_DISTANCE_TABLE
        return SIGHT_DISTANCE_TABLE

    @property
    def column(self) -> int:
        """Column of the table row holding this sight type."""
        if self is SightType.PASSING:
            return PASSING_COLUMN
        return PRIMARY_COLUMN


class DesignStandard(Enum):
    """Governing design manual; value is its table directory."""
    CALTRANS_HDM = CALTRANS_HDM_DIR


class DowngradePolicy(Enum):
    """Sight types the sustained downgrade factor applies to."""
    ALL_SIGHT_TYPES = "ALL_SIGHT_TYPES"   # Historical behavior
    STOPPING_ONLY = "STOPPING_ONLY"       # HDM 201.3 wording

    def applies_to(self, sight_type: SightType) -> bool:
        if self is DowngradePolicy.STOPPING_ONLY:
            return sight_type is SightType.STOPPING
        return True


@dataclass(frozen=True)
class SightDistanceSettings:
    """Configuration for loading and applying sight distance tables.

    Attributes:
        design_standard: Manual whose tables are used
        table_dir: Directory holding the standard's tables; defaults to the
            bundled look_up/<standard> directory
        downgrade_factor: Multiplier for sustained downgrades
        downgrade_policy: Which sight types the multiplier applies to
    """

    design_standard: DesignStandard = DesignStandard.CALTRANS_HDM
    table_dir: Optional[Path] = None
    downgrade_factor: float = SUSTAINED_DOWNGRADE_FACTOR
    downgrade_policy: DowngradePolicy = DowngradePolicy.ALL_SIGHT_TYPES

    def __post_init__(self):
        if self.downgrade_factor < 1.0:
            raise ConfigError(
                f"Downgrade factor must be at least 1.0, got {self.downgrade_factor}"
            )

    @property
    def resolved_table_dir(self) -> Path:
        if self.table_dir is not None:
            return Path(self.table_dir)
        return LOOK_UP_DIR / self.design_standard.value

    def table_path(self, sight_type: SightType) -> Path:
        return self.resolved_table_dir / sight_type.table_file


__all__ = [
    "SightType",
    "DesignStandard",
    "DowngradePolicy",
    "SightDistanceSettings",
]
