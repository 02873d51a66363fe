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
Sight Distance Design Constants
================================

Caltrans Highway Design Manual (HDM) reference tables.

Table 201.1 - Sight Distance Standards
    columns: design speed (mph), stopping (ft), passing (ft)
Table 201.7 - Decision Sight Distance
    columns: design speed (mph), decision (ft)

Index 201.3: the stopping sight distances in Table 201.1 should be
increased by 20 percent on sustained downgrades steeper than 3 percent
and longer than one mile.
"""

from pathlib import Path

# Bundled reference tables, one directory per design standard
LOOK_UP_DIR = Path(__file__).parent / "look_up"

CALTRANS_HDM_DIR = "CALTRANS_HDM"
SIGHT_DISTANCE_TABLE = "table_201-1.txt"
DECISION_SIGHT_DISTANCE_TABLE = "table_201-7.txt"

# Column index within a table row (design speed excluded)
PRIMARY_COLUMN = 0
PASSING_COLUMN = 1

# Sustained downgrade increase (HDM Index 201.3)
SUSTAINED_DOWNGRADE_FACTOR = 1.20

__all__ = [
    "LOOK_UP_DIR",
    "CALTRANS_HDM_DIR",
    "SIGHT_DISTANCE_TABLE",
    "DECISION_SIGHT_DISTANCE_TABLE",
    "PRIMARY_COLUMN",
    "PASSING_COLUMN",
    "SUSTAINED_DOWNGRADE_FACTOR",
]
