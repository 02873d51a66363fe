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
Sight Distance Tables Module
=============================

Loads design-manual sight distance tables and looks up the minimum
sight distance for a design speed.

Table file format (plain text, whitespace delimited):

    # Table 201.1 Sight Distance Standards
    Speed  Stopping  Passing
    20     125       800
    25     150       950

Lines whose first token is not an integer are skipped (headers, comments).
Every other token must be a plain number; "1,100" is a configuration error.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from ..errors import ConfigError, DesignSpeedLookupError, TableIOError
from ..logging_config import get_logger
from .constants import SUSTAINED_DOWNGRADE_FACTOR
from .settings import DowngradePolicy, SightDistanceSettings, SightType

logger = get_logger(__name__)


@dataclass(frozen=True)
class SightDistanceTable:
    """Read-only design speed to distances table.

    Attributes:
        source: Where the table was read from (file path or label)
        rows: Design speed -> distances, ordered by column
    """

    source: str
    rows: Mapping[int, Tuple[float, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze rows so a shared table cannot be edited after load
        object.__setattr__(self, "rows", MappingProxyType(dict(self.rows)))

    @property
    def design_speeds(self) -> Tuple[int, ...]:
        return tuple(sorted(self.rows))

    def __contains__(self, design_speed) -> bool:
        return design_speed in self.rows

    def __len__(self) -> int:
        return len(self.rows)


def _parse_row(tokens, line_number: int, source: str) -> Tuple[float, ...]:
    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            raise ConfigError(
                f"Table configured improperly: {source} line {line_number} "
                f"has non-numeric value {token!r}. Remove commas from numbers."
            )
    return tuple(values)


def parse_table(lines: Iterable[str], source: str = "<table>") -> SightDistanceTable:
    """Parse table text into a SightDistanceTable.

    Args:
        lines: Table lines
        source: Label used in error messages

    Returns:
        SightDistanceTable

    Raises:
        ConfigError: If a data row holds a non-numeric value or a design
            speed appears twice
    """
    rows: Dict[int, Tuple[float, ...]] = {}

    for line_number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue

        try:
            speed = int(tokens[0])
        except ValueError:
            continue

        if speed in rows:
            raise ConfigError(
                f"Table configured improperly: {source} line {line_number} "
                f"repeats design speed {speed}"
            )
        rows[speed] = _parse_row(tokens[1:], line_number, source)

    return SightDistanceTable(source=source, rows=rows)


def load_table(
    sight_type: SightType,
    table_dir: Optional[Union[str, Path]] = None
) -> SightDistanceTable:
    """Read the table file for a sight type.

    Args:
        sight_type: STOPPING and PASSING share a file, DECISION has its own
        table_dir: Directory holding the tables (default: bundled Caltrans HDM)

    Returns:
        SightDistanceTable

    Raises:
        TableIOError: If the file cannot be read
        ConfigError: If the file content is malformed
    """
    settings = SightDistanceSettings(table_dir=Path(table_dir) if table_dir else None)
    path = settings.table_path(sight_type)

    try:
        with path.open("r", encoding="utf-8") as f:
            table = parse_table(f, source=str(path))
    except OSError as e:
        raise TableIOError(f"Could not read sight distance table {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Table configured improperly: {path} is not UTF-8 text ({e})"
        ) from e

    logger.info("Loaded %s (%d design speeds)", path.name, len(table))
    return table


def _table_key(design_speed) -> Optional[int]:
    """Integer table key for a design speed, None if it has a fraction."""
    if isinstance(design_speed, bool):
        return None
    try:
        value = float(design_speed)
    except (TypeError, ValueError):
        return None
    if not value.is_integer():
        return None
    return int(value)


def lookup_min_sight_distance(
    table: SightDistanceTable,
    design_speed: Union[int, float],
    sight_type: SightType,
    sustained_downgrade: bool = False,
    downgrade_factor: float = SUSTAINED_DOWNGRADE_FACTOR,
    policy: DowngradePolicy = DowngradePolicy.ALL_SIGHT_TYPES
) -> float:
    """Minimum sight distance for an exact design speed.

    The caller decides whether the sustained downgrade condition holds
    (steeper than 3 percent and longer than one mile).

    Args:
        table: Loaded table for the sight type
        design_speed: Design speed; must be a row of the table
        sight_type: Selects the column (PASSING is column 1, others 0)
        sustained_downgrade: Apply the downgrade factor
        downgrade_factor: Multiplier for sustained downgrades
        policy: Sight types the factor applies to

    Returns:
        Minimum sight distance

    Raises:
        DesignSpeedLookupError: If design speed is not in the table
        ConfigError: If the row has no value for the sight type's column
    """
    key = _table_key(design_speed)
    if key is None or key not in table.rows:
        raise DesignSpeedLookupError(design_speed, table.source)

    row = table.rows[key]
    column = sight_type.column
    if column >= len(row):
        raise ConfigError(
            f"Table configured improperly: {table.source} has no "
            f"{sight_type.value.lower()} value for design speed {key}"
        )

    minimum_sight_distance = row[column]
    if sustained_downgrade and policy.applies_to(sight_type):
        minimum_sight_distance *= downgrade_factor

    return minimum_sight_distance


class SightDistanceReference:
    """All tables of one design standard, loaded once and shared read-only.

    Example:
        >>> reference = SightDistanceReference.load()
        >>> reference.min_sight_distance(65, SightType.STOPPING)
        660.0
    """

    def __init__(
        self,
        tables: Mapping[SightType, SightDistanceTable],
        settings: Optional[SightDistanceSettings] = None
    ):
        missing = [t.value for t in SightType if t not in tables]
        if missing:
            raise ConfigError(f"No sight distance table for: {', '.join(missing)}")
        self._tables = MappingProxyType(dict(tables))
        self.settings = settings or SightDistanceSettings()

    @classmethod
    def load(cls, settings: Optional[SightDistanceSettings] = None) -> "SightDistanceReference":
        """Read every table file once; sight types sharing a file share a table."""
        settings = settings or SightDistanceSettings()
        by_path: Dict[Path, SightDistanceTable] = {}
        tables = {}

        for sight_type in SightType:
            path = settings.table_path(sight_type)
            if path not in by_path:
                by_path[path] = load_table(sight_type, settings.resolved_table_dir)
            tables[sight_type] = by_path[path]

        return cls(tables, settings)

    def table(self, sight_type: SightType) -> SightDistanceTable:
        return self._tables[sight_type]

    def min_sight_distance(
        self,
        design_speed: Union[int, float],
        sight_type: SightType,
        sustained_downgrade: bool = False
    ) -> float:
        """Lookup with this reference's downgrade factor and policy."""
        return lookup_min_sight_distance(
            self.table(sight_type),
            design_speed,
            sight_type,
            sustained_downgrade,
            downgrade_factor=self.settings.downgrade_factor,
            policy=self.settings.downgrade_policy,
        )


__all__ = [
    "SightDistanceTable",
    "SightDistanceReference",
    "parse_table",
    "load_table",
    "lookup_min_sight_distance",
]
