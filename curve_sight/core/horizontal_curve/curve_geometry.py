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
Horizontal Curve Geometry Module
=================================

Solves the dimensions of a simple circular curve from its radius and
deflection angle, plus the stopping sight distance available past an
obstruction on the inside of the curve.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..errors import GeometryError, UnsupportedMethodError
from ..logging_config import get_logger
from ..measures import (
    Angle,
    coerce_length,
    coerce_optional_length,
    coerce_optional_speed,
    parse_angle,
)
from .constants import (
    DEGREE_OF_CURVE_CONSTANT,
    MAX_DEFLECTION_DEGREES,
    MIN_DEFLECTION_DEGREES,
    SIGHT_DISTANCE_CONSTANT,
)
from .definitions import BuildDefinition

logger = get_logger(__name__)


@dataclass(frozen=True)
class HorizontalDimensions:
    """Solved dimensions of a circular horizontal curve.

    Attributes:
        radius: Curve radius (R)
        curve_length: Arc length from PC to PT (L)
        tangent: PI to PC / PT distance (T)
        long_chord: Straight line PC to PT (LC)
        middle_ordinate: Arc midpoint to long chord midpoint (M)
        external: PI to arc midpoint (E)
        curve_length_100: Degree of curve, angle subtended by a 100 ft arc (D)
        curve_angle: Deflection angle (delta)
        design_speed: Design speed, 0.0 when not given
        sight_distance: Stopping sight distance available around an
            obstruction offset m from the centerline
    """

    radius: float
    curve_length: float
    tangent: float
    long_chord: float
    middle_ordinate: float
    external: float
    curve_length_100: Angle
    curve_angle: Angle
    design_speed: float
    sight_distance: float


def calculate_sight_distance(radius: float, m: float) -> float:
    """Sight distance around the inside of a curve.

    S = (R / 28.65) * acos((R - m) / R), acos taken in degrees.

    Args:
        radius: Curve radius
        m: Offset from centerline to the sight obstruction

    Returns:
        Visible distance along the curve

    Raises:
        GeometryError: If m is negative or exceeds the radius
    """
    if m < 0:
        raise GeometryError(f"Obstruction offset must be non-negative, got {m}")
    if m > radius:
        raise GeometryError(
            f"Invalid obstruction offset: m={m} exceeds radius R={radius}"
        )

    ratio = (radius - m) / radius
    return radius / SIGHT_DISTANCE_CONSTANT * math.degrees(math.acos(ratio))


def calculate_dimensions(
    radius: float,
    curve_angle: Angle,
    m: float = 0.0,
    design_speed: float = 0.0
) -> HorizontalDimensions:
    """Calculate circular curve dimensions from radius and deflection.

    Args:
        radius: Curve radius, must be positive
        curve_angle: Deflection angle, strictly between 0 and 180 degrees
        m: Obstruction offset for the sight distance (default 0)
        design_speed: Design speed carried through to the result

    Returns:
        HorizontalDimensions

    Raises:
        GeometryError: If radius, deflection or offset describe no curve

    Example:
        >>> dims = calculate_dimensions(818.5, Angle.from_degrees(63.2594))
        >>> print(f"T = {dims.tangent:.2f}")
    """
    if radius <= 0:
        raise GeometryError(f"Radius must be positive, got {radius}")

    delta = curve_angle.decimal_degrees
    if not MIN_DEFLECTION_DEGREES < delta < MAX_DEFLECTION_DEGREES:
        raise GeometryError(
            f"Curve angle must be between {MIN_DEFLECTION_DEGREES:g} and "
            f"{MAX_DEFLECTION_DEGREES:g} degrees, got {delta:g}"
        )

    half = curve_angle.radians / 2.0

    curve_length = radius * delta * math.pi / 180.0
    tangent = radius * math.tan(half)
    external = radius * (1.0 / math.cos(half) - 1.0)
    middle_ordinate = radius * (1.0 - math.cos(half))
    long_chord = 2.0 * radius * math.sin(half)
    curve_length_100 = Angle.from_degrees(DEGREE_OF_CURVE_CONSTANT / radius)
    sight_distance = calculate_sight_distance(radius, m)

    logger.debug(
        "Solved curve R=%.3f delta=%.6f: T=%.3f L=%.3f LC=%.3f S=%.3f",
        radius, delta, tangent, curve_length, long_chord, sight_distance
    )

    return HorizontalDimensions(
        radius=radius,
        curve_length=curve_length,
        tangent=tangent,
        long_chord=long_chord,
        middle_ordinate=middle_ordinate,
        external=external,
        curve_length_100=curve_length_100,
        curve_angle=curve_angle,
        design_speed=design_speed,
        sight_distance=sight_distance,
    )


def solve_dimensions(
    build_method: BuildDefinition,
    radius: str,
    curve_angle: str,
    m: Optional[str] = "",
    design_speed: Optional[str] = ""
) -> HorizontalDimensions:
    """Solve curve dimensions from raw form text.

    Blank or unparsable ``m`` and ``design_speed`` fall back to 0.0.

    Raises:
        UnsupportedMethodError: For BuildDefinition.RADIUS_TANGENT
        ParseError: If radius or curve angle text is malformed
        GeometryError: If the parsed values describe no curve
    """
    if build_method is not BuildDefinition.RADIUS_CURVE_ANGLE:
        raise UnsupportedMethodError(
            f"Build method {build_method.value} hasn't been implemented"
        )

    radius_value = coerce_length(radius, "radius")
    angle = parse_angle(curve_angle, "curve angle")
    m_value = coerce_optional_length(m, "obstruction offset (m)")
    speed = coerce_optional_speed(design_speed, "design speed")

    return calculate_dimensions(radius_value, angle, m_value, speed)


__all__ = [
    "HorizontalDimensions",
    "calculate_sight_distance",
    "calculate_dimensions",
    "solve_dimensions",
]
