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
Logging Configuration Module
=============================

Logging for Curve Sight. Modules log through ``get_logger``; nothing is
printed until the application calls ``setup_logging`` or configures the
standard library logging itself.

Usage:
    from curve_sight.core.logging_config import get_logger, setup_logging

    setup_logging(level=logging.DEBUG)   # optional, once at startup

    logger = get_logger(__name__)
    logger.info("Table loaded")
    logger.debug("Solved tangent: %s", tangent)
    logger.warning("Obstruction offset defaulted to zero")

Log Levels:
    DEBUG    - Solved dimensions and propagated stations
    INFO     - Reference table loads
    WARNING  - Optional inputs that were defaulted or inadequate sight distance
"""

import logging
import sys
from typing import Optional

# Package-wide logger name prefix
LOGGER_PREFIX = "curve_sight"

# Default format for log messages
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"

# Silent until the application configures logging
logging.getLogger(LOGGER_PREFIX).addHandler(logging.NullHandler())

# Handler installed by setup_logging, replaced on reinitialization
_handler: Optional[logging.Handler] = None


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[object] = None
) -> logging.Logger:
    """Send Curve Sight log records to a stream.

    Call once from an application entry point. Handlers the application
    attached to the package logger are left in place.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: If True, use detailed format with timestamps and line numbers
        stream: Output stream (defaults to sys.stderr)

    Returns:
        Root logger for curve_sight
    """
    global _handler

    root_logger = logging.getLogger(LOGGER_PREFIX)

    if _handler is not None:
        root_logger.removeHandler(_handler)

    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    fmt = DETAILED_FORMAT if detailed else DEFAULT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root_logger.addHandler(handler)
    _handler = handler

    # Prevent propagation to avoid duplicate messages
    root_logger.propagate = False

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the curve_sight namespace
    """
    if not name.startswith(LOGGER_PREFIX):
        name = f"{LOGGER_PREFIX}.{name}"

    return logging.getLogger(name)


__all__ = [
    "setup_logging",
    "get_logger",
    "LOGGER_PREFIX",
]
