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
Tests for Logging Configuration Module
=======================================

Tests for the logging setup.
"""

import io
import logging

import pytest

from curve_sight.core.logging_config import (
    setup_logging,
    get_logger,
    LOGGER_PREFIX,
)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging changes after each test."""
    logger = logging.getLogger(LOGGER_PREFIX)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.mark.unit
    def test_setup_returns_logger(self):
        """Test that setup_logging returns the package root logger."""
        logger = setup_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == LOGGER_PREFIX

    @pytest.mark.unit
    def test_setup_with_debug_level(self):
        """Test setup with DEBUG level."""
        logger = setup_logging(level=logging.DEBUG)
        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_reinitialize_replaces_handler(self):
        """Test that calling setup twice leaves a single stream handler."""
        setup_logging()
        logger = setup_logging()
        streams = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(streams) == 1

    @pytest.mark.unit
    def test_application_handlers_kept(self):
        """Test that setup leaves handlers the application attached."""
        logger = logging.getLogger(LOGGER_PREFIX)
        own = logging.NullHandler()
        logger.addHandler(own)
        setup_logging()
        setup_logging()
        assert own in logger.handlers

    @pytest.mark.unit
    def test_messages_reach_stream(self):
        """Test that module loggers write to the configured stream."""
        stream = io.StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("curve_sight.core.sight_distance").info("Loaded table")
        assert "Loaded table" in stream.getvalue()


class TestLibraryDefaults:
    """Tests for logging behavior before any setup."""

    @pytest.mark.unit
    def test_package_logger_has_null_handler(self):
        """Test that importing the package installs only a NullHandler."""
        handlers = logging.getLogger(LOGGER_PREFIX).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    @pytest.mark.unit
    def test_get_logger_does_not_configure(self):
        """Test that get_logger adds no handlers and keeps propagation."""
        logger = logging.getLogger(LOGGER_PREFIX)
        before = list(logger.handlers)
        get_logger("freshly_imported_module")
        assert logger.handlers == before
        assert logger.propagate is True


class TestGetLogger:
    """Tests for get_logger function."""

    @pytest.mark.unit
    def test_get_logger_keeps_package_name(self):
        """Test that package module names are used unchanged."""
        logger = get_logger("curve_sight.core.measures")
        assert logger.name == "curve_sight.core.measures"

    @pytest.mark.unit
    def test_get_logger_uses_prefix(self):
        """Test that foreign names are placed under the package prefix."""
        logger = get_logger("test_module")
        assert logger.name == f"{LOGGER_PREFIX}.test_module"

    @pytest.mark.unit
    def test_get_logger_same_name_same_logger(self):
        """Test that same name returns same logger instance."""
        assert get_logger("same_name") is get_logger("same_name")
