"""
Tests for logging configuration.
"""

import logging
import unittest

from rich.logging import RichHandler

from jj_mcp.utils.log_config import LOGGER_NAME, configure_logging


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging."""

    def setUp(self):
        """Remember the package logger state."""
        self.logger = logging.getLogger(LOGGER_NAME)
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self):
        """Restore the package logger state."""
        handlers, level, propagate = self.saved
        self.logger.handlers = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_installs_rich_handler_on_stderr(self):
        """Test that log records go to a rich handler writing to stderr."""
        logger = configure_logging("INFO")

        self.assertIs(logger, self.logger)
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        self.assertEqual(len(handlers), 1)
        self.assertTrue(handlers[0].console.stderr)
        self.assertFalse(logger.propagate)

    def test_sets_level(self):
        """Test that the level name is applied case-insensitively."""
        self.assertEqual(configure_logging("debug").level, logging.DEBUG)
        self.assertEqual(configure_logging("ERROR").level, logging.ERROR)

    def test_reconfigure_replaces_handler(self):
        """Test that configuring twice leaves a single handler."""
        configure_logging("INFO")
        logger = configure_logging("WARNING")

        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        self.assertEqual(len(handlers), 1)

    def test_module_loggers_inherit(self):
        """Test that module loggers use the package configuration."""
        configure_logging("WARNING")
        self.assertEqual(logging.getLogger("jj_mcp.jj.runner").getEffectiveLevel(), logging.WARNING)
