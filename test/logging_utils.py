"""
Logging helper tests (sink installation and opt-in enabling).

Conventions
- Test method names follow CamelCase per project convention.
- The loguru logger is replaced by a mock so the process-wide sinks are untouched.
"""

from __future__ import annotations

import sys
import unittest
from unittest import TestCase, mock

from rich.logging import RichHandler

from cmdarg import logging_utils
from cmdarg.logging_utils import configure_logging


class TestConfigureLogging(TestCase):

    def setUp(self) -> None:
        patcher = mock.patch.object(logging_utils, "logger")
        self.logger = patcher.start()
        self.addCleanup(patcher.stop)
        configured = mock.patch.object(logging_utils, "_CONFIGURED", None)
        configured.start()
        self.addCleanup(configured.stop)

    def testRichSinkByDefault(self):
        configure_logging()
        self.logger.remove.assert_called_once_with()
        sink, = self.logger.add.call_args.args
        self.assertIsInstance(sink, RichHandler)
        self.assertEqual(self.logger.add.call_args.kwargs["level"], "INFO")
        self.logger.enable.assert_called_once_with("cmdarg")

    def testPlainSinkWritesToStderr(self):
        configure_logging("debug", rich=False)
        sink, = self.logger.add.call_args.args
        self.assertIs(sink, sys.stderr)
        self.assertEqual(self.logger.add.call_args.kwargs["level"], "DEBUG")

    def testRepeatedCallIsNoop(self):
        configure_logging("WARNING")
        configure_logging("WARNING")
        self.assertEqual(self.logger.add.call_count, 1)

    def testChangedArgumentsReconfigure(self):
        configure_logging("WARNING")
        configure_logging("DEBUG")
        self.assertEqual(self.logger.add.call_count, 2)
        self.assertEqual(self.logger.remove.call_count, 2)


if __name__ == '__main__':
    unittest.main()
