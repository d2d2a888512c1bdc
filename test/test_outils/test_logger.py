"""
Tests for the structured logger wrapper.
"""

import unittest

from feeledger.config import LogLevel, SystemConfig
from feeledger.logger import FeeLedgerStructLogger, get_feeledger_logger, init_logger


class TestFeeLedgerLogger(unittest.TestCase):

    def test_init_logger_accepts_system_config(self):
        logger = init_logger(SystemConfig(log_level=LogLevel.WARNING))
        self.assertIsInstance(logger, FeeLedgerStructLogger)

    def test_bind_returns_new_logger(self):
        base = get_feeledger_logger()
        bound = base.bind(component="Test")
        self.assertIsInstance(bound, FeeLedgerStructLogger)
        self.assertIsNot(bound, base)
        bound.debug("bound logger works", value="1")

    def test_context_binding(self):
        logger = get_feeledger_logger()
        logger.bind_context(request="abc")
        logger.info("with context")
        logger.unbind_context("request")


if __name__ == "__main__":
    unittest.main()
