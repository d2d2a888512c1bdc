"""
Fee-bearing value ledger.

Adds fee assessment, fee exemptions, a fee recipient and redemption
addresses on top of a base mint/burn/transfer ledger.
"""

from feeledger.config.system import SystemConfig
from feeledger.logger import init_logger

__version__ = "0.1.0"

logger = init_logger(SystemConfig())
