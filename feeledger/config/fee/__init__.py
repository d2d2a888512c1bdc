"""
Fee ledger configuration domain.
"""

from .config import FeeLedgerConfig, FeeRuleConfig
from .schema import validate_fee_ledger_config, get_fee_ledger_schema
from .defaults import (
    get_default_fee_ledger_config,
    get_fee_ledger_preset,
    list_available_presets
)

__all__ = [
    'FeeLedgerConfig',
    'FeeRuleConfig',
    'validate_fee_ledger_config',
    'get_fee_ledger_schema',
    'get_default_fee_ledger_config',
    'get_fee_ledger_preset',
    'list_available_presets'
]
