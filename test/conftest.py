"""
Shared pytest configuration and fixtures for the fee ledger tests.
"""

import pytest

from feeledger.config.fee import FeeLedgerConfig, FeeRuleConfig
from feeledger.outils.address import address_from_int
from feeledger.token_handler.fee_ledger import FeeLedgerSystem


@pytest.fixture(scope="session")
def addresses():
    """Well-known test accounts, all far above any redemption count used in tests."""
    return {
        'owner': address_from_int(0x0A11CE0000),
        'staker': address_from_int(0x05A4E00000),
        'alice': address_from_int(0xA1A1A10000),
        'bob': address_from_int(0xB0B0B00000),
        'carol': address_from_int(0xCA401C0000)
    }


@pytest.fixture
def fee_config(addresses):
    """Configuration with a 0.1% transfer fee, a flat 10 unit mint fee and a 0.2% burn fee."""
    return FeeLedgerConfig(
        name="Scenario Ledger",
        transfer_fee=FeeRuleConfig(1, 1000, 0),
        mint_fee=FeeRuleConfig(0, 1, 10),
        burn_fee=FeeRuleConfig(1, 500, 0),
        staker=addresses['staker'],
        owner=addresses['owner']
    )


@pytest.fixture
def fee_ledger_system(fee_config):
    """Fee ledger wired with the in-memory collaborators."""
    return FeeLedgerSystem(fee_config)


def pytest_collection_modifyitems(items):
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
