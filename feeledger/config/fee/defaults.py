"""
Default fee ledger configurations and presets.
"""

from typing import List

from .config import FeeLedgerConfig, FeeRuleConfig


def get_default_fee_ledger_config() -> FeeLedgerConfig:
    """Get default fee ledger configuration: 7 bps on transfers, free mint and burn."""
    return FeeLedgerConfig()


def get_zero_fee_preset() -> FeeLedgerConfig:
    """Get a configuration that charges nothing on any operation."""
    return FeeLedgerConfig(
        name="Zero Fee Ledger",
        description="No fees on transfer, mint or burn",
        transfer_fee=FeeRuleConfig(0, 10000, 0),
        mint_fee=FeeRuleConfig(0, 10000, 0),
        burn_fee=FeeRuleConfig(0, 10000, 0)
    )


def get_flat_mint_preset() -> FeeLedgerConfig:
    """Get a configuration with a flat mint fee and small proportional transfer/burn fees."""
    return FeeLedgerConfig(
        name="Flat Mint Fee Ledger",
        description="0.1% transfer fee, flat 10 unit mint fee, 0.2% burn fee",
        transfer_fee=FeeRuleConfig(1, 1000, 0),
        mint_fee=FeeRuleConfig(0, 1, 10),
        burn_fee=FeeRuleConfig(1, 500, 0)
    )


_PRESETS = {
    'default': get_default_fee_ledger_config,
    'zero_fee': get_zero_fee_preset,
    'flat_mint': get_flat_mint_preset
}


def get_fee_ledger_preset(preset_name: str) -> FeeLedgerConfig:
    """
    Get a preset fee ledger configuration by name.

    Raises:
        ValueError: If the preset name is unknown
    """
    if preset_name not in _PRESETS:
        raise ValueError(f"Unknown preset '{preset_name}'. Available presets: {list(_PRESETS.keys())}")
    return _PRESETS[preset_name]()


def list_available_presets() -> List[str]:
    """List all available preset names."""
    return list(_PRESETS.keys())
