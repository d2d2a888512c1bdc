"""
Fee domain configuration classes.

This module defines the configuration of a fee-bearing ledger: the fee rules,
the staker and owner addresses, the initial redemption address count and the
attribute name the exemption oracle is queried with.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from feeledger.fee_handler.fee_schedule import FeeRule, FeeSchedule
from feeledger.ledger_handler.attribute_registry import NO_FEES_ATTRIBUTE


@dataclass
class FeeRuleConfig:
    """Configuration of a single fee rule."""
    numerator: int = 0
    denominator: int = 10000
    flat: int = 0

    def to_rule(self) -> FeeRule:
        return FeeRule(self.numerator, self.denominator, self.flat)


@dataclass
class FeeLedgerConfig:
    """
    Main fee ledger configuration class.

    `staker` and `owner` have no usable default: a ledger cannot be built
    until both are set.
    """

    name: str = "Fee Ledger"
    description: str = ""

    transfer_fee: FeeRuleConfig = field(default_factory=lambda: FeeRuleConfig(7, 10000, 0))
    mint_fee: FeeRuleConfig = field(default_factory=FeeRuleConfig)
    burn_fee: FeeRuleConfig = field(default_factory=FeeRuleConfig)

    staker: Optional[str] = None
    owner: Optional[str] = None
    redemption_address_count: int = 0
    exemption_attribute: str = NO_FEES_ATTRIBUTE

    def to_schedule(self) -> FeeSchedule:
        return FeeSchedule(
            transfer=self.transfer_fee.to_rule(),
            mint=self.mint_fee.to_rule(),
            burn=self.burn_fee.to_rule()
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        result = {}

        result['name'] = self.name
        result['description'] = self.description

        for key in ('transfer_fee', 'mint_fee', 'burn_fee'):
            rule = getattr(self, key)
            result[key] = {
                'numerator': rule.numerator,
                'denominator': rule.denominator,
                'flat': rule.flat
            }

        result['staker'] = self.staker
        result['owner'] = self.owner
        result['redemption_address_count'] = self.redemption_address_count
        result['exemption_attribute'] = self.exemption_attribute

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FeeLedgerConfig':
        """Create configuration from dictionary."""
        config = cls()

        config.name = data.get('name', config.name)
        config.description = data.get('description', config.description)

        for key in ('transfer_fee', 'mint_fee', 'burn_fee'):
            if key in data:
                default = getattr(config, key)
                rule_data = data[key]
                setattr(config, key, FeeRuleConfig(
                    numerator=rule_data.get('numerator', default.numerator),
                    denominator=rule_data.get('denominator', default.denominator),
                    flat=rule_data.get('flat', default.flat)
                ))

        config.staker = data.get('staker', config.staker)
        config.owner = data.get('owner', config.owner)
        config.redemption_address_count = data.get('redemption_address_count', config.redemption_address_count)
        config.exemption_attribute = data.get('exemption_attribute', config.exemption_attribute)

        return config
