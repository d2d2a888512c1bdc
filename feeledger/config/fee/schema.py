"""
Fee ledger configuration schema definitions.

This module defines validation for fee ledger configuration dictionaries,
as read from YAML files or runtime providers.
"""

from typing import Any, Dict

from feeledger.core.exceptions import InvalidParameterError
from feeledger.outils.address import is_zero_address

FEE_RULE_SCHEMA = {
    'numerator': int,
    'denominator': int,
    'flat': int
}

FEE_LEDGER_SCHEMA = {
    'name': str,
    'description': str,
    'transfer_fee': FEE_RULE_SCHEMA,
    'mint_fee': FEE_RULE_SCHEMA,
    'burn_fee': FEE_RULE_SCHEMA,
    'staker': (str, type(None)),
    'owner': (str, type(None)),
    'redemption_address_count': int,
    'exemption_attribute': str
}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_rule(rule: Any) -> bool:
    if not isinstance(rule, dict):
        return False
    for key in FEE_RULE_SCHEMA:
        if key in rule and (not _is_int(rule[key]) or rule[key] < 0):
            return False
    numerator = rule.get('numerator', 0)
    denominator = rule.get('denominator', 10000)
    return denominator > 0 and numerator < denominator


def validate_fee_ledger_config(config: Dict[str, Any]) -> bool:
    """
    Validate fee ledger configuration data.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid, False otherwise
    """
    for key in config:
        if key not in FEE_LEDGER_SCHEMA:
            return False

    for key in ('transfer_fee', 'mint_fee', 'burn_fee'):
        if key in config and not _validate_rule(config[key]):
            return False

    for key in ('staker', 'owner'):
        value = config.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            return False
        try:
            if is_zero_address(value):
                return False
        except InvalidParameterError:
            return False

    if 'redemption_address_count' in config:
        count = config['redemption_address_count']
        if not _is_int(count) or count < 0:
            return False

    if 'exemption_attribute' in config:
        attribute = config['exemption_attribute']
        if not isinstance(attribute, str) or not attribute:
            return False

    return True


def get_fee_ledger_schema() -> Dict[str, Any]:
    """Get the fee ledger configuration schema."""
    return FEE_LEDGER_SCHEMA.copy()
