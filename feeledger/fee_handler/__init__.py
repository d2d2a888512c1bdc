"""
Fee layer components.

This package holds the fee rules, the administrator owning the mutable fee
configuration, the redemption address registry and the engine that computes
and collects fees.
"""

from .fee_schedule import FeeRule, FeeSchedule
from .redemption_registry import RedemptionRegistry, is_redemption_address
from .administrator import FeeAdministrator, FeeState
from .fee_engine import FeeEngine

__all__ = [
    "FeeRule",
    "FeeSchedule",
    "RedemptionRegistry",
    "is_redemption_address",
    "FeeAdministrator",
    "FeeState",
    "FeeEngine"
]
