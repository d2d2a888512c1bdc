"""
Ledger-related enums for the feeledger system.
"""

from enum import Enum


class FeeOperation(Enum):
    """Operation a fee rule is scoped to."""
    TRANSFER = "transfer"
    MINT = "mint"
    BURN = "burn"


class DestinationKind(Enum):
    """Classification of a transfer destination, in routing priority order."""
    BURN = "burn"
    REDEMPTION = "redemption"
    ORDINARY = "ordinary"


class LedgerOperationType(Enum):
    """Primitive operations recorded in a base ledger's audit trail."""
    MINT = "mint"
    BURN = "burn"
    TRANSFER = "transfer"
    APPROVAL = "approval"
    ALLOWANCE_SPEND = "allowance_spend"


class LedgerEventType(Enum):
    """Administrative events published by the fee administrator."""
    FEE_SCHEDULE_CHANGED = "fee_schedule_changed"
    STAKER_CHANGED = "staker_changed"
    REDEMPTION_COUNT_INCREMENTED = "redemption_count_incremented"
