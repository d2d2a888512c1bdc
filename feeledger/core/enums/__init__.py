"""
Core enums for the feeledger system.
"""

from .ledger import (
    FeeOperation,
    DestinationKind,
    LedgerOperationType,
    LedgerEventType
)

__all__ = [
    'FeeOperation',
    'DestinationKind',
    'LedgerOperationType',
    'LedgerEventType'
]
