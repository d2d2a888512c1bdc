"""
Collaborators the fee layer runs on: the base ledger, the attribute registry
used as exemption oracle, and the administrative authorization gate.
"""

from .base import AbstractBaseLedger, AbstractExemptionOracle, AbstractAuthorizer
from .in_memory_ledger import InMemoryLedger, LedgerOperation
from .attribute_registry import InMemoryAttributeRegistry, NO_FEES_ATTRIBUTE
from .authorizer import OwnerAuthorizer

__all__ = [
    "AbstractBaseLedger",
    "AbstractExemptionOracle",
    "AbstractAuthorizer",
    "InMemoryLedger",
    "LedgerOperation",
    "InMemoryAttributeRegistry",
    "NO_FEES_ATTRIBUTE",
    "OwnerAuthorizer"
]
