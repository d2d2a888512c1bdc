"""
Core exceptions for the feeledger system.

This module provides all exception classes used throughout the feeledger system,
organized by domain and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    FeeLedgerError,
    ValidationError,
    ConfigurationError
)

# Ledger exceptions
from .ledger import (
    LedgerError,
    InsufficientBalanceError,
    ArithmeticOverflowError,
    InvalidDestinationError,
    InvalidParameterError,
    UnauthorizedError
)

__all__ = [
    # Base exceptions
    'FeeLedgerError',
    'ValidationError',
    'ConfigurationError',

    # Ledger exceptions
    'LedgerError',
    'InsufficientBalanceError',
    'ArithmeticOverflowError',
    'InvalidDestinationError',
    'InvalidParameterError',
    'UnauthorizedError'
]
