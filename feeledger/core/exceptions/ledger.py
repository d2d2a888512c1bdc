"""
Ledger-specific exceptions for the feeledger system.

Every one of these aborts the whole public operation that raised it; the
ledger's atomic scope restores balances before the error reaches the caller.
"""

from .base import FeeLedgerError


class LedgerError(FeeLedgerError):
    """Base exception for ledger operation errors."""
    pass


class InsufficientBalanceError(LedgerError):
    """Raised when an account cannot cover a required debit (fee or principal)."""

    def __init__(self, required: int, available: int, account: str = None):
        self.required = required
        self.available = available
        self.account = account
        message = f"Insufficient balance: Required {required}, Available {available}"
        if account:
            message += f" on account {account}"
        super().__init__(message)


class ArithmeticOverflowError(LedgerError):
    """Raised when an amount computation leaves the representable range."""

    def __init__(self, operation: str, *operands: int):
        self.operation = operation
        self.operands = operands
        message = f"Arithmetic overflow in {operation}"
        if operands:
            message += f" with operands {', '.join(str(op) for op in operands)}"
        super().__init__(message)


class InvalidDestinationError(LedgerError):
    """Raised when value is sent to a destination that cannot receive it."""

    def __init__(self, destination: str, reason: str = None):
        self.destination = destination
        self.reason = reason
        message = f"Invalid destination: {destination}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class InvalidParameterError(LedgerError):
    """Raised when an administrative update or an operation argument is invalid."""

    def __init__(self, parameter: str, value=None, reason: str = None):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        message = f"Invalid parameter '{parameter}'"
        if value is not None:
            message += f" with value '{value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnauthorizedError(LedgerError):
    """Raised when the caller of an administrative operation is not authorized."""

    def __init__(self, caller: str, operation: str):
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller {caller} is not authorized to {operation}")
