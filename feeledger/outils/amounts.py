"""
Checked integer arithmetic for ledger amounts.

Amounts are plain ints bounded to the unsigned 256 bit range. Every helper
raises ArithmeticOverflowError instead of producing a value outside it.
"""

from feeledger.core.exceptions import ArithmeticOverflowError, InvalidParameterError

MAX_UINT256 = 2 ** 256 - 1


def validate_amount(value, name: str = "value") -> int:
    """Check that `value` is an int amount within [0, MAX_UINT256]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, value, "amounts must be integers")
    if value < 0:
        raise InvalidParameterError(name, value, "amounts must be non-negative")
    if value > MAX_UINT256:
        raise ArithmeticOverflowError(f"{name} range check", value)
    return value


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > MAX_UINT256:
        raise ArithmeticOverflowError("addition", a, b)
    return result


def checked_sub(a: int, b: int) -> int:
    # Underflow is reported as the same range failure as overflow
    if b > a:
        raise ArithmeticOverflowError("subtraction", a, b)
    return a - b


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > MAX_UINT256:
        raise ArithmeticOverflowError("multiplication", a, b)
    return result


def checked_div(a: int, b: int) -> int:
    """Floor division; the operands are non-negative so this truncates toward zero."""
    if b == 0:
        raise ArithmeticOverflowError("division by zero", a, b)
    return a // b
