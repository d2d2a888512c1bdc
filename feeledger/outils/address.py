"""
Helpers for 20-byte account addresses.

Addresses are carried around as lowercase `0x`-prefixed 40 hex digit strings.
Integers in the 160 bit range are accepted wherever an address is expected.
"""

from typing import Union

from feeledger.core.exceptions import InvalidParameterError

ADDRESS_BYTES = 20
MAX_ADDRESS_INT = 2 ** (ADDRESS_BYTES * 8) - 1
ZERO_ADDRESS = "0x" + "0" * (ADDRESS_BYTES * 2)

AddressLike = Union[str, int]


def address_from_int(value: int) -> str:
    """Render an integer as a canonical address string."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError("address", value, "must be an int or a hex string")
    if value < 0 or value > MAX_ADDRESS_INT:
        raise InvalidParameterError("address", value, "outside the 160 bit address range")
    return "0x" + format(value, "0{}x".format(ADDRESS_BYTES * 2))


def normalize_address(address: AddressLike) -> str:
    """Return the canonical lowercase form of an address."""
    if isinstance(address, int) and not isinstance(address, bool):
        return address_from_int(address)
    if not isinstance(address, str):
        raise InvalidParameterError("address", address, "must be an int or a hex string")

    digits = address[2:] if address[:2].lower() == "0x" else address
    if len(digits) != ADDRESS_BYTES * 2:
        raise InvalidParameterError("address", address, f"expected {ADDRESS_BYTES * 2} hex digits")
    try:
        int(digits, 16)
    except ValueError:
        raise InvalidParameterError("address", address, "not a hex string") from None
    return "0x" + digits.lower()


def address_to_int(address: AddressLike) -> int:
    """Numeric value of an address."""
    return int(normalize_address(address), 16)


def is_zero_address(address: AddressLike) -> bool:
    return normalize_address(address) == ZERO_ADDRESS
