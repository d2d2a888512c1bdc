from .address import (
    ZERO_ADDRESS,
    address_from_int,
    address_to_int,
    is_zero_address,
    normalize_address
)
from .amounts import (
    MAX_UINT256,
    validate_amount,
    checked_add,
    checked_sub,
    checked_mul,
    checked_div
)
