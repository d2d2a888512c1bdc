from dataclasses import dataclass

from feeledger.core.exceptions import InvalidParameterError
from feeledger.outils.address import AddressLike, address_to_int, is_zero_address


def is_redemption_address(address: AddressLike, redemption_address_count: int) -> bool:
    """
    True when `address` falls inside the active redemption range.

    The zero address is never a redemption address; it routes to a plain burn.
    """
    if is_zero_address(address):
        return False
    return address_to_int(address) <= redemption_address_count


@dataclass(frozen=True)
class RedemptionRegistry:
    """
    Append-only counter defining which low-numbered addresses burn what they receive.

    Any non-zero address whose integer value is at most `count` is a redemption
    address. The count only ever grows, one step at a time: `incremented`
    returns the next registry and leaves this one untouched.
    """
    count: int = 0

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise InvalidParameterError("redemption_address_count", self.count, "must be a non-negative integer")

    def incremented(self) -> "RedemptionRegistry":
        return RedemptionRegistry(self.count + 1)

    def is_redemption_address(self, address: AddressLike) -> bool:
        return is_redemption_address(address, self.count)
