import threading

from feeledger.core.exceptions import InvalidParameterError, UnauthorizedError
from feeledger.ledger_handler.base import AbstractAuthorizer
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import AddressLike, is_zero_address, normalize_address


class OwnerAuthorizer(AbstractAuthorizer):
    """Single-owner administrative gate."""

    def __init__(self, owner: AddressLike):
        owner = normalize_address(owner)
        if is_zero_address(owner):
            raise InvalidParameterError("owner", owner, "owner cannot be the zero address")
        self._owner = owner
        self._lock = threading.RLock()
        self.logger = get_feeledger_logger().bind(component="OwnerAuthorizer")

    @property
    def owner(self) -> str:
        return self._owner

    def is_authorized(self, caller: AddressLike) -> bool:
        with self._lock:
            return normalize_address(caller) == self._owner

    def transfer_ownership(self, caller: AddressLike, new_owner: AddressLike) -> None:
        new_owner = normalize_address(new_owner)
        with self._lock:
            if not self.is_authorized(caller):
                raise UnauthorizedError(normalize_address(caller), "transfer ownership")
            if is_zero_address(new_owner):
                raise InvalidParameterError("new_owner", new_owner, "owner cannot be the zero address")
            previous = self._owner
            self._owner = new_owner
        self.logger.info("Ownership transferred", previous_owner=previous, new_owner=new_owner)
