import threading
from typing import Dict, Set

from feeledger.ledger_handler.base import AbstractExemptionOracle
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import AddressLike, normalize_address

NO_FEES_ATTRIBUTE = "hasNoFees"


class InMemoryAttributeRegistry(AbstractExemptionOracle):
    """
    Dictionary-backed address attribute registry.

    Stores, per address, the set of attribute names currently granted.
    Unknown addresses (the zero address included) carry no attributes.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._attributes: Dict[str, Set[str]] = {}
        self.logger = get_feeledger_logger().bind(component="InMemoryAttributeRegistry")

    def has_attribute(self, address: AddressLike, attribute: str) -> bool:
        with self._lock:
            return attribute in self._attributes.get(normalize_address(address), ())

    def set_attribute(self, address: AddressLike, attribute: str) -> None:
        address = normalize_address(address)
        with self._lock:
            self._attributes.setdefault(address, set()).add(attribute)
        self.logger.info("Attribute granted", address=address, attribute=attribute)

    def clear_attribute(self, address: AddressLike, attribute: str) -> None:
        address = normalize_address(address)
        with self._lock:
            self._attributes.get(address, set()).discard(attribute)
        self.logger.info("Attribute cleared", address=address, attribute=attribute)
