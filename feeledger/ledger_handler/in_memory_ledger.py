"""
In-memory base ledger.
Handles account balances, allowances, total supply and the operation audit trail.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from feeledger.core.enums import LedgerOperationType
from feeledger.core.exceptions import InsufficientBalanceError, InvalidDestinationError
from feeledger.ledger_handler.base import AbstractBaseLedger
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import AddressLike, is_zero_address, normalize_address
from feeledger.outils.amounts import checked_add, checked_sub, validate_amount


@dataclass
class LedgerOperation:
    """Record of a ledger primitive for audit trail."""
    operation_id: str
    operation_type: LedgerOperationType
    amount: int
    timestamp: datetime
    sender: Optional[str] = None
    recipient: Optional[str] = None


class InMemoryLedger(AbstractBaseLedger):
    """
    Thread-safe dictionary-backed implementation of the base ledger.

    Features:
    - Exact integer balances bounded to the unsigned 256 bit range
    - Allowances for delegated transfers
    - Re-entrant atomic scopes with snapshot/restore on failure
    - Complete audit trail of every applied primitive
    """

    def __init__(self, initial_balances: Optional[Dict[AddressLike, int]] = None):
        self._lock = threading.RLock()
        self.logger = get_feeledger_logger().bind(component="InMemoryLedger")

        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._total_supply = 0

        self._operations: List[LedgerOperation] = []
        self._operation_counter = 0

        # Depth of nested atomic() scopes
        self._atomic_depth = 0

        for address, amount in (initial_balances or {}).items():
            self.mint(address, amount)

        self.logger.info("InMemoryLedger initialized",
            accounts=len(self._balances),
            total_supply=str(self._total_supply)
        )

    @property
    def total_supply(self) -> int:
        with self._lock:
            return self._total_supply

    def balance_of(self, address: AddressLike) -> int:
        with self._lock:
            return self._balances.get(normalize_address(address), 0)

    def allowance(self, owner: AddressLike, spender: AddressLike) -> int:
        with self._lock:
            return self._allowances.get((normalize_address(owner), normalize_address(spender)), 0)

    def mint(self, to: AddressLike, amount: int) -> None:
        to = normalize_address(to)
        amount = validate_amount(amount, "amount")
        if is_zero_address(to):
            raise InvalidDestinationError(to, "cannot mint to the zero address")

        with self._lock:
            new_supply = checked_add(self._total_supply, amount)
            new_balance = checked_add(self._balances.get(to, 0), amount)
            self._total_supply = new_supply
            self._balances[to] = new_balance
            self._record(LedgerOperationType.MINT, amount, recipient=to)

    def burn(self, account: AddressLike, amount: int) -> None:
        account = normalize_address(account)
        amount = validate_amount(amount, "amount")

        with self._lock:
            available = self._balances.get(account, 0)
            if available < amount:
                raise InsufficientBalanceError(required=amount, available=available, account=account)
            self._balances[account] = available - amount
            self._total_supply = checked_sub(self._total_supply, amount)
            self._record(LedgerOperationType.BURN, amount, sender=account)

    def raw_transfer(self, sender: AddressLike, recipient: AddressLike, amount: int) -> bool:
        sender = normalize_address(sender)
        recipient = normalize_address(recipient)
        amount = validate_amount(amount, "amount")
        if is_zero_address(recipient):
            raise InvalidDestinationError(recipient, "raw transfers cannot target the zero address")

        with self._lock:
            available = self._balances.get(sender, 0)
            if available < amount:
                raise InsufficientBalanceError(required=amount, available=available, account=sender)
            if sender != recipient:
                new_recipient_balance = checked_add(self._balances.get(recipient, 0), amount)
                self._balances[sender] = available - amount
                self._balances[recipient] = new_recipient_balance
            self._record(LedgerOperationType.TRANSFER, amount, sender=sender, recipient=recipient)
            return True

    def approve(self, owner: AddressLike, spender: AddressLike, amount: int) -> None:
        owner = normalize_address(owner)
        spender = normalize_address(spender)
        amount = validate_amount(amount, "amount")

        with self._lock:
            self._allowances[(owner, spender)] = amount
            self._record(LedgerOperationType.APPROVAL, amount, sender=owner, recipient=spender)

    def spend_allowance(self, owner: AddressLike, spender: AddressLike, amount: int) -> None:
        owner = normalize_address(owner)
        spender = normalize_address(spender)
        amount = validate_amount(amount, "amount")

        with self._lock:
            available = self._allowances.get((owner, spender), 0)
            if available < amount:
                raise InsufficientBalanceError(required=amount, available=available, account=spender)
            self._allowances[(owner, spender)] = available - amount
            self._record(LedgerOperationType.ALLOWANCE_SPEND, amount, sender=owner, recipient=spender)

    @contextmanager
    def atomic(self):
        """Group primitives; the outermost scope restores every change on error."""
        with self._lock:
            outermost = self._atomic_depth == 0
            if outermost:
                snapshot = (
                    dict(self._balances),
                    dict(self._allowances),
                    self._total_supply,
                    len(self._operations),
                    self._operation_counter
                )
            self._atomic_depth += 1
            try:
                yield self
            except BaseException:
                if outermost:
                    (self._balances, self._allowances, self._total_supply,
                     operations_len, self._operation_counter) = snapshot
                    del self._operations[operations_len:]
                    self.logger.debug("Atomic scope rolled back",
                        restored_operations=operations_len
                    )
                raise
            finally:
                self._atomic_depth -= 1

    def get_operations(self, limit: Optional[int] = None,
                       operation_type: Optional[LedgerOperationType] = None) -> List[LedgerOperation]:
        """Get the audit trail, newest last."""
        with self._lock:
            operations = self._operations

            if operation_type:
                operations = [op for op in operations if op.operation_type == operation_type]

            if limit:
                operations = operations[-limit:]

            return list(operations)

    def validate_supply_consistency(self) -> bool:
        """Check that the balances add up to the total supply."""
        with self._lock:
            total = sum(self._balances.values())
            if total != self._total_supply:
                self.logger.error("Balances do not add up to total supply",
                    balances_total=str(total),
                    total_supply=str(self._total_supply)
                )
                return False
            return True

    def _record(self, operation_type: LedgerOperationType, amount: int,
                sender: Optional[str] = None, recipient: Optional[str] = None) -> LedgerOperation:
        self._operation_counter += 1
        operation = LedgerOperation(
            operation_id=f"ledger_op_{self._operation_counter}",
            operation_type=operation_type,
            amount=amount,
            timestamp=datetime.now(),
            sender=sender,
            recipient=recipient
        )
        self._operations.append(operation)

        self.logger.debug("Ledger operation applied",
            operation_type=operation_type.value,
            amount=str(amount),
            sender=sender,
            recipient=recipient
        )
        return operation
