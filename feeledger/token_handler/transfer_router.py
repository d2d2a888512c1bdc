from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

from feeledger.core.enums import DestinationKind, FeeOperation
from feeledger.core.exceptions import InvalidDestinationError, LedgerError
from feeledger.fee_handler.administrator import FeeAdministrator, FeeState
from feeledger.fee_handler.fee_engine import FeeEngine
from feeledger.ledger_handler.base import AbstractBaseLedger
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import ZERO_ADDRESS, AddressLike, is_zero_address, normalize_address
from feeledger.outils.amounts import checked_sub, validate_amount


@dataclass(frozen=True)
class TransferReceipt:
    """
    Outcome of one public ledger operation.

    `value == delivered + burned + fee` for transfers and burns, and
    `value == delivered + fee` for mints, where `delivered` is the net change
    of the recipient and goes negative when the mint fee exceeds `value`.

    When the payer of a fee is the staker itself the fee never leaves its
    account, so its balance drops by `value - fee` rather than `value`.
    """
    operation: FeeOperation
    kind: Optional[DestinationKind]
    sender: Optional[str]
    recipient: Optional[str]
    value: int
    transfer_fee: int = 0
    burn_fee: int = 0
    mint_fee: int = 0
    delivered: int = 0
    burned: int = 0
    state_version: int = 0

    @property
    def fee(self) -> int:
        return self.transfer_fee + self.burn_fee + self.mint_fee


class TransferRouter:
    """
    Public mint, burn and transfer operations of the fee-bearing ledger.

    Each operation holds the ordering lock shared with the fee administrator,
    reads one fee state snapshot, and runs inside a single ledger atomic
    scope: it either applies every balance change or none.

    Destinations are classified in priority order:
    1. the zero address burns the value,
    2. a redemption address receives the value net of the transfer fee and
       burns it at once, paying the burn fee itself,
    3. any other address receives the value net of the transfer fee.
    """

    def __init__(self, ledger: AbstractBaseLedger, fee_engine: FeeEngine, administrator: FeeAdministrator):
        self.ledger = ledger
        self.fee_engine = fee_engine
        self.administrator = administrator
        self.logger = get_feeledger_logger().bind(component="TransferRouter")

    @property
    def lock(self):
        return self.administrator.lock

    def balance_of(self, address: AddressLike) -> int:
        return self.ledger.balance_of(normalize_address(address))

    def classify_destination(self, to: AddressLike, state: Optional[FeeState] = None) -> DestinationKind:
        state = state if state is not None else self.administrator.snapshot()
        if is_zero_address(to):
            return DestinationKind.BURN
        if state.redemption_registry.is_redemption_address(to):
            return DestinationKind.REDEMPTION
        return DestinationKind.ORDINARY

    def transfer(self, sender: AddressLike, to: AddressLike, value: int) -> TransferReceipt:
        """
        Move `value` from `sender` to `to`, routing by destination kind.

        Raises:
            InsufficientBalanceError: If the sender (or a redemption address)
                cannot cover a debit
            ArithmeticOverflowError: If a fee overflows or exceeds the value it is charged on
        """
        sender = normalize_address(sender)
        to = normalize_address(to)
        value = validate_amount(value)

        with self.lock:
            state = self.administrator.snapshot()
            kind = self.classify_destination(to, state)
            with self._atomic_operation("transfer", sender=sender, recipient=to, value=str(value)):
                if kind is DestinationKind.BURN:
                    receipt = self._burn(sender, value, state)
                else:
                    receipt = self._route(sender, to, value, kind, state)

        self._log_receipt(receipt)
        return receipt

    def transfer_from(self, spender: AddressLike, sender: AddressLike, to: AddressLike, value: int) -> TransferReceipt:
        """
        Delegated transfer spending `spender`'s allowance on `sender`.

        Delegated transfers are never turned into burns: a zero destination
        is rejected before anything is touched.

        Raises:
            InvalidDestinationError: If `to` is the zero address
            InsufficientBalanceError: If the allowance or a balance is too small
        """
        spender = normalize_address(spender)
        sender = normalize_address(sender)
        to = normalize_address(to)
        value = validate_amount(value)

        if is_zero_address(to):
            self.logger.warning("Delegated transfer to the zero address rejected",
                spender=spender,
                sender=sender
            )
            raise InvalidDestinationError(to, "delegated transfers cannot target the zero address")

        with self.lock:
            state = self.administrator.snapshot()
            kind = self.classify_destination(to, state)
            with self._atomic_operation("transfer_from", spender=spender, sender=sender,
                                        recipient=to, value=str(value)):
                self.ledger.spend_allowance(sender, spender, value)
                receipt = self._route(sender, to, value, kind, state)

        self._log_receipt(receipt)
        return receipt

    def mint(self, to: AddressLike, value: int) -> TransferReceipt:
        """
        Create `value` on `to`, then collect the mint fee from `to`.

        Raises:
            InvalidDestinationError: If `to` is the zero address
            InsufficientBalanceError: If `to` cannot cover the mint fee after the mint
            ArithmeticOverflowError: If the supply or the fee computation overflows
        """
        to = normalize_address(to)
        value = validate_amount(value)
        if is_zero_address(to):
            raise InvalidDestinationError(to, "cannot mint to the zero address")

        with self.lock:
            state = self.administrator.snapshot()
            with self._atomic_operation("mint", recipient=to, value=str(value)):
                self.ledger.mint(to, value)
                fee = self.fee_engine.compute_and_collect_fee(
                    to, value, state.schedule.mint, ZERO_ADDRESS, state.staker
                )
                # Signed: a flat fee above `value` is paid out of the earlier balance
                delivered = value - fee

        receipt = TransferReceipt(
            operation=FeeOperation.MINT,
            kind=None,
            sender=None,
            recipient=to,
            value=value,
            mint_fee=fee,
            delivered=delivered,
            state_version=state.version
        )
        self._log_receipt(receipt)
        return receipt

    def burn(self, burner: AddressLike, value: int, note: str = "") -> TransferReceipt:
        """
        Collect the burn fee from `burner`, then destroy the rest of `value`.

        `note` travels with the log record only.
        """
        burner = normalize_address(burner)
        value = validate_amount(value)

        with self.lock:
            state = self.administrator.snapshot()
            with self._atomic_operation("burn", sender=burner, value=str(value), note=note):
                receipt = self._burn(burner, value, state)

        self._log_receipt(receipt, note=note)
        return receipt

    def preview_transfer(self, sender: AddressLike, to: AddressLike, value: int) -> TransferReceipt:
        """Receipt `transfer` would produce against the current state, without moving anything."""
        sender = normalize_address(sender)
        to = normalize_address(to)
        value = validate_amount(value)

        with self.lock:
            state = self.administrator.snapshot()
            kind = self.classify_destination(to, state)
            schedule = state.schedule

            if kind is DestinationKind.BURN:
                burn_fee = self.fee_engine.preview_fee(schedule.burn, value, sender, ZERO_ADDRESS)
                return self._receipt(FeeOperation.BURN, kind, sender, None, value, state,
                                     burn_fee=burn_fee, burned=checked_sub(value, burn_fee))

            transfer_fee = self.fee_engine.preview_fee(schedule.transfer, value, sender, to)
            net = checked_sub(value, transfer_fee)
            if kind is DestinationKind.REDEMPTION:
                burn_fee = self.fee_engine.preview_fee(schedule.burn, net, to, ZERO_ADDRESS)
                return self._receipt(FeeOperation.TRANSFER, kind, sender, to, value, state,
                                     transfer_fee=transfer_fee, burn_fee=burn_fee,
                                     burned=checked_sub(net, burn_fee))
            return self._receipt(FeeOperation.TRANSFER, kind, sender, to, value, state,
                                 transfer_fee=transfer_fee, delivered=net)

    def _route(self, sender: str, to: str, value: int, kind: DestinationKind, state: FeeState) -> TransferReceipt:
        schedule = state.schedule
        transfer_fee = self.fee_engine.compute_and_collect_fee(
            sender, value, schedule.transfer, to, state.staker
        )
        net = checked_sub(value, transfer_fee)
        self.ledger.raw_transfer(sender, to, net)

        if kind is not DestinationKind.REDEMPTION:
            return self._receipt(FeeOperation.TRANSFER, kind, sender, to, value, state,
                                 transfer_fee=transfer_fee, delivered=net)

        # The redemption address pays the burn fee on what it just received
        burn_fee = self.fee_engine.compute_and_collect_fee(
            to, net, schedule.burn, ZERO_ADDRESS, state.staker
        )
        burned = checked_sub(net, burn_fee)
        self.ledger.burn(to, burned)
        return self._receipt(FeeOperation.TRANSFER, kind, sender, to, value, state,
                             transfer_fee=transfer_fee, burn_fee=burn_fee, burned=burned)

    def _burn(self, burner: str, value: int, state: FeeState) -> TransferReceipt:
        burn_fee = self.fee_engine.compute_and_collect_fee(
            burner, value, state.schedule.burn, ZERO_ADDRESS, state.staker
        )
        burned = checked_sub(value, burn_fee)
        self.ledger.burn(burner, burned)
        return self._receipt(FeeOperation.BURN, DestinationKind.BURN, burner, None, value, state,
                             burn_fee=burn_fee, burned=burned)

    @staticmethod
    def _receipt(operation, kind, sender, recipient, value, state, **amounts) -> TransferReceipt:
        return TransferReceipt(
            operation=operation,
            kind=kind,
            sender=sender,
            recipient=recipient,
            value=value,
            state_version=state.version,
            **amounts
        )

    @contextmanager
    def _atomic_operation(self, operation: str, **context):
        try:
            with self.ledger.atomic():
                yield
        except LedgerError as e:
            self.logger.warning("Ledger operation aborted",
                operation=operation,
                error=type(e).__name__,
                reason=str(e),
                **context
            )
            raise

    def _log_receipt(self, receipt: TransferReceipt, **extra):
        self.logger.debug("Ledger operation completed",
            operation=receipt.operation.value,
            kind=receipt.kind.value if receipt.kind else None,
            sender=receipt.sender,
            recipient=receipt.recipient,
            value=str(receipt.value),
            fee=str(receipt.fee),
            delivered=str(receipt.delivered),
            burned=str(receipt.burned),
            state_version=receipt.state_version,
            **extra
        )
