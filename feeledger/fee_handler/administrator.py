"""
Fee Administrator for the fee layer.
Owns the fee schedule, the staker address and the redemption address count.
"""

import threading
from dataclasses import dataclass, replace
from queue import Queue
from typing import Optional

from feeledger.core.exceptions import InvalidParameterError, UnauthorizedError
from feeledger.events_handler.event import (
    FeeScheduleChangedEvent,
    RedemptionCountIncrementedEvent,
    StakerChangedEvent
)
from feeledger.fee_handler.fee_schedule import FeeSchedule
from feeledger.fee_handler.redemption_registry import RedemptionRegistry
from feeledger.ledger_handler.base import AbstractAuthorizer
from feeledger.logger import get_feeledger_logger
from feeledger.outils.address import AddressLike, is_zero_address, normalize_address


@dataclass(frozen=True)
class FeeState:
    """Immutable snapshot of every administrative parameter the fee layer reads."""
    schedule: FeeSchedule
    staker: str
    redemption_registry: RedemptionRegistry
    version: int = 0

    @property
    def redemption_address_count(self) -> int:
        return self.redemption_registry.count


class FeeAdministrator:
    """
    Single owner of the mutable fee configuration.

    Every mutator checks authorization, validates its input completely and
    only then swaps in a new FeeState, so readers always see either the old
    or the new state and never a half-applied update. The ordering lock is
    shared with the transfer router: administrative updates and ledger
    operations are serialized against each other.

    Events are put on `events_queue` after the new state is in place.
    """

    def __init__(
        self,
        authorizer: AbstractAuthorizer,
        staker: AddressLike,
        schedule: Optional[FeeSchedule] = None,
        redemption_address_count: int = 0,
        events_queue: Optional[Queue] = None,
        lock: Optional[threading.RLock] = None
    ):
        self.authorizer = authorizer
        self.events_queue = events_queue if events_queue is not None else Queue()
        self.lock = lock if lock is not None else threading.RLock()
        self.logger = get_feeledger_logger().bind(component="FeeAdministrator")

        schedule = schedule if schedule is not None else FeeSchedule()
        schedule.validate()
        staker = self._validate_staker(staker)
        self._state = FeeState(
            schedule=schedule,
            staker=staker,
            redemption_registry=RedemptionRegistry(redemption_address_count)
        )

        self.logger.info("FeeAdministrator initialized",
            staker=staker,
            schedule=schedule.to_dict(),
            redemption_address_count=self._state.redemption_address_count
        )

    def snapshot(self) -> FeeState:
        """Current fee state; the returned object never changes."""
        with self.lock:
            return self._state

    @property
    def schedule(self) -> FeeSchedule:
        return self.snapshot().schedule

    @property
    def staker(self) -> str:
        return self.snapshot().staker

    @property
    def redemption_address_count(self) -> int:
        return self.snapshot().redemption_address_count

    def update_schedule(self, caller: AddressLike, schedule: FeeSchedule) -> FeeState:
        """
        Replace all fee rules at once.

        Args:
            caller: Address requesting the change
            schedule: Complete new schedule

        Returns:
            FeeState: The committed state

        Raises:
            UnauthorizedError: If the caller may not change fee parameters
            InvalidParameterError: If any rule is invalid; nothing is changed
        """
        with self.lock:
            self._require_authorized(caller, "update fee schedule")
            if not isinstance(schedule, FeeSchedule):
                raise InvalidParameterError("schedule", schedule, "must be a FeeSchedule")
            try:
                schedule.validate()
            except InvalidParameterError as e:
                self.logger.warning("Fee schedule update rejected", reason=str(e))
                raise

            state = self._commit(schedule=schedule)
            self.events_queue.put(FeeScheduleChangedEvent.from_state(state))

        self.logger.info("Fee schedule updated",
            schedule=schedule.to_dict(),
            version=state.version
        )
        return state

    def update_schedule_from_values(self, caller: AddressLike, **values: int) -> FeeState:
        """Keyword form of `update_schedule`, see `FeeSchedule.from_values`."""
        try:
            schedule = FeeSchedule.from_values(**values)
        except TypeError as e:
            raise InvalidParameterError("schedule", sorted(values), str(e)) from e
        return self.update_schedule(caller, schedule)

    def change_staker(self, caller: AddressLike, new_staker: AddressLike) -> FeeState:
        """
        Redirect future fees to `new_staker`.

        Raises:
            UnauthorizedError: If the caller may not change fee parameters
            InvalidParameterError: If `new_staker` is the zero address
        """
        with self.lock:
            self._require_authorized(caller, "change staker")
            staker = self._validate_staker(new_staker)

            state = self._commit(staker=staker)
            self.events_queue.put(StakerChangedEvent.from_state(state))

        self.logger.info("Staker changed", staker=staker, version=state.version)
        return state

    def increment_redemption_count(self, caller: AddressLike) -> int:
        """
        Grow the redemption address range by exactly one address.

        Returns:
            int: The new redemption address count
        """
        with self.lock:
            self._require_authorized(caller, "increment redemption address count")

            state = self._commit(redemption_registry=self._state.redemption_registry.incremented())
            self.events_queue.put(RedemptionCountIncrementedEvent.from_state(state))

        self.logger.info("Redemption address count incremented",
            redemption_address_count=state.redemption_address_count,
            version=state.version
        )
        return state.redemption_address_count

    def _commit(self, **changes) -> FeeState:
        self._state = replace(self._state, version=self._state.version + 1, **changes)
        return self._state

    def _require_authorized(self, caller: AddressLike, operation: str) -> None:
        caller = normalize_address(caller)
        if not self.authorizer.is_authorized(caller):
            self.logger.warning("Unauthorized administrative call", caller=caller, operation=operation)
            raise UnauthorizedError(caller, operation)

    @staticmethod
    def _validate_staker(staker: AddressLike) -> str:
        staker = normalize_address(staker)
        if is_zero_address(staker):
            raise InvalidParameterError("staker", staker, "staker cannot be the zero address")
        return staker
