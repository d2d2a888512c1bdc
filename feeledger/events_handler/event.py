from datetime import datetime, timezone

from feeledger.core.enums import LedgerEventType


class FeeScheduleChangedEvent(object):
    """
    Published after a fee schedule update commits.

    Parameters
    ----------
    time: `datetime`
        Event time
    schedule: `FeeSchedule`
        The complete new schedule
    version: `int`
        Version of the fee state that introduced the schedule
    """
    def __init__(self, time, schedule, version):
        self.type = LedgerEventType.FEE_SCHEDULE_CHANGED
        self.time = time
        self.schedule = schedule
        self.version = version

    @classmethod
    def from_state(cls, state):
        return cls(datetime.now(timezone.utc), state.schedule, state.version)

    def __str__(self):
        return f"{self.type.value} (v{self.version}, {self.schedule.to_dict()})"

    def __repr__(self):
        return str(self)


class StakerChangedEvent(object):
    """
    Published after the fee recipient changes.

    Parameters
    ----------
    time: `datetime`
        Event time
    staker: `str`
        New staker address
    version: `int`
        Version of the fee state that introduced the staker
    """
    def __init__(self, time, staker, version):
        self.type = LedgerEventType.STAKER_CHANGED
        self.time = time
        self.staker = staker
        self.version = version

    @classmethod
    def from_state(cls, state):
        return cls(datetime.now(timezone.utc), state.staker, state.version)

    def __str__(self):
        return f"{self.type.value} (v{self.version}, {self.staker})"

    def __repr__(self):
        return str(self)


class RedemptionCountIncrementedEvent(object):
    """
    Published after the redemption address range grows by one.

    Parameters
    ----------
    time: `datetime`
        Event time
    redemption_address_count: `int`
        New count; addresses 1..count are now redemption addresses
    version: `int`
        Version of the fee state that introduced the count
    """
    def __init__(self, time, redemption_address_count, version):
        self.type = LedgerEventType.REDEMPTION_COUNT_INCREMENTED
        self.time = time
        self.redemption_address_count = redemption_address_count
        self.version = version

    @classmethod
    def from_state(cls, state):
        return cls(datetime.now(timezone.utc), state.redemption_address_count, state.version)

    def __str__(self):
        return f"{self.type.value} (v{self.version}, {self.redemption_address_count})"

    def __repr__(self):
        return str(self)
