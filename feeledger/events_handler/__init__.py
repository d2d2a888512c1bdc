from .event import (
    FeeScheduleChangedEvent,
    StakerChangedEvent,
    RedemptionCountIncrementedEvent
)
