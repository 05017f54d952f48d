"""Weekday of any Gregorian date since 1752 via Conway's doomsday algorithm."""

from .core import (
    Doomsday,
    anchor_dates,
    anchor_day,
    days_in_month,
    doomsday,
    is_leap,
    leaps_since_epoch,
    weekday_of,
)
from .exceptions import (
    ConfigError,
    DoomsdayError,
    InvalidMonthNameError,
    InvalidOrdinalError,
    OutOfRangeError,
    ValidationError,
)
from .types import Month, Weekday

__all__ = [
    "ConfigError",
    "Doomsday",
    "DoomsdayError",
    "InvalidMonthNameError",
    "InvalidOrdinalError",
    "Month",
    "OutOfRangeError",
    "ValidationError",
    "Weekday",
    "anchor_dates",
    "anchor_day",
    "days_in_month",
    "doomsday",
    "is_leap",
    "leaps_since_epoch",
    "weekday_of",
]
