"""
Doomsday algorithm for Gregorian weekdays.

Every year has a single doomsday, for example the doomsday of 2020 is a
Saturday. Each month has a fixed day number that falls on the doomsday,
for example April 4th. Given those two pieces of information the weekday
of any date is a short walk from the anchor.

Years before 1752 aren't supported.
"""

from dataclasses import dataclass

from .constants import (
    DAYS_IN_MONTH,
    EPOCH_YEAR,
    FIXED_ANCHORS,
    LEAP_DAY_MONTH,
    LEAP_DEPENDENT_ANCHORS,
)
from .types import Month, Weekday
from .validation import require_supported_year


def _gregorian_leaps(year: int) -> int:
    """Leap years in 1..year under the Gregorian rule"""
    return year // 4 - year // 100 + year // 400


def is_leap(year: int) -> bool:
    """Return True if ``year`` has a February 29th"""
    require_supported_year(year)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leaps_since_epoch(year: int) -> int:
    """
    Number of leap years since (not including) 1752.

    1752 itself is excluded: it was the year of the 11 day jump into the
    Gregorian calendar for the British Empire.
    """
    require_supported_year(year)
    return _gregorian_leaps(year) - _gregorian_leaps(EPOCH_YEAR)


def doomsday(year: int) -> Weekday:
    """Return the weekday every anchor date of ``year`` falls on"""
    return Weekday.from_residue(year + leaps_since_epoch(year))


def anchor_day(year: int, month: Month) -> int:
    """
    Return the day number in ``month`` that lies on the year's doomsday.

    Only a few mnemonics to memorize:

    - 4/4, 6/6, 8/8, 10/10 and 12/12
    - 9 to 5 at 7-Eleven
    - The last day of February (twice, March 0 is the same day)
    - 3 for three years, then 4 on the fourth
    """
    leap = is_leap(year)
    ordinal = month.to_ordinal()
    if ordinal in LEAP_DEPENDENT_ANCHORS:
        common, leap_anchor = LEAP_DEPENDENT_ANCHORS[ordinal]
        return leap_anchor if leap else common
    return FIXED_ANCHORS[ordinal]


def anchor_dates(year: int) -> dict[Month, int]:
    """Return the anchor day of every month in ``year``"""
    return {month: anchor_day(year, month) for month in Month}


def weekday_of(year: int, month: Month, day: int) -> Weekday:
    """
    Return the weekday of ``day`` in ``month`` of ``year``.

    ``day`` is an offset from the month's anchor, reduced modulo 7, and
    is not checked against the month length: 0 is the last day of the
    previous month, 35 of February wraps into March.
    """
    offset = day - anchor_day(year, month)
    return Weekday.from_residue(doomsday(year).to_residue() + offset)


def days_in_month(year: int, month: Month) -> int:
    """Return the number of days in ``month`` of ``year``"""
    require_supported_year(year)
    length = DAYS_IN_MONTH[month.to_ordinal() - 1]
    if month.to_ordinal() == LEAP_DAY_MONTH and is_leap(year):
        length += 1
    return length


@dataclass(frozen=True)
class Doomsday:
    """Behold the doomsday of a year"""

    year: int

    def __post_init__(self):
        require_supported_year(self.year)

    def day(self) -> Weekday:
        return doomsday(self.year)

    def anchor(self, month: Month) -> int:
        return anchor_day(self.year, month)

    def anchors(self) -> dict[Month, int]:
        return anchor_dates(self.year)

    def weekday(self, month: Month, day: int) -> Weekday:
        return weekday_of(self.year, month, day)

    def __str__(self) -> str:
        return str(self.day())
