"""
Closed calendar enumerations.

Weekday and Month are ordered enums with validated conversions to and
from their integer forms, so raw integers never travel through the core.
"""

from enum import Enum
from functools import total_ordering

from .constants import DAYS_PER_WEEK, MONTH_NAMES, SUNDAY_RESIDUE, WEEKDAY_NAMES
from .exceptions import InvalidMonthNameError, InvalidOrdinalError


@total_ordering
class Weekday(Enum):
    """The seven days of the week, Monday first (matches ``date.weekday()``)"""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def default(cls) -> "Weekday":
        """Weekday for anchor residue 0"""
        return cls.SUNDAY

    @classmethod
    def from_residue(cls, residue: int) -> "Weekday":
        """
        Convert an anchor residue to its weekday.

        Total over all integers: the residue is reduced with a floor
        modulo, so negative offsets wrap backwards through the week.
        0 is Sunday, 1..6 are Monday..Saturday.
        """
        r = residue % DAYS_PER_WEEK
        if r == SUNDAY_RESIDUE:
            return cls.SUNDAY
        return cls(r - 1)

    def to_residue(self) -> int:
        """Anchor residue in [0, 6], inverse of ``from_residue``"""
        return (self.value + 1) % DAYS_PER_WEEK

    def __lt__(self, other):
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return WEEKDAY_NAMES[self.value]


@total_ordering
class Month(Enum):
    """The twelve months of the year, valued by 1-based ordinal"""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Month":
        """Month for ordinal 1..12, ``InvalidOrdinalError`` otherwise"""
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise InvalidOrdinalError(ordinal)
        if not 1 <= ordinal <= len(MONTH_NAMES):
            raise InvalidOrdinalError(ordinal)
        return cls(ordinal)

    @classmethod
    def from_name(cls, name: str) -> "Month":
        """
        Month for its English name.

        Accepts the full name or the three letter abbreviation, case
        insensitive, surrounding whitespace ignored.

        Examples:
            "April" -> APRIL
            "sep" -> SEPTEMBER
            " DECEMBER " -> DECEMBER
        """
        if not isinstance(name, str):
            raise InvalidMonthNameError(name)
        cleaned = name.strip().lower()
        if len(cleaned) >= 3:
            for ordinal, full in enumerate(MONTH_NAMES, start=1):
                full = full.lower()
                if cleaned == full or cleaned == full[:3]:
                    return cls(ordinal)
        raise InvalidMonthNameError(name)

    def to_ordinal(self) -> int:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return MONTH_NAMES[self.value - 1]
