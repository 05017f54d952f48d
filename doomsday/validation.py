"""Input validation utilities"""

import re

from .constants import EPOCH_YEAR
from .exceptions import InvalidMonthNameError, OutOfRangeError, ValidationError
from .logger import logger
from .types import Month

_DATE_PATTERN = re.compile(r'^(\d{4,})-(\d{1,2})-(\d{1,2})$')


def require_supported_year(year: int) -> int:
    """
    Ensure ``year`` can be handled by the doomsday algorithm

    Rules:
    - Must be an int (bool is rejected)
    - Must not precede the 1752 epoch

    Returns the year unchanged so callers can validate inline.
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError("Year must be an integer", context={"year": year})
    if year < EPOCH_YEAR:
        raise OutOfRangeError(year)
    return year


def parse_month(value) -> Month:
    """
    Normalize a month given as a Month, ordinal or name

    Examples:
        Month.MAY -> MAY
        5 -> MAY
        "05" -> MAY
        "may" -> MAY
        13 -> InvalidOrdinalError
        "Smarch" -> InvalidMonthNameError
    """
    if isinstance(value, Month):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.isdecimal():
            return Month.from_ordinal(int(cleaned))
        return Month.from_name(cleaned)
    if isinstance(value, int) and not isinstance(value, bool):
        return Month.from_ordinal(value)
    raise InvalidMonthNameError(value)


def is_valid_day(year: int, month: Month, day: int) -> bool:
    """
    Check that ``day`` is a real day of ``month`` in ``year``

    Returns False for non-integers, 0, negatives and days past the end
    of the month. Raises OutOfRangeError for pre-epoch years.
    """
    # Late import to avoid circular dependency
    from .core import days_in_month

    if isinstance(day, bool) or not isinstance(day, int):
        return False
    return 1 <= day <= days_in_month(year, month)


def parse_date(text: str) -> tuple[int, Month, int]:
    """
    Parse ``YYYY-MM-DD`` into (year, month, day)

    The day is returned as written; whether it exists in the month is
    left to the caller.
    """
    if not text or not isinstance(text, str):
        raise ValidationError(f"Invalid date: {text!r}")

    match = _DATE_PATTERN.match(text.strip())
    if not match:
        logger.debug("validation.bad_date", text=text)
        raise ValidationError("Date must be formatted as YYYY-MM-DD", context={"text": text})

    year = require_supported_year(int(match.group(1)))
    month = Month.from_ordinal(int(match.group(2)))
    return year, month, int(match.group(3))
