"""
Weekday lookups from loosely typed input.

Wraps the core resolver with month/date parsing and the optional strict
day check from Config.
"""

from datetime import date

from .config import Config
from .core import days_in_month, weekday_of
from .exceptions import ValidationError
from .logger import logger
from .types import Weekday
from .validation import is_valid_day, parse_date, parse_month, require_supported_year


def weekday_for(year: int, month, day: int, config: Config | None = None) -> Weekday:
    """
    Resolve the weekday of a date

    Args:
        year: Year, 1752 or later
        month: Month, ordinal or English name
        day: Day of month (only range-checked when config.strict_days)
        config: Optional configuration (defaults to Config()); when given,
            its log_level is applied to the package logger

    Returns:
        Weekday of the date
    """
    if config is not None:
        logger.set_level(config.log_level)
    cfg = config if config is not None else Config()
    require_supported_year(year)
    resolved_month = parse_month(month)

    if isinstance(day, bool) or not isinstance(day, int):
        raise ValidationError("Day must be an integer", context={"day": day})

    if cfg.strict_days and not is_valid_day(year, resolved_month, day):
        raise ValidationError(
            "Day outside month",
            context={
                "year": year,
                "month": resolved_month,
                "day": day,
                "days_in_month": days_in_month(year, resolved_month),
            },
        )

    weekday = weekday_of(year, resolved_month, day)
    logger.debug("lookup.resolved", year=year, month=resolved_month, day=day, weekday=weekday)
    return weekday


def weekday_for_text(text: str, config: Config | None = None) -> Weekday:
    """Resolve the weekday of a ``YYYY-MM-DD`` string"""
    year, month, day = parse_date(text)
    return weekday_for(year, month, day, config)


def weekday_for_date(value: date, config: Config | None = None) -> Weekday:
    """Resolve the weekday of a ``datetime.date``"""
    if not isinstance(value, date):
        raise ValidationError("Expected a date", context={"value": value})
    return weekday_for(value.year, value.month, value.day, config)
