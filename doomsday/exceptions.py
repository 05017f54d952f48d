"""Custom exceptions for the doomsday calculator with enhanced error context"""

from typing import Any

from .constants import EPOCH_YEAR


class DoomsdayError(Exception):
    """Base exception for calendar errors with enhanced context

    Attributes:
        message: Error message
        context: Additional context dictionary (e.g., year, ordinal)
        original_error: Original exception if wrapped
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None,
                 original_error: Exception | None = None):
        self.message = message
        self.context = context or {}
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context"""
        msg = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg = f"{msg} [{ctx_str}]"
        if self.original_error:
            msg = f"{msg} (caused by: {type(self.original_error).__name__}: {self.original_error})"
        return msg


class OutOfRangeError(DoomsdayError):
    """Year precedes the Gregorian epoch

    The algorithm is undefined before the 1752 calendar transition, so
    no weekday is ever computed for such a year.
    """

    def __init__(self, year: int):
        self.year = year
        super().__init__(
            f"Year {year} is before the supported epoch {EPOCH_YEAR}",
            context={"year": year, "epoch": EPOCH_YEAR},
        )


class InvalidOrdinalError(DoomsdayError):
    """Month ordinal outside 1..12"""

    def __init__(self, ordinal: Any):
        self.ordinal = ordinal
        super().__init__("Month ordinal must be in 1..12", context={"ordinal": ordinal})


class InvalidMonthNameError(DoomsdayError):
    """Month name not recognised

    Accepted forms are the full English name or its three letter
    abbreviation, in any case.
    """

    def __init__(self, name: Any):
        self.name = name
        super().__init__("Unknown month name", context={"name": name})


class ValidationError(DoomsdayError):
    """Input validation failed

    Common causes:
    - Malformed date text (expected YYYY-MM-DD)
    - Non-integer year or day
    - Day outside the month when strict checking is enabled
    """
    pass


class ConfigError(DoomsdayError):
    """Configuration validation failed

    Common causes:
    - Missing config file
    - Invalid YAML
    - Unknown log level
    """
    pass
