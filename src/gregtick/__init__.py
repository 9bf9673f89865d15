"""gregtick public API.

Exact nanosecond instants and durations on the proleptic Gregorian calendar.
Keep this surface small: users should mostly interact with names re-exported here.
"""

from .core.calendar import (
    is_leap_year,
    is_valid_year,
    is_valid_year_month,
    is_valid_year_month_day,
    days_in_month,
    days_in_year,
    cumulative_days_for_month,
    day_of_year,
    days_before_year,
    days_since_epoch,
    check_year_month_day,
)
from .core.constants import (
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_SECOND,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_DAY,
    MIN_YEAR,
    MAX_YEAR,
)
from .core.duration import Duration
from .core.instant import Instant
from .core.errors import (
    GregtickError,
    ValidationError,
    InvalidYearError,
    InvalidMonthError,
    InvalidDayError,
    InvalidTimeOfDayError,
)

__all__ = [
    "is_leap_year",
    "is_valid_year",
    "is_valid_year_month",
    "is_valid_year_month_day",
    "days_in_month",
    "days_in_year",
    "cumulative_days_for_month",
    "day_of_year",
    "days_before_year",
    "days_since_epoch",
    "check_year_month_day",
    "NANOSECONDS_PER_MICROSECOND",
    "NANOSECONDS_PER_MILLISECOND",
    "NANOSECONDS_PER_SECOND",
    "NANOSECONDS_PER_MINUTE",
    "NANOSECONDS_PER_HOUR",
    "NANOSECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "Duration",
    "Instant",
    "GregtickError",
    "ValidationError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "InvalidTimeOfDayError",
]
