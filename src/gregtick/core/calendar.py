"""
gregtick.core.calendar
----------------------
Proleptic Gregorian field validation and day counting.

Every function here is pure. Invalid input is reported by returning
``False`` or ``None``; only ``check_year_month_day`` raises.
"""

from __future__ import annotations

from typing import Optional

from .constants import (
    CUMULATIVE_DAYS_COMMON,
    CUMULATIVE_DAYS_LEAP,
    MAX_YEAR,
    MIN_YEAR,
    THIRTY_DAY_MONTHS,
    THIRTY_ONE_DAY_MONTHS,
)
from .errors import InvalidDayError, InvalidMonthError, InvalidYearError


# ============================================================
# Years
# ============================================================

def is_leap_year(year: int) -> bool:
    """
    Gregorian leap rule, applied uniformly with no historical cutover:
    every 4th year, except every 100th, except every 400th.

    >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2024)
    (True, False, True)
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_before_year(year: int) -> int:
    """
    Days elapsed from 0001-01-01 to January 1 of `year`.

    Inclusion-exclusion over the leap cycle: 365 per year, plus one per
    4th year, minus one per 100th, plus one per 400th. Floor division keeps
    the identity continuous for years before 1.
    """
    y = year - 1
    return 365 * y + y // 4 - y // 100 + y // 400


# ============================================================
# Months
# ============================================================

def is_valid_year_month(year: int, month: int) -> bool:
    return is_valid_year(year) and 1 <= month <= 12


def days_in_month(month: int, is_leap: bool) -> Optional[int]:
    """Number of days in `month` (1..12), or None for any other month."""
    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month in THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap else 28
    return None


def cumulative_days_for_month(month: int, is_leap: bool) -> Optional[int]:
    """
    Days in the year strictly before the first day of `month`.

    0 for January, 31 for February, 59 (or 60 in a leap year) for March.
    None for a month outside 1..12.
    """
    if not 1 <= month <= 12:
        return None
    table = CUMULATIVE_DAYS_LEAP if is_leap else CUMULATIVE_DAYS_COMMON
    return table[month - 1]


# ============================================================
# Days
# ============================================================

def is_valid_year_month_day(year: int, month: int, day: int) -> bool:
    if not is_valid_year_month(year, month):
        return False
    if day < 1:
        return False
    dim = days_in_month(month, is_leap_year(year))
    return dim is not None and day <= dim


def day_of_year(year: int, month: int, day: int) -> Optional[int]:
    """
    1-based ordinal of the date within its year, or None if the date is invalid.

    >>> day_of_year(2024, 3, 16)
    76
    """
    if not is_valid_year_month_day(year, month, day):
        return None
    cumul = cumulative_days_for_month(month, is_leap_year(year))
    if cumul is None:
        return None
    return day + cumul


def days_since_epoch(year: int, month: int, day: int) -> Optional[int]:
    """Whole days from 0001-01-01 (day 0) to the given date, or None if invalid."""
    doy = day_of_year(year, month, day)
    if doy is None:
        return None
    return doy - 1 + days_before_year(year)


def check_year_month_day(year: int, month: int, day: int) -> None:
    """Raise the error describing the first invalid field of the date, if any."""
    if not is_valid_year(year):
        raise InvalidYearError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"month must be in 1..12, got {month}")
    dim = days_in_month(month, is_leap_year(year))
    if not 1 <= day <= dim:
        raise InvalidDayError(f"day must be in 1..{dim} for {year}-{month:02d}, got {day}")
