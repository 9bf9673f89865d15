from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral
from typing import Optional

from .calendar import check_year_month_day, day_of_year, days_before_year, is_valid_year_month_day
from .constants import (
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_SECOND,
)
from .duration import Duration
from .errors import InvalidTimeOfDayError

logger = logging.getLogger(__name__)


def _time_of_day_error(hour: int, minute: int, second: float) -> Optional[InvalidTimeOfDayError]:
    # Ticks must stay integral; only the second may carry a fraction
    if not isinstance(hour, Integral):
        return InvalidTimeOfDayError(f"hour must be a whole number, got {hour!r}")
    if not isinstance(minute, Integral):
        return InvalidTimeOfDayError(f"minute must be a whole number, got {minute!r}")
    if not 0 <= hour <= 23:
        return InvalidTimeOfDayError(f"hour must be in 0..23, got {hour}")
    if not 0 <= minute <= 59:
        return InvalidTimeOfDayError(f"minute must be in 0..59, got {minute}")
    # Written so that NaN fails as well
    if not 0.0 <= second < 60.0:
        return InvalidTimeOfDayError(f"second must be in [0, 60), got {second!r}")
    return None


@dataclass(frozen=True, order=True)
class Instant:
    """
    A point on a continuous (leap-second-free) timescale.

    Stored as the Duration elapsed since the epoch 0001-01-01T00:00:00 of the
    proleptic Gregorian calendar. Civil fields are only used while
    constructing and are not retained.
    """
    since_epoch: Duration

    @classmethod
    def epoch(cls) -> Instant:
        return cls(Duration.zero())

    @classmethod
    def from_gregorian(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: float,
    ) -> Optional[Instant]:
        """
        Civil date and time of day -> Instant, or None if any field is invalid.

        The time of day is hour in 0..23, minute in 0..59 and second in [0, 60).
        Fractional seconds are truncated to whole nanoseconds.
        """
        if not is_valid_year_month_day(year, month, day):
            logger.debug("rejected date %r-%r-%r", year, month, day)
            return None
        tod_error = _time_of_day_error(hour, minute, second)
        if tod_error is not None:
            logger.debug("rejected time of day: %s", tod_error)
            return None

        doy = day_of_year(year, month, day)
        if doy is None:
            return None
        abs_days = doy - 1 + days_before_year(year)

        ticks = (
            abs_days * NANOSECONDS_PER_DAY
            + hour * NANOSECONDS_PER_HOUR
            + minute * NANOSECONDS_PER_MINUTE
            + int(second * NANOSECONDS_PER_SECOND)
        )
        return cls(Duration(ticks))

    @classmethod
    def from_gregorian_or_raise(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
    ) -> Instant:
        """
        Like `from_gregorian`, but raises the ValidationError subclass naming
        the first invalid field instead of returning None.
        """
        check_year_month_day(year, month, day)
        tod_error = _time_of_day_error(hour, minute, second)
        if tod_error is not None:
            raise tod_error
        inst = cls.from_gregorian(year, month, day, hour, minute, second)
        assert inst is not None, "fields passed validation"
        return inst
