from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import (
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_SECOND,
)


def _truncated_ticks(value: float, unit: int) -> int:
    """
    Multiply as a double and truncate toward zero.

    Sub-unit precision is lost beyond ~2**53 of the target unit; callers
    needing rounding must round `value` themselves. Values that are not
    finite as a double (including ints too large to convert) raise ValueError.
    """
    try:
        scaled = float(value) * float(unit)
    except OverflowError:
        scaled = math.inf
    if not math.isfinite(scaled):
        raise ValueError(f"duration value must be finite, got {value!r}")
    return int(scaled)


@dataclass(frozen=True, order=True)
class Duration:
    """
    A signed span of time counted in whole nanoseconds.

    The raw count is the only stored state; the day/hour/minute/second/nanosecond
    components are derived from its magnitude on demand. Ordering and equality
    compare the raw counts.

    >>> str(Duration.days(3.5))
    '3 days 12:00:00.000000000'
    """
    nanoseconds: int = 0

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def new(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds)

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @classmethod
    def days(cls, value: float) -> Duration:
        return cls(_truncated_ticks(value, NANOSECONDS_PER_DAY))

    @classmethod
    def hours(cls, value: float) -> Duration:
        return cls(_truncated_ticks(value, NANOSECONDS_PER_HOUR))

    @classmethod
    def minutes(cls, value: float) -> Duration:
        return cls(_truncated_ticks(value, NANOSECONDS_PER_MINUTE))

    @classmethod
    def seconds(cls, value: float) -> Duration:
        """`Duration.seconds(8.5)` is 8.5e9 ns; fractional nanoseconds are truncated."""
        return cls(_truncated_ticks(value, NANOSECONDS_PER_SECOND))

    @classmethod
    def milliseconds(cls, value: float) -> Duration:
        return cls(_truncated_ticks(value, NANOSECONDS_PER_MILLISECOND))

    @classmethod
    def microseconds(cls, value: float) -> Duration:
        return cls(_truncated_ticks(value, NANOSECONDS_PER_MICROSECOND))

    # ---------------------------------------------------------
    # Components (magnitudes, independent of sign)
    # ---------------------------------------------------------

    @property
    def days_component(self) -> int:
        return abs(self.nanoseconds) // NANOSECONDS_PER_DAY

    @property
    def hours_component(self) -> int:
        return (abs(self.nanoseconds) % NANOSECONDS_PER_DAY) // NANOSECONDS_PER_HOUR

    @property
    def minutes_component(self) -> int:
        return (abs(self.nanoseconds) % NANOSECONDS_PER_HOUR) // NANOSECONDS_PER_MINUTE

    @property
    def seconds_component(self) -> int:
        return (abs(self.nanoseconds) % NANOSECONDS_PER_MINUTE) // NANOSECONDS_PER_SECOND

    @property
    def nanoseconds_component(self) -> int:
        return abs(self.nanoseconds) % NANOSECONDS_PER_SECOND

    def total_seconds(self) -> float:
        return self.nanoseconds / NANOSECONDS_PER_SECOND

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds - other.nanoseconds)

    def __neg__(self) -> Duration:
        return Duration(-self.nanoseconds)

    def __abs__(self) -> Duration:
        return Duration(abs(self.nanoseconds))

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def __str__(self) -> str:
        sign = "-" if self.nanoseconds < 0 else ""
        clock = (
            f"{self.hours_component:02d}:{self.minutes_component:02d}:"
            f"{self.seconds_component:02d}.{self.nanoseconds_component:09d}"
        )
        days = self.days_component
        if days == 0:
            return f"{sign}{clock}"
        label = "days" if days > 1 else "day"
        return f"{sign}{days} {label} {clock}"
