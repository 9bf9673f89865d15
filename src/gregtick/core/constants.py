from __future__ import annotations

from typing import Tuple

# ============================================================
# Nanosecond unit constants
# ============================================================

NANOSECONDS_PER_MICROSECOND: int = 1_000
NANOSECONDS_PER_MILLISECOND: int = 1_000 * NANOSECONDS_PER_MICROSECOND
NANOSECONDS_PER_SECOND: int = 1_000 * NANOSECONDS_PER_MILLISECOND
NANOSECONDS_PER_MINUTE: int = 60 * NANOSECONDS_PER_SECOND
NANOSECONDS_PER_HOUR: int = 60 * NANOSECONDS_PER_MINUTE
NANOSECONDS_PER_DAY: int = 24 * NANOSECONDS_PER_HOUR  # 86_400_000_000_000

# Width of the tick counter the year range was sized against.
# Python ints never overflow; these are kept for callers exchanging
# values with fixed-width stores.
I128_MIN: int = -(2 ** 127)
I128_MAX: int = 2 ** 127 - 1

# ============================================================
# Calendar limits
# ============================================================

MIN_YEAR: int = 1
# Arbitrary ceiling, far in the future and still well inside I128 ticks
MAX_YEAR: int = 100_000_000_000

# Days before the first of each month (January = index 0)
CUMULATIVE_DAYS_COMMON: Tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
CUMULATIVE_DAYS_LEAP: Tuple[int, ...] = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
