# tests/test_duration.py

import math

import pytest
from hypothesis import given, strategies as st

from gregtick import (
    Duration,
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_SECOND,
)
from gregtick.core.constants import I128_MAX, I128_MIN

ticks = st.integers(min_value=I128_MIN, max_value=I128_MAX)
# Kept small enough that sums and differences of three stay inside I128
half_ticks = st.integers(min_value=I128_MIN // 4, max_value=I128_MAX // 4)


def _sample(days=3, hours=6, minutes=43, seconds=13, nanos=123_456_789):
    return (
        days * NANOSECONDS_PER_DAY
        + hours * NANOSECONDS_PER_HOUR
        + minutes * NANOSECONDS_PER_MINUTE
        + seconds * NANOSECONDS_PER_SECOND
        + nanos
    )


def test_unit_constants():
    assert NANOSECONDS_PER_MICROSECOND == 1_000
    assert NANOSECONDS_PER_MILLISECOND == 1_000_000
    assert NANOSECONDS_PER_SECOND == 1_000_000_000
    assert NANOSECONDS_PER_MINUTE == 60_000_000_000
    assert NANOSECONDS_PER_HOUR == 3_600_000_000_000
    assert NANOSECONDS_PER_DAY == 86_400_000_000_000


def test_new():
    assert Duration.new(100).nanoseconds == 100
    assert Duration.new(-100).nanoseconds == -100
    assert Duration.new(0).nanoseconds == 0
    assert Duration.new(I128_MAX).nanoseconds == I128_MAX
    assert Duration.zero() == Duration.new(0)


def test_unit_constructors():
    assert Duration.days(3.5) == Duration.new(3 * NANOSECONDS_PER_DAY + 12 * NANOSECONDS_PER_HOUR)
    assert Duration.hours(8.5) == Duration.new(8 * NANOSECONDS_PER_HOUR + 30 * NANOSECONDS_PER_MINUTE)
    assert Duration.minutes(8.5) == Duration.new(8 * NANOSECONDS_PER_MINUTE + 30 * NANOSECONDS_PER_SECOND)
    assert Duration.seconds(8.5) == Duration.new(8 * NANOSECONDS_PER_SECOND + 500 * NANOSECONDS_PER_MILLISECOND)
    assert Duration.milliseconds(8.5) == Duration.new(8 * NANOSECONDS_PER_MILLISECOND + 500 * NANOSECONDS_PER_MICROSECOND)
    assert Duration.microseconds(8.5) == Duration.new(8 * NANOSECONDS_PER_MICROSECOND + 500)
    assert Duration.seconds(-1.5) == Duration.new(-1_500_000_000)


def test_unit_constructors_truncate_toward_zero():
    # 1.5 ns is truncated to 1, not rounded to 2
    assert Duration.microseconds(0.0015).nanoseconds == 1
    assert Duration.microseconds(-0.0015).nanoseconds == -1
    assert Duration.microseconds(0.0009).nanoseconds == 0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 10 ** 400, -(10 ** 400)])
def test_unit_constructors_reject_non_finite(value):
    with pytest.raises(ValueError):
        Duration.seconds(value)


def test_components():
    td = Duration.new(_sample())
    assert td.days_component == 3
    assert td.hours_component == 6
    assert td.minutes_component == 43
    assert td.seconds_component == 13
    assert td.nanoseconds_component == 123_456_789


def test_components_ignore_sign():
    td = Duration.new(-_sample())
    assert td.days_component == 3
    assert td.hours_component == 6
    assert td.minutes_component == 43
    assert td.seconds_component == 13
    assert td.nanoseconds_component == 123_456_789


@given(ticks)
def test_components_reconstruct_magnitude(n):
    td = Duration.new(n)
    assert 0 <= td.hours_component < 24
    assert 0 <= td.minutes_component < 60
    assert 0 <= td.seconds_component < 60
    assert 0 <= td.nanoseconds_component < NANOSECONDS_PER_SECOND
    rebuilt = (
        td.days_component * NANOSECONDS_PER_DAY
        + td.hours_component * NANOSECONDS_PER_HOUR
        + td.minutes_component * NANOSECONDS_PER_MINUTE
        + td.seconds_component * NANOSECONDS_PER_SECOND
        + td.nanoseconds_component
    )
    assert rebuilt == abs(n)


def test_add_and_sub():
    assert Duration.new(100) + Duration.new(200) == Duration.new(300)
    assert Duration.new(300) - Duration.new(100) == Duration.new(200)
    assert Duration.new(100) - Duration.new(300) == Duration.new(-200)
    assert -Duration.new(5) == Duration.new(-5)
    assert abs(Duration.new(-5)) == Duration.new(5)


def test_operands_are_not_mutated():
    a = Duration.new(1)
    b = Duration.new(2)
    _ = a + b
    assert a.nanoseconds == 1
    assert b.nanoseconds == 2


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Duration.new(1) + 1
    with pytest.raises(TypeError):
        Duration.new(1) < 2


@given(half_ticks, half_ticks, half_ticks)
def test_addition_is_associative_and_commutative(a, b, c):
    da, db, dc = Duration.new(a), Duration.new(b), Duration.new(c)
    assert da + db == db + da
    assert (da + db) + dc == da + (db + dc)


@given(half_ticks, half_ticks)
def test_subtraction_is_addition_of_negation(a, b):
    da, db = Duration.new(a), Duration.new(b)
    assert da - db == da + Duration.new(-db.nanoseconds)


def test_equality():
    td1 = Duration.new(100)
    td2 = Duration.new(100)
    td3 = Duration.new(200)
    assert td1 == td1
    assert td1 == td2
    assert td1 != td3
    assert hash(td1) == hash(td2)


def test_ordering():
    td1 = Duration.new(100)
    td2 = Duration.new(200)
    td3 = Duration.new(300)

    assert td1 < td2
    assert td2 > td1
    assert td2 < td3
    assert td1 <= td2
    assert td2 >= td1
    assert td2 <= td3
    assert td1 <= td1
    assert td1 >= td1
    assert Duration.new(-1) < Duration.zero()


@given(ticks, ticks)
def test_ordering_is_trichotomous(a, b):
    da, db = Duration.new(a), Duration.new(b)
    outcomes = [da < db, da == db, da > db]
    assert outcomes.count(True) == 1
    assert (da < db) == (a < b)
    assert (da == db) == (a == b)


def test_bool_and_total_seconds():
    assert not Duration.zero()
    assert Duration.new(-1)
    assert Duration.seconds(8.5).total_seconds() == pytest.approx(8.5)
    assert Duration.hours(-1.0).total_seconds() == pytest.approx(-3600.0)


def test_string_with_days():
    assert str(Duration.new(_sample())) == "3 days 06:43:13.123456789"
    assert str(Duration.new(-_sample())) == "-3 days 06:43:13.123456789"


def test_string_without_days():
    assert str(Duration.new(_sample(days=0))) == "06:43:13.123456789"
    assert str(Duration.new(-_sample(days=0))) == "-06:43:13.123456789"


def test_string_day_label():
    assert str(Duration.days(1.0)) == "1 day 00:00:00.000000000"
    assert str(-Duration.days(1.0)) == "-1 day 00:00:00.000000000"
    assert str(Duration.days(2.0)) == "2 days 00:00:00.000000000"
    assert str(Duration.new(NANOSECONDS_PER_DAY - 1)) == "23:59:59.999999999"


def test_string_small_values():
    assert str(Duration.zero()) == "00:00:00.000000000"
    assert str(Duration.new(1)) == "00:00:00.000000001"
    assert str(Duration.new(-1)) == "-00:00:00.000000001"


def test_repr():
    assert repr(Duration.new(-42)) == "Duration(nanoseconds=-42)"
