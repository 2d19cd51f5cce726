# tests/test_duration.py

import pytest

from attoscale.core.days import DayCount
from attoscale.core.digits import ABSOLUTE_MAX_DIGITS, fractional_digits
from attoscale.core.duration import I128_MAX, I128_MIN, Duration
from attoscale.core.units import DAY, MILLI, MINUTE, MONTH, SECOND, YEAR, list_units, unit_from_name


def test_unit_constructors():
    assert Duration.attoseconds(1).count == 1
    assert Duration.nanoseconds(1).count == 10**9
    assert Duration.seconds(1).count == 10**18
    assert Duration.hours(1) == Duration.minutes(60)
    assert Duration.weeks(1) == Duration.days(7)
    assert Duration.years(1) == Duration.months(12)
    assert Duration.years(1) == Duration.seconds(31_556_952)


def test_rounding_positive():
    d = Duration.milliseconds(1500)
    assert d.round(SECOND) == Duration.seconds(2)
    assert d.ceil(SECOND) == Duration.seconds(2)
    assert d.floor(SECOND) == Duration.seconds(1)
    assert d.truncate(SECOND) == Duration.seconds(1)


def test_rounding_negative():
    """Half a unit is added before truncating toward zero."""
    d = Duration.milliseconds(-1500)
    assert d.round(SECOND) == Duration.seconds(-1)
    assert d.ceil(SECOND) == Duration.seconds(-1)
    assert d.floor(SECOND) == Duration.seconds(-2)
    assert d.truncate(SECOND) == Duration.seconds(-1)
    assert Duration.milliseconds(-1600).round(SECOND) == Duration.seconds(-1)
    assert Duration.milliseconds(-2600).round(SECOND) == Duration.seconds(-2)


def test_rounding_results_are_unit_multiples():
    d = Duration(123_456_789_012_345_678_901)
    for unit in (MILLI, SECOND, MINUTE, DAY):
        for r in (d.round(unit), d.ceil(unit), d.floor(unit), d.truncate(unit)):
            assert r.count % unit.attoseconds == 0


def test_factor_out():
    whole, rest = Duration.milliseconds(-1500).factor_out(SECOND)
    assert (whole, rest) == (-1, Duration.milliseconds(-500))
    whole, rest = Duration.milliseconds(-1500).factor_out(SECOND, floor=True)
    assert (whole, rest) == (-2, Duration.milliseconds(500))
    whole, rest = Duration.hours(25).factor_out(DAY)
    assert whole * DAY.attoseconds + rest.count == Duration.hours(25).count


def test_div_round_and_integer_division():
    assert Duration(7).div_round(2) == Duration(4)
    assert Duration(-7).div_round(2) == Duration(-3)
    assert Duration(5).div_round(3) == Duration(2)
    assert Duration(-7) // 2 == Duration(-3)
    assert Duration.seconds(-7) // Duration.seconds(2) == -3
    assert Duration.hours(1) // Duration.minutes(7) == 8
    with pytest.raises(ZeroDivisionError):
        Duration(1) // 0


def test_as_float():
    assert Duration.milliseconds(1).as_float(SECOND) == 0.001
    assert Duration.years(1).as_float(DAY) == pytest.approx(365.2425, abs=1e-12)
    assert Duration.years(1).as_float(MONTH) == 12.0
    big = Duration.years(10**6) + Duration.milliseconds(1)
    assert big.as_float(YEAR) == pytest.approx(10**6, rel=1e-15)


def test_sign_helpers():
    assert Duration(-5).signum() == -1
    assert Duration.zero().signum() == 0
    assert abs(Duration(-5)) == Duration(5)
    assert -Duration(5) == Duration(-5)
    assert Duration.zero().is_zero() and not Duration.zero()
    assert Duration(1).is_positive() and Duration(-1).is_negative()


def test_overflow_is_fatal():
    assert Duration(I128_MAX).count == I128_MAX
    with pytest.raises(OverflowError):
        Duration(I128_MAX) + Duration(1)
    with pytest.raises(OverflowError):
        Duration(I128_MIN) - Duration(1)
    with pytest.raises(OverflowError):
        Duration.years(10**13)
    with pytest.raises(OverflowError):
        DayCount(2**31)


def test_no_dimensionful_products():
    with pytest.raises(TypeError):
        Duration.seconds(1) * Duration.seconds(1)
    with pytest.raises(TypeError):
        Duration.seconds(1) * 1.5
    with pytest.raises(TypeError):
        Duration(1.0)
    assert 3 * Duration.seconds(2) == Duration.seconds(6)


def test_day_count_arithmetic():
    assert DayCount(3) + DayCount(4) == DayCount(7)
    assert DayCount(3) - DayCount(4) == DayCount(-1)
    assert DayCount.weeks(2) == DayCount(14)
    assert DayCount(-7) // 2 == DayCount(-3)
    assert DayCount(2).into_duration() == Duration.hours(48)
    assert DayCount(1) < DayCount(2)


def test_iso_display():
    assert str(Duration.zero()) == "PT"
    assert str(Duration.seconds(90061)) == "P1DT1H1M1S"
    assert str(Duration.milliseconds(-1500)) == "-PT1.5S"
    assert str(Duration.days(2)) == "P2DT"
    assert str(Duration.seconds(1) + Duration(1)) == "PT1.000000000000000001S"
    assert format(Duration.milliseconds(1500), ".3") == "PT1.500S"
    assert format(Duration.milliseconds(1999), ".1") == "PT1.9S"
    with pytest.raises(ValueError):
        format(Duration.zero(), "10")


def test_fractional_digits():
    assert list(fractional_digits(7854, 1000, 8)) == [8, 5, 4, 0, 0, 0, 0, 0]
    assert list(fractional_digits(5, 4)) == [2, 5]
    assert list(fractional_digits(1, 4, base=2)) == [0, 1]
    assert list(fractional_digits(-7854, 1000)) == [8, 5, 4]
    thirds = list(fractional_digits(1, 3))
    assert len(thirds) == ABSOLUTE_MAX_DIGITS
    assert set(thirds) == {3}
    assert len(list(fractional_digits(1, 3, precision=1000))) == ABSOLUTE_MAX_DIGITS


def test_unit_lookup():
    assert unit_from_name("ms") is MILLI
    assert unit_from_name("seconds") is SECOND
    with pytest.raises(KeyError):
        unit_from_name("fortnight")
    assert "second" in list_units()
    with pytest.raises(KeyError) as exc:
        unit_from_name("fortnight")
    assert "second" in str(exc.value)
