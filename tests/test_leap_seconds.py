# tests/test_leap_seconds.py

import random

import pytest

from attoscale.calendar.civil import HistoricDate
from attoscale.calendar.date import Date
from attoscale.core.days import DayCount
from attoscale.core.duration import Duration
from attoscale.core.errors import InvalidHistoricDateTime, NonLeapSecondDateTime
from attoscale.scales.leap_seconds import (
    LEAP_SECOND_DAYS,
    STATIC_LEAP_SECONDS,
    StaticLeapSecondProvider,
)
from attoscale.scales.time_point import GlonassTime, TaiTime, UtcTime


class NoLeapSeconds:
    """Provider for a UTC that never had leap seconds."""

    def leap_seconds_on_date(self, date):
        return False, 0

    def leap_seconds_at_instant(self, utc):
        return False, 0

    def info(self):
        return {"type": "none"}


def _day(y, m, d):
    return HistoricDate(y, m, d).into_date()


def test_utc_epoch_and_first_leap_second():
    assert UtcTime.from_historic_datetime(1972, 1, 1).time_since_epoch == Duration.seconds(10)
    leap = UtcTime.from_historic_datetime(1971, 12, 31, 23, 59, 60)
    assert leap.time_since_epoch == Duration.seconds(9)
    assert leap.into_historic_datetime() == (HistoricDate(1971, 12, 31), 23, 59, 60)
    assert UtcTime.from_historic_datetime(1972, 1, 1).into(TaiTime) == TaiTime.from_historic_datetime(
        1972, 1, 1, 0, 0, 10
    )


@pytest.mark.parametrize("ymd", [(2015, 6, 30), (2016, 12, 31), (1972, 6, 30), (2005, 12, 31)])
def test_leap_second_sequence(ymd):
    t58 = UtcTime.from_historic_datetime(*ymd, 23, 59, 58)
    t59 = UtcTime.from_historic_datetime(*ymd, 23, 59, 59)
    t60 = UtcTime.from_historic_datetime(*ymd, 23, 59, 60)
    next_day = HistoricDate.from_date(_day(*ymd) + DayCount(1))
    t00 = UtcTime.from_historic_datetime(next_day.year, next_day.month, next_day.day)

    assert t59 - t58 == Duration.seconds(1)
    assert t60 - t59 == Duration.seconds(1)
    assert t00 - t60 == Duration.seconds(1)

    assert t59.into_historic_datetime() == (HistoricDate(*ymd), 23, 59, 59)
    assert t60.into_historic_datetime() == (HistoricDate(*ymd), 23, 59, 60)
    assert t00.into_historic_datetime() == (next_day, 0, 0, 0)

    half = t60 + Duration.milliseconds(500)
    assert half.into_fine_historic_datetime() == (HistoricDate(*ymd), 23, 59, 60, Duration.milliseconds(500))
    assert str(half) == f"{HistoricDate(*ymd)}T23:59:60.5 UTC"


def test_second_sixty_rejected_outside_leap_minute():
    with pytest.raises(InvalidHistoricDateTime) as exc:
        UtcTime.from_historic_datetime(2016, 6, 30, 23, 59, 60)
    assert isinstance(exc.value.error, NonLeapSecondDateTime)
    with pytest.raises(NonLeapSecondDateTime):
        UtcTime.from_datetime(_day(2016, 12, 31), 12, 30, 60)
    with pytest.raises(NonLeapSecondDateTime):
        UtcTime.from_datetime(_day(2016, 12, 31), 23, 58, 60)
    with pytest.raises(InvalidHistoricDateTime):
        UtcTime.from_historic_datetime(2016, 12, 31, 23, 59, 61)


def test_static_provider_lookups():
    assert STATIC_LEAP_SECONDS.leap_seconds_on_date(_day(2016, 12, 31)) == (True, 36)
    assert STATIC_LEAP_SECONDS.leap_seconds_on_date(_day(2017, 1, 1)) == (False, 37)
    assert STATIC_LEAP_SECONDS.leap_seconds_on_date(_day(2016, 12, 30)) == (False, 36)
    assert STATIC_LEAP_SECONDS.leap_seconds_on_date(_day(1960, 1, 1)) == (False, 9)
    assert STATIC_LEAP_SECONDS.leap_seconds_on_date(_day(2030, 1, 1)) == (False, 37)
    assert STATIC_LEAP_SECONDS.info()["current"] == 37


def test_leap_second_table_is_consistent():
    for (day, before), (next_day, next_before) in zip(LEAP_SECOND_DAYS, LEAP_SECOND_DAYS[1:]):
        assert next_day > day
        assert next_before == before + 1
        assert HistoricDate.from_date(Date.from_day_count(day)).day in (30, 31)
    with pytest.raises(ValueError):
        StaticLeapSecondProvider(leap_days=((100, 9), (50, 10)))


def test_instant_lookup_truncates_to_whole_seconds():
    t60 = UtcTime.from_historic_datetime(2016, 12, 31, 23, 59, 60)
    assert STATIC_LEAP_SECONDS.leap_seconds_at_instant(t60) == (True, 36)
    assert STATIC_LEAP_SECONDS.leap_seconds_at_instant(t60 + Duration.milliseconds(999)) == (True, 36)
    assert STATIC_LEAP_SECONDS.leap_seconds_at_instant(t60 + Duration.seconds(1)) == (False, 37)
    assert STATIC_LEAP_SECONDS.leap_seconds_at_instant(t60 - Duration(1)) == (False, 36)


def test_utc_datetime_round_trip():
    random.seed(11)
    for _ in range(1000):
        date = Date.from_day_count(random.randint(-5000, 25000))
        hour, minute, second = random.randint(0, 23), random.randint(0, 59), random.randint(0, 59)
        t = UtcTime.from_datetime(date, hour, minute, second)
        assert t.into_datetime() == (date, hour, minute, second)
        g = GlonassTime.from_datetime(date, hour, minute, second)
        assert g.into_datetime() == (date, hour, minute, second)


def test_custom_provider():
    none = NoLeapSeconds()
    t = UtcTime.from_historic_datetime(1972, 1, 1, leap_seconds=none)
    assert t.time_since_epoch == Duration.zero()
    assert t.into_historic_datetime(leap_seconds=none) == (HistoricDate(1972, 1, 1), 0, 0, 0)

    # a hypothetical leap second at the end of 2019-04-14
    extended = StaticLeapSecondProvider(leap_days=LEAP_SECOND_DAYS + ((18000, 37),))
    assert HistoricDate.from_date(Date.from_day_count(18000)) == HistoricDate(2019, 4, 14)
    leap = UtcTime.from_historic_datetime(2019, 4, 14, 23, 59, 60, leap_seconds=extended)
    assert leap.into_historic_datetime(leap_seconds=extended) == (HistoricDate(2019, 4, 14), 23, 59, 60)
    with pytest.raises(InvalidHistoricDateTime):
        UtcTime.from_historic_datetime(2019, 4, 14, 23, 59, 60)


def test_parse_with_custom_provider():
    none = NoLeapSeconds()
    t = UtcTime.parse("1972-01-01T00:00:00 UTC", leap_seconds=none)
    assert t.time_since_epoch == Duration.zero()


# ============================================================
# GLONASST
# ============================================================

def test_glonass_epoch():
    assert GlonassTime.from_historic_datetime(1996, 1, 1).time_since_epoch == Duration.seconds(29)
    assert UtcTime.from_historic_datetime(1996, 1, 1).into(GlonassTime) == GlonassTime.from_historic_datetime(
        1996, 1, 1, 3
    )
    assert GlonassTime.from_historic_datetime(1996, 1, 1).into(UtcTime) == UtcTime.from_historic_datetime(
        1995, 12, 31, 21
    )


def test_glonass_leap_second_is_early_morning():
    t59 = GlonassTime.from_historic_datetime(2017, 1, 1, 2, 59, 59)
    t60 = GlonassTime.from_historic_datetime(2017, 1, 1, 2, 59, 60)
    t00 = GlonassTime.from_historic_datetime(2017, 1, 1, 3, 0, 0)
    assert t60 - t59 == Duration.seconds(1)
    assert t00 - t60 == Duration.seconds(1)
    assert t60.into_historic_datetime() == (HistoricDate(2017, 1, 1), 2, 59, 60)
    assert t00.into_historic_datetime() == (HistoricDate(2017, 1, 1), 3, 0, 0)

    utc_leap = UtcTime.from_historic_datetime(2016, 12, 31, 23, 59, 60)
    assert utc_leap.into(GlonassTime) == t60
    assert t60.into(UtcTime) == utc_leap

    with pytest.raises(InvalidHistoricDateTime):
        GlonassTime.from_historic_datetime(2016, 12, 31, 23, 59, 60)


def test_glonass_after_midnight_uses_previous_utc_day():
    t = GlonassTime.from_historic_datetime(2017, 1, 1, 0, 30)
    assert t.into_historic_datetime() == (HistoricDate(2017, 1, 1), 0, 30, 0)
    assert t.into(UtcTime) == UtcTime.from_historic_datetime(2016, 12, 31, 21, 30)


def test_leap_second_before_utc_epoch_decomposes_fractional_instants():
    # a leap day before 1972 puts the leap second at a negative instant
    table = StaticLeapSecondProvider(leap_days=((700, 8),) + LEAP_SECOND_DAYS)
    day = Date.from_day_count(700)
    t60 = UtcTime.from_datetime(day, 23, 59, 60, leap_seconds=table)
    assert t60.time_since_epoch < Duration.zero()

    half = Duration.milliseconds(500)
    assert table.leap_seconds_at_instant(t60 + half) == (True, 8)
    assert (t60 + half).into_datetime(leap_seconds=table) == (day, 23, 59, 60)
    assert (t60 - half).into_datetime(leap_seconds=table) == (day, 23, 59, 59)
    assert (t60 + Duration.seconds(1) + half).into_datetime(leap_seconds=table) == (
        day + DayCount(1), 0, 0, 0
    )
