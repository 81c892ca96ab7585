import calendar
import datetime

import pytest

from soloader.time64 import (
    CHEAT_DAYS,
    MAX_SAFE_YEAR,
    MIN_SAFE_YEAR,
    Tm,
    gmtime64,
    is_leap,
    safe_year,
    timegm64,
)

EPOCH = datetime.datetime(1970, 1, 1)


def _as_tuple(tm):
    return (tm.tm_year + 1900, tm.tm_mon + 1, tm.tm_mday, tm.tm_hour, tm.tm_min, tm.tm_sec)


def test_gmtime_epoch():
    tm = gmtime64(0)
    assert _as_tuple(tm) == (1970, 1, 1, 0, 0, 0)
    assert tm.tm_wday == 4
    assert tm.tm_yday == 0
    assert tm.tm_isdst == 0


def test_gmtime_cheat_point_is_2008():
    tm = gmtime64(1199145600)
    assert _as_tuple(tm) == (2008, 1, 1, 0, 0, 0)
    assert CHEAT_DAYS * 86400 == 1199145600


def test_gmtime_one_second_before_epoch():
    tm = gmtime64(-1)
    assert _as_tuple(tm) == (1969, 12, 31, 23, 59, 59)
    assert tm.tm_yday == 364


@pytest.mark.parametrize(
    "seconds",
    [0, 1, -1, 59, -60, 86399, -86401, 951782400, 2147483647, -2147483648,
     4102444800, 253402300799, -2208988800, -11644473600, 1234567890],
)
def test_gmtime_matches_datetime(seconds):
    expected = EPOCH + datetime.timedelta(seconds=seconds)
    tm = gmtime64(seconds)
    assert _as_tuple(tm) == (
        expected.year, expected.month, expected.day,
        expected.hour, expected.minute, expected.second,
    )
    assert tm.tm_wday == (expected.weekday() + 1) % 7
    assert tm.tm_yday == expected.timetuple().tm_yday - 1


@pytest.mark.parametrize(
    "seconds",
    [0, 1, -1, 1199145600, 2147483648, -2147483649, 10**12, -(10**12),
     4102444800, 32503680000, -62135596800, 123456789012, -98765432109],
)
def test_timegm_round_trip(seconds):
    assert timegm64(gmtime64(seconds)) == seconds


def test_timegm_epoch_start():
    assert timegm64(Tm(tm_year=70, tm_mon=0, tm_mday=1)) == 0


def test_timegm_matches_calendar():
    for year in (1600, 1899, 1900, 1969, 2000, 2038, 2100, 2400, 3000):
        for month in (1, 2, 3, 12):
            tm = Tm(tm_year=year - 1900, tm_mon=month - 1, tm_mday=15,
                    tm_hour=13, tm_min=7, tm_sec=42)
            assert timegm64(tm) == calendar.timegm((year, month, 15, 13, 7, 42, 0, 0, 0))


def test_timegm_adds_out_of_range_day():
    base = timegm64(Tm(tm_year=100, tm_mon=0, tm_mday=31))
    spill = timegm64(Tm(tm_year=100, tm_mon=0, tm_mday=32))
    assert spill - base == 86400


def test_timegm_rejects_bad_month():
    with pytest.raises(ValueError):
        timegm64(Tm(tm_year=70, tm_mon=12, tm_mday=1))


def test_gmtime_overflow():
    with pytest.raises(OverflowError):
        gmtime64(2**62)


def test_is_leap_matches_calendar():
    for year in range(1500, 2500):
        assert is_leap(year - 1900) == calendar.isleap(year)


def test_safe_year_inside_range_unchanged():
    for year in range(MIN_SAFE_YEAR, MAX_SAFE_YEAR + 1):
        assert safe_year(year) == year


@pytest.mark.parametrize("year", list(range(1700, 1971)) + list(range(2038, 2450)))
def test_safe_year_matches_calendar(year):
    mapped = safe_year(year)
    assert MIN_SAFE_YEAR <= mapped <= MAX_SAFE_YEAR
    assert calendar.isleap(mapped) == calendar.isleap(year)
    assert datetime.date(mapped, 1, 1).weekday() == datetime.date(year, 1, 1).weekday()