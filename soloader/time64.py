"""Calendar arithmetic on 64-bit times, valid far beyond the 32-bit range."""

from __future__ import annotations

from dataclasses import dataclass

DAYS_IN_MONTH = (
    (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

JULIAN_DAYS_BY_MONTH = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335),
)

LENGTH_OF_YEAR = (365, 366)

YEARS_IN_GREGORIAN_CYCLE = 400
DAYS_IN_GREGORIAN_CYCLE = (365 * 400) + 100 - 4 + 1
SECONDS_IN_GREGORIAN_CYCLE = DAYS_IN_GREGORIAN_CYCLE * 60 * 60 * 24

# Years the host time functions can be trusted with.
MAX_SAFE_YEAR = 2037
MIN_SAFE_YEAR = 1971

SOLAR_CYCLE_LENGTH = 28

SAFE_YEARS_HIGH = (
    2016, 2017, 2018, 2019,
    2020, 2021, 2022, 2023,
    2024, 2025, 2026, 2027,
    2028, 2029, 2030, 2031,
    2032, 2033, 2034, 2035,
    2036, 2037, 2010, 2011,
    2012, 2013, 2014, 2015,
)

SAFE_YEARS_LOW = (
    1996, 1997, 1998, 1971,
    1972, 1973, 1974, 1975,
    1976, 1977, 1978, 1979,
    1980, 1981, 1982, 1983,
    1984, 1985, 1986, 1987,
    1988, 1989, 1990, 1991,
    1992, 1993, 1994, 1995,
)

# Days since the epoch on 1 January 2008, used to skip ahead quickly.
CHEAT_DAYS = 1199145600 // 24 // 60 // 60
CHEAT_YEARS = 108

# Range of the ``int`` that holds tm_year.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class Tm:
    """Broken-down time; ``tm_year`` counts from 1900, ``tm_mon`` from 0."""

    tm_sec: int = 0
    tm_min: int = 0
    tm_hour: int = 0
    tm_mday: int = 0
    tm_mon: int = 0
    tm_year: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0


def _cdiv(a, b):
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a, b):
    """Remainder matching truncating division."""
    return a - _cdiv(a, b) * b


def is_leap(tm_year):
    """Return True if the year ``tm_year + 1900`` is a leap year."""
    year = tm_year + 1900
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def _is_exception_century(year):
    return year % 100 == 0 and year % 400 != 0


def _cycle_offset(year):
    start_year = 2000
    year_diff = year - start_year
    if year > start_year:
        year_diff -= 1
    exceptions = _cdiv(year_diff, 100) - _cdiv(year_diff, 400)
    return exceptions * 16


def safe_year(year):
    """Map a calendar year onto an equivalent year within 1971..2037.

    The chosen year starts on the same weekday and has the same leap status.
    Years already inside the safe range are returned unchanged.
    """
    if MIN_SAFE_YEAR <= year <= MAX_SAFE_YEAR:
        return year

    year_cycle = year + _cycle_offset(year)
    if year < MIN_SAFE_YEAR:
        year_cycle -= 8
    if _is_exception_century(year):
        year_cycle += 11
    if _is_exception_century(year - 1):
        year_cycle += 17
    year_cycle %= SOLAR_CYCLE_LENGTH

    if year < MIN_SAFE_YEAR:
        return SAFE_YEARS_LOW[year_cycle]
    return SAFE_YEARS_HIGH[year_cycle]


def timegm64(date):
    """Convert a broken-down UTC time into seconds since the epoch.

    Seconds, minutes, hours and days outside their usual ranges are added as
    they stand. Raises ValueError if ``tm_mon`` is not within 0..11.
    """
    if not 0 <= date.tm_mon <= 11:
        raise ValueError(f"tm_mon out of range: {date.tm_mon}")

    days = 0
    orig_year = date.tm_year

    if orig_year > 100 or orig_year < -300:
        cycles = _cdiv(orig_year - 100, 400)
        orig_year -= cycles * 400
        days += cycles * DAYS_IN_GREGORIAN_CYCLE

    if orig_year > 70:
        days += sum(LENGTH_OF_YEAR[is_leap(year)] for year in range(70, orig_year))
    elif orig_year < 70:
        days -= sum(LENGTH_OF_YEAR[is_leap(year)] for year in range(69, orig_year - 1, -1))

    days += JULIAN_DAYS_BY_MONTH[is_leap(orig_year)][date.tm_mon]
    days += date.tm_mday - 1

    return days * 86400 + date.tm_hour * 3600 + date.tm_min * 60 + date.tm_sec


def gmtime64(time):
    """Convert seconds since the epoch into a broken-down UTC time.

    Raises OverflowError if the resulting tm_year does not fit a 32-bit int.
    """
    v_sec = _cmod(time, 60)
    time = _cdiv(time, 60)
    v_min = _cmod(time, 60)
    time = _cdiv(time, 60)
    v_hour = _cmod(time, 24)
    v_tday = _cdiv(time, 24)

    if v_sec < 0:
        v_min -= 1
        v_sec += 60
    if v_min < 0:
        v_hour -= 1
        v_min += 60
    if v_hour < 0:
        v_tday -= 1
        v_hour += 24

    v_wday = (v_tday + 4) % 7
    m = v_tday
    year = 70

    if m >= CHEAT_DAYS:
        year = CHEAT_YEARS
        m -= CHEAT_DAYS

    if m >= 0:
        cycles = m // DAYS_IN_GREGORIAN_CYCLE
        m -= cycles * DAYS_IN_GREGORIAN_CYCLE
        year += cycles * YEARS_IN_GREGORIAN_CYCLE

        leap = is_leap(year)
        while m >= LENGTH_OF_YEAR[leap]:
            m -= LENGTH_OF_YEAR[leap]
            year += 1
            leap = is_leap(year)

        month = 0
        while m >= DAYS_IN_MONTH[leap][month]:
            m -= DAYS_IN_MONTH[leap][month]
            month += 1
    else:
        year -= 1

        cycles = _cdiv(m, DAYS_IN_GREGORIAN_CYCLE) + 1
        m -= cycles * DAYS_IN_GREGORIAN_CYCLE
        year += cycles * YEARS_IN_GREGORIAN_CYCLE

        leap = is_leap(year)
        while m < -LENGTH_OF_YEAR[leap]:
            m += LENGTH_OF_YEAR[leap]
            year -= 1
            leap = is_leap(year)

        month = 11
        while m < -DAYS_IN_MONTH[leap][month]:
            m += DAYS_IN_MONTH[leap][month]
            month -= 1
        m += DAYS_IN_MONTH[leap][month]

    if not _INT_MIN <= year <= _INT_MAX:
        raise OverflowError(f"year {year + 1900} does not fit into tm_year")

    return Tm(
        tm_sec=v_sec,
        tm_min=v_min,
        tm_hour=v_hour,
        tm_mday=m + 1,
        tm_mon=month,
        tm_year=year,
        tm_wday=v_wday,
        tm_yday=JULIAN_DAYS_BY_MONTH[leap][month] + m,
        tm_isdst=0,
    )