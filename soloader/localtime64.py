"""Local-time conversions on 64-bit times, using the host for safe years."""

from __future__ import annotations

import time as _time

from soloader.time64 import (
    LENGTH_OF_YEAR,
    MAX_SAFE_YEAR,
    MIN_SAFE_YEAR,
    SECONDS_IN_GREGORIAN_CYCLE,
    Tm,
    gmtime64,
    is_leap,
    safe_year,
    timegm64,
)

# Times inside this range are handed to the host localtime directly.
SYSTEM_LOCALTIME_MAX = 2147483647
SYSTEM_LOCALTIME_MIN = -2147483647

_WDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MON_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Room for the text of asctime, without the terminator.
_ASCTIME_LENGTH = 25

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _cdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tm_from_struct(st):
    return Tm(
        tm_sec=st.tm_sec,
        tm_min=st.tm_min,
        tm_hour=st.tm_hour,
        tm_mday=st.tm_mday,
        tm_mon=st.tm_mon - 1,
        tm_year=st.tm_year - 1900,
        tm_wday=(st.tm_wday + 1) % 7,
        tm_yday=st.tm_yday - 1,
        tm_isdst=st.tm_isdst,
    )


def _host_mktime(date):
    fields = (
        date.tm_year + 1900,
        date.tm_mon + 1,
        date.tm_mday,
        date.tm_hour,
        date.tm_min,
        date.tm_sec,
        (date.tm_wday - 1) % 7,
        date.tm_yday + 1,
        date.tm_isdst,
    )
    return int(_time.mktime(fields))


def _seconds_between_years(left_year, right_year):
    increment = 1 if left_year > right_year else -1
    seconds = 0

    if left_year > 2400:
        cycles = _cdiv(left_year - 2400, 400)
        left_year -= cycles * 400
        seconds += cycles * SECONDS_IN_GREGORIAN_CYCLE
    elif left_year < 1600:
        cycles = _cdiv(left_year - 1600, 400)
        left_year += cycles * 400
        seconds += cycles * SECONDS_IN_GREGORIAN_CYCLE

    while left_year != right_year:
        seconds += LENGTH_OF_YEAR[is_leap(right_year - 1900)] * 86400
        right_year += increment

    return seconds * increment


def mktime64(date):
    """Convert a broken-down local time into seconds since the epoch.

    The input is left unmodified. Years outside 1971..2037 are mapped onto an
    equivalent safe year for the host conversion and shifted back.
    """
    year = date.tm_year + 1900
    if MIN_SAFE_YEAR <= year <= MAX_SAFE_YEAR:
        return _host_mktime(date)

    safe = Tm(**vars(date))
    safe.tm_year = safe_year(year) - 1900
    result = _host_mktime(safe)
    return result + _seconds_between_years(year, safe.tm_year + 1900)


def timelocal64(date):
    """Same as mktime64."""
    return mktime64(date)


def localtime64(time):
    """Convert seconds since the epoch into a broken-down local time.

    Raises OverflowError if the year does not fit into tm_year.
    """
    if SYSTEM_LOCALTIME_MIN <= time <= SYSTEM_LOCALTIME_MAX:
        return _tm_from_struct(_time.localtime(time))

    gm_tm = gmtime64(time)
    orig_year = gm_tm.tm_year

    if gm_tm.tm_year > (2037 - 1900) or gm_tm.tm_year < (1970 - 1900):
        gm_tm.tm_year = safe_year(gm_tm.tm_year + 1900) - 1900

    safe_time = timegm64(gm_tm)
    local_tm = _tm_from_struct(_time.localtime(safe_time))

    if not _INT_MIN <= orig_year <= _INT_MAX:
        raise OverflowError(f"year {orig_year + 1900} does not fit into tm_year")
    local_tm.tm_year = orig_year

    month_diff = local_tm.tm_mon - gm_tm.tm_mon
    # Local Dec 31 of the previous year while GMT is already Jan 1.
    if month_diff == 11:
        local_tm.tm_year -= 1
    # Local Jan 1 of the next year while GMT is still Dec 31.
    if month_diff == -11:
        local_tm.tm_year += 1

    # A leap safe year can yield day 366 for a non-leap xx00 year.
    if not is_leap(local_tm.tm_year) and local_tm.tm_yday == 365:
        local_tm.tm_yday -= 1

    return local_tm


def asctime64(date):
    """Format a broken-down time as ``'Thu Jan  1 00:00:00 1970\\n'``.

    Raises ValueError if the weekday or month is out of range or the year is
    beyond 9999.
    """
    if not 0 <= date.tm_wday <= 6:
        raise ValueError(f"tm_wday out of range: {date.tm_wday}")
    if not 0 <= date.tm_mon <= 11:
        raise ValueError(f"tm_mon out of range: {date.tm_mon}")
    if 1900 + date.tm_year > 9999:
        raise ValueError(f"year {1900 + date.tm_year} is beyond 9999")

    text = "%.3s %.3s%3d %.2d:%.2d:%.2d %d\n" % (
        _WDAY_NAMES[date.tm_wday],
        _MON_NAMES[date.tm_mon],
        date.tm_mday,
        date.tm_hour,
        date.tm_min,
        date.tm_sec,
        1900 + date.tm_year,
    )
    return text[:_ASCTIME_LENGTH]


def ctime64(time):
    """Format seconds since the epoch as local time, like asctime64."""
    return asctime64(localtime64(time))