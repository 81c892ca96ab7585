"""Clocks, atomics and other small system calls in the bionic flavour."""

from __future__ import annotations

import threading
import time
from enum import IntEnum

from soloader.logger import LogType, log_print

PAGE_SIZE = 4096

_CLOCK_RESOLUTION_US = 1


class ClockId(IntEnum):
    """Clock identifiers as bionic numbers them."""

    REALTIME = 0
    MONOTONIC = 1
    PROCESS_CPUTIME_ID = 2
    THREAD_CPUTIME_ID = 3
    MONOTONIC_RAW = 4
    REALTIME_COARSE = 5
    MONOTONIC_COARSE = 6
    BOOTTIME = 7
    REALTIME_ALARM = 8
    BOOTTIME_ALARM = 9
    SGI_CYCLE = 10
    TAI = 11


_PROCESS_CLOCKS = frozenset({
    ClockId.MONOTONIC,
    ClockId.MONOTONIC_RAW,
    ClockId.MONOTONIC_COARSE,
    ClockId.BOOTTIME,
    ClockId.BOOTTIME_ALARM,
    ClockId.SGI_CYCLE,
    ClockId.PROCESS_CPUTIME_ID,
    ClockId.THREAD_CPUTIME_ID,
})

_REAL_CLOCKS = frozenset({
    ClockId.REALTIME,
    ClockId.REALTIME_COARSE,
    ClockId.REALTIME_ALARM,
    ClockId.TAI,
})

_process_start_ns = time.monotonic_ns()


def _split_microseconds(micros):
    seconds = micros // 1_000_000
    return seconds, (micros - seconds * 1_000_000) * 1000


def clock_gettime(clock_id):
    """Return ``(tv_sec, tv_nsec)`` for the clock, at microsecond resolution.

    Monotonic-like clocks count from process start; real-time clocks from
    the Unix epoch. Raises ValueError for an unknown clock id.
    """
    if clock_id in _PROCESS_CLOCKS:
        micros = (time.monotonic_ns() - _process_start_ns) // 1000
    elif clock_id in _REAL_CLOCKS:
        micros = time.time_ns() // 1000
    else:
        log_print(LogType.ERROR, "clock_gettime / unexpected clock id %i", clock_id)
        raise ValueError(f"unexpected clock id {clock_id}")
    return _split_microseconds(micros)


def clock_getres(clock_id):
    """Return ``(tv_sec, tv_nsec)`` resolution of any clock: one microsecond."""
    return _split_microseconds(_CLOCK_RESOLUTION_US)


def system_property_get(name):
    """Return the value of a system property; every property reads 'psvita'."""
    log_print(LogType.WARN, "__system_property_get(%s): not implemented", name)
    return "psvita"


def getpagesize():
    """Return the memory page size in bytes."""
    return PAGE_SIZE


class AtomicInt:
    """An integer whose updates are atomic across threads."""

    def __init__(self, value=0):
        self.value = value
        self._lock = threading.Lock()

    def __repr__(self):
        return f"AtomicInt({self.value})"

    def inc(self):
        """Add one and return the previous value."""
        with self._lock:
            old = self.value
            self.value = old + 1
            return old

    def dec(self):
        """Subtract one and return the previous value."""
        with self._lock:
            old = self.value
            self.value = old - 1
            return old

    def swap(self, new_value):
        """Store ``new_value`` and return the previous value."""
        with self._lock:
            old = self.value
            self.value = new_value
            return old

    def cmpxchg(self, old_value, new_value):
        """Store ``new_value`` if the value equals ``old_value``.

        Returns True if the exchange took place.
        """
        with self._lock:
            if self.value != old_value:
                return False
            self.value = new_value
            return True