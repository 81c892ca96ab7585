import threading
import time

import pytest

from soloader import system
from soloader.system import AtomicInt, ClockId


def test_getpagesize():
    assert system.getpagesize() == 4096


def test_clock_getres_is_one_microsecond():
    for clock in ClockId:
        assert system.clock_getres(clock) == (0, 1000)


def test_system_property_get():
    assert system.system_property_get("ro.product.model") == "psvita"


def test_realtime_clock_tracks_wall_time():
    before = time.time()
    sec, nsec = system.clock_gettime(ClockId.REALTIME)
    after = time.time()
    value = sec + nsec / 1e9
    assert before - 0.001 <= value <= after + 0.001


@pytest.mark.parametrize("clock", list(ClockId))
def test_clock_fields_are_normalised(clock):
    sec, nsec = system.clock_gettime(clock)
    assert sec >= 0
    assert 0 <= nsec < 1_000_000_000
    assert nsec % 1000 == 0


def test_monotonic_clock_does_not_go_back():
    first = system.clock_gettime(ClockId.MONOTONIC)
    second = system.clock_gettime(ClockId.MONOTONIC)
    assert second >= first


def test_unknown_clock_raises():
    with pytest.raises(ValueError):
        system.clock_gettime(99)


def test_atomic_inc_dec_return_previous():
    value = AtomicInt(5)
    assert value.inc() == 5
    assert value.value == 6
    assert value.dec() == 6
    assert value.value == 5


def test_atomic_swap_returns_previous():
    value = AtomicInt(3)
    assert value.swap(8) == 3
    assert value.value == 8


def test_atomic_cmpxchg():
    value = AtomicInt(1)
    assert value.cmpxchg(2, 7) is False
    assert value.value == 1
    assert value.cmpxchg(1, 7) is True
    assert value.value == 7


def test_atomic_inc_from_many_threads():
    value = AtomicInt()
    per_thread = 1000
    threads = [
        threading.Thread(target=lambda: [value.inc() for _ in range(per_thread)])
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert value.value == 8 * per_thread