import pytest

from hexmatch.clock import Clock


def make_counter(values):
    iterator = iter(values)
    return lambda: next(iterator)


def test_delta_starts_at_zero():
    clock = Clock(counter=make_counter([0]), frequency=1000)
    assert clock.delta_ms == 0


def test_first_update_measures_from_creation():
    clock = Clock(counter=make_counter([100, 350, 350]), frequency=1000)
    clock.update()
    assert clock.delta_ms == pytest.approx(clock.elapsed_ms())


def test_update_without_time_passing_gives_zero_delta():
    clock = Clock(counter=make_counter([0, 40, 40]), frequency=1000)
    clock.update()
    clock.update()
    assert clock.delta_ms == 0


def test_frequency_scales_to_milliseconds():
    fast = Clock(counter=make_counter([0, 2000]), frequency=2000)
    slow = Clock(counter=make_counter([0, 1000]), frequency=1000)
    assert fast.elapsed_ms() == pytest.approx(slow.elapsed_ms())


def test_real_counter_is_monotonic():
    clock = Clock()
    first = clock.elapsed_ms()
    assert clock.elapsed_ms() >= first >= 0