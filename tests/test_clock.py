from unittest.mock import patch

from cpusim.clock import Clock


def test_clock_starts_at_zero():
    assert Clock().cycle == 0


def test_clock_tick():
    clock = Clock()
    clock.tick()
    assert clock.cycle == 1
    clock.tick()
    assert clock.cycle == 2


def test_clock_reset():
    clock = Clock()
    clock.tick()
    clock.tick()
    assert clock.cycle == 2
    clock.reset()
    assert clock.cycle == 0
    clock.tick()
    assert clock.cycle == 1


@patch("cpusim.clock.time.sleep")
def test_tick_sleeps_for_delay(sleep):
    clock = Clock(delay_ms=5)
    clock.tick()
    sleep.assert_called_once_with(0.005)
    assert clock.cycle == 1


@patch("cpusim.clock.time.sleep")
def test_tick_without_delay_does_not_sleep(sleep):
    clock = Clock()
    clock.tick()
    clock.tick()
    assert clock.cycle == 2
    assert sleep.call_count == 0