"""Tests for frame and wall clocks."""

import pytest

from spin_wheel.clock import Clock, FixedStepClock, MonotonicClock


def test_fixed_clock_initialization():
    """Test clock initializes with correct TPS and dt."""
    clock = FixedStepClock(tps=20)
    assert clock.tps == 20
    assert clock.frame == 0
    assert abs(clock.dt - 0.05) < 1e-9
    assert clock.now() == 0.0


def test_fixed_clock_advance_moves_one_frame():
    clock = FixedStepClock(tps=50)
    clock.advance()
    assert clock.frame == 1
    assert clock.now() == pytest.approx(20.0)
    clock.advance()
    assert clock.now() == pytest.approx(40.0)


def test_fixed_clock_strictly_increasing():
    clock = FixedStepClock(tps=60)
    times = []
    for _ in range(500):
        clock.advance()
        times.append(clock.now())
    assert all(a < b for a, b in zip(times, times[1:]))


def test_fixed_clock_reset():
    clock = FixedStepClock(tps=10)
    for _ in range(5):
        clock.advance()
    clock.reset()
    assert clock.frame == 0
    clock.reset(3)
    assert clock.now() == pytest.approx(300.0)


@pytest.mark.parametrize("tps", [0, -10])
def test_clocks_reject_non_positive_tps(tps):
    with pytest.raises(ValueError, match="tps must be positive"):
        FixedStepClock(tps=tps)
    with pytest.raises(ValueError, match="tps must be positive"):
        MonotonicClock(tps=tps)


def test_monotonic_clock_reports_milliseconds():
    clock = MonotonicClock(tps=100)
    first = clock.now()
    clock.advance()
    second = clock.now()
    assert second >= first
    assert clock.dt == pytest.approx(0.01)


def test_clocks_satisfy_protocol():
    assert isinstance(FixedStepClock(30), Clock)
    assert isinstance(MonotonicClock(), Clock)
