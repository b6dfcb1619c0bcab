"""Tests for engine loading, stepping, pacing, and hooks."""

import logging
import time

import pytest

from spin_wheel import (
    EmptyOptionSetError,
    FixedStepClock,
    Option,
    OptionsLoadError,
    SpinConfig,
    SpinInProgressError,
    StaticOptionsLoader,
    WheelEngine,
)
from spin_wheel.geometry import TAU


def make_options(n):
    return [Option(label=f"L{i}", display_text=f"T{i}", color="#AA3311") for i in range(n)]


class FailingLoader:
    def load(self):
        raise OptionsLoadError("source unavailable")


# --- Initialization ---

def test_engine_init_defaults():
    engine = WheelEngine(seed=1)
    assert isinstance(engine.clock, FixedStepClock)
    assert engine.clock.tps == 60
    assert engine.seed == 1
    assert engine.model.count == 0
    assert engine.can_spin is False


def test_engine_random_seed_when_omitted():
    assert isinstance(WheelEngine().seed, int)


def test_engine_custom_clock():
    clock = FixedStepClock(tps=30)
    engine = WheelEngine(clock=clock)
    assert engine.clock is clock


# --- Loading ---

def test_load_option_sequence():
    engine = WheelEngine(seed=1)
    options = engine.load(make_options(3))
    assert len(options) == 3
    assert engine.can_spin is True


def test_load_from_loader():
    engine = WheelEngine(seed=1)
    engine.load(StaticOptionsLoader(["a", "b"]))
    assert [o.label for o in engine.model.options] == ["a", "b"]


def test_load_empty_keeps_previous_options():
    engine = WheelEngine(seed=1)
    engine.load(make_options(2))
    with pytest.raises(EmptyOptionSetError):
        engine.load([])
    with pytest.raises(EmptyOptionSetError):
        engine.load(StaticOptionsLoader([]))
    assert engine.model.count == 2


def test_failed_loader_keeps_previous_options():
    engine = WheelEngine(seed=1)
    engine.load(make_options(5))
    with pytest.raises(OptionsLoadError, match="source unavailable"):
        engine.load(FailingLoader())
    assert engine.model.count == 5


def test_load_while_spinning_is_rejected():
    engine = WheelEngine(seed=1)
    engine.load(make_options(4))
    engine.spin()
    with pytest.raises(SpinInProgressError):
        engine.load(make_options(8))
    assert engine.model.count == 4


def test_reload_uses_last_loader():
    calls = []

    class CountingLoader:
        def load(self):
            calls.append(1)
            return make_options(len(calls) + 1)

    engine = WheelEngine(seed=1)
    engine.load(CountingLoader())
    engine.reload()
    assert len(calls) == 2
    assert engine.model.count == 3


def test_reload_without_loader_raises():
    engine = WheelEngine(seed=1)
    engine.load(make_options(2))
    with pytest.raises(OptionsLoadError):
        engine.reload()


def test_load_hooks_receive_options_and_angle():
    engine = WheelEngine(seed=1)
    seen = []
    engine.on_load(lambda options, angle: seen.append((len(options), angle)))
    engine.load(make_options(6))
    assert seen == [(6, 0.0)]


def test_failing_load_hook_does_not_fail_load(caplog):
    engine = WheelEngine(seed=1)
    engine.load(make_options(1))
    seen = []

    def broken(options, angle):
        raise RuntimeError("view gone")

    engine.on_load(broken)
    engine.on_load(lambda options, angle: seen.append(len(options)))
    with caplog.at_level(logging.ERROR, logger="spin_wheel.engine"):
        loaded = engine.load(make_options(2))
    assert len(loaded) == 2
    assert engine.model.count == 2
    assert seen == [2]
    assert "Load hook" in caplog.text


# --- Spinning ---

def test_spin_on_empty_wheel_is_noop():
    engine = WheelEngine(seed=1)
    assert engine.spin() is None
    assert engine.step() is None


def test_run_until_idle_returns_winner():
    engine = WheelEngine(seed=42)
    engine.load(make_options(5))
    job = engine.spin()
    assert job is not None
    winner = engine.run_until_idle()
    assert winner in engine.model.options
    assert engine.state.is_spinning is False
    assert 0.0 <= engine.state.current_angle < TAU
    assert winner == engine.model.resolve_winner(engine.model.current_angle)


def test_spin_lasts_duration_in_frames():
    engine = WheelEngine(tps=60, seed=3)
    engine.load(make_options(4))
    job = engine.spin()
    frames = 0
    while engine.step() is None:
        frames += 1
    frames += 1
    expected = job.duration_ms / (1000 / 60)
    assert expected <= frames < expected + 2


def test_second_spin_ignored_while_spinning():
    engine = WheelEngine(seed=8)
    engine.load(make_options(4))
    job = engine.spin()
    engine.step()
    assert engine.spin() is None
    assert engine.animator.job is job


def test_state_snapshot_during_spin():
    engine = WheelEngine(seed=8)
    engine.load(make_options(4))
    engine.spin()
    engine.run(10)
    state = engine.state
    assert state.is_spinning is True
    assert state.options == engine.model.options
    assert state.current_angle == engine.model.current_angle


def test_run_stops_at_completion():
    engine = WheelEngine(seed=11)
    engine.load(make_options(3))
    engine.spin()
    assert engine.run(1) is None
    winner = engine.run(10_000)
    assert winner is not None
    assert engine.animator.is_spinning is False


def test_same_seed_same_winners():
    def winners(seed):
        engine = WheelEngine(seed=seed)
        engine.load(make_options(9))
        out = []
        for _ in range(5):
            engine.spin()
            out.append(engine.run_until_idle().label)
        return out

    assert winners(2024) == winners(2024)


def test_max_steps_bounds_run_until_idle():
    engine = WheelEngine(seed=5)
    engine.load(make_options(3))
    engine.spin()
    assert engine.run_until_idle(max_steps=3) is None
    assert engine.animator.is_spinning is True


def test_run_until_idle_when_idle():
    engine = WheelEngine(seed=5)
    engine.load(make_options(3))
    assert engine.run_until_idle() is None


def test_cancel_through_engine():
    engine = WheelEngine(seed=5)
    engine.load(make_options(3))
    engine.spin()
    engine.run(5)
    assert engine.cancel() is True
    assert engine.can_spin is True


# --- Hooks ---

def test_redraw_and_result_hooks():
    engine = WheelEngine(seed=77)
    engine.load(make_options(4))
    frames = []
    results = []
    engine.on_redraw(lambda options, angle: frames.append(angle))
    engine.on_result(results.append)
    engine.spin()
    winner = engine.run_until_idle()
    assert results == [winner]
    assert len(frames) > 100
    assert frames == sorted(frames)


# --- Pacing ---

def test_run_until_idle_pacing():
    config = SpinConfig(min_duration_ms=50.0, max_duration_ms=50.0)
    engine = WheelEngine(tps=100, seed=1, config=config)  # 10ms per frame
    engine.load(make_options(2))
    engine.spin()
    start_time = time.monotonic()
    winner = engine.run_until_idle(paced=True)
    elapsed = time.monotonic() - start_time
    assert winner is not None
    # 5 frames at 100 TPS should take roughly 0.04-0.05s minimum
    assert elapsed >= 0.03
