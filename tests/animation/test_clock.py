from __future__ import annotations

import math

import pytest

from engine.animation.clock import AnimationClock, ease_in_out_quad, state_at


@pytest.mark.smoke
def test_raw_progress_half_loop_and_closure() -> None:
    clock = AnimationClock(4000.0)
    assert clock.raw_progress(2000.0) == pytest.approx(0.5)
    assert clock.raw_progress(0.0) == clock.raw_progress(4000.0) == 0.0
    assert clock.state(0.0) == clock.state(4000.0)


def test_raw_progress_range_including_negative_time() -> None:
    clock = AnimationClock(4000.0)
    for t in (-12345.0, -1.0, -1e-12, 0.0, 1.0, 3999.999, 8000.0, 1e9):
        r = clock.raw_progress(t)
        assert 0.0 <= r < 1.0
    assert clock.raw_progress(-1000.0) == pytest.approx(0.75)


def test_eased_key_points() -> None:
    clock = AnimationClock(4000.0)
    assert clock.eased_progress(0.0) == pytest.approx(0.0)
    assert clock.eased_progress(1000.0) == pytest.approx(0.5)
    assert clock.eased_progress(2000.0) == pytest.approx(1.0)
    assert clock.eased_progress(3000.0) == pytest.approx(0.5)


def test_eased_is_continuous_across_loop_boundary() -> None:
    clock = AnimationClock(4000.0)
    assert abs(clock.eased_progress(3999.9) - clock.eased_progress(0.0)) < 1e-6
    assert abs(clock.eased_progress(4000.1) - clock.eased_progress(3999.9)) < 1e-6


def test_eased_rises_then_falls() -> None:
    clock = AnimationClock(4000.0)
    rising = [clock.eased_progress(t) for t in range(0, 2001, 50)]
    falling = [clock.eased_progress(t) for t in range(2000, 4001, 50)]
    assert all(a <= b for a, b in zip(rising, rising[1:]))
    assert all(a >= b for a, b in zip(falling, falling[1:]))


def test_state_fields_are_consistent() -> None:
    clock = AnimationClock(1000.0)
    s = clock.state(250.0)
    assert s.progress == pytest.approx(0.25)
    assert s.smooth_progress == pytest.approx(0.5)
    assert s.eased_progress == pytest.approx(ease_in_out_quad(s.smooth_progress))
    for t in (0.0, 130.0, 499.0, 777.0, 1000.0, -340.0):
        s = clock.state(t)
        assert s.smooth_progress == clock.smooth_progress(t)
        assert s.eased_progress == clock.eased_progress(t)


@pytest.mark.parametrize("duration", [0.0, -10.0, math.inf, math.nan])
def test_invalid_duration_rejected(duration: float) -> None:
    with pytest.raises(ValueError):
        AnimationClock(duration)


def test_ease_in_out_quad_shape() -> None:
    assert ease_in_out_quad(0.0) == 0.0
    assert ease_in_out_quad(0.25) == pytest.approx(0.125)
    assert ease_in_out_quad(0.5) == pytest.approx(0.5)
    assert ease_in_out_quad(0.75) == pytest.approx(0.875)
    assert ease_in_out_quad(1.0) == 1.0


def test_state_at_freezes_progress() -> None:
    s = state_at(0.3)
    assert s.progress == s.smooth_progress == s.eased_progress == 0.3
