"""Tests for drag, wheel impulses and friction integration."""

import pytest
from gradient_carousel.momentum import MomentumController, MomentumMode, MomentumParams

TRACK = 3280.0


def make(**kwargs):
    m = MomentumController(track=TRACK, **kwargs)
    m.finish_entry()
    return m


def test_velocity_decays_exponentially():
    """After t seconds, |v| ~ v0 * friction^(60 t)."""
    m = make()
    m.velocity = 1000.0
    for _ in range(60):
        m.integrate(1.0 / 60.0)
    assert m.velocity == pytest.approx(1000.0 * 0.9 ** 60, rel=1e-9)


def test_decay_is_frame_rate_independent():
    a = make()
    b = make()
    a.velocity = b.velocity = 500.0
    for _ in range(30):
        a.integrate(1.0 / 30.0)
    for _ in range(120):
        b.integrate(1.0 / 120.0)
    assert a.velocity == pytest.approx(b.velocity, rel=1e-9)


def test_velocity_eventually_snaps_to_zero():
    m = make()
    m.velocity = -2500.0
    for _ in range(10000):
        m.integrate(1.0 / 60.0)
        if m.velocity == 0.0:
            break
    assert m.velocity == 0.0
    assert m.scroll.at_rest


def test_integration_moves_offset_and_wraps():
    m = make()
    m.offset = TRACK - 10.0
    m.velocity = 600.0
    m.integrate(0.1)
    assert m.offset == pytest.approx(50.0)
    assert 0.0 <= m.offset < TRACK


def test_zero_dt_changes_nothing():
    m = make()
    m.offset = 42.0
    m.velocity = 300.0
    m.integrate(0.0)
    assert m.offset == 42.0
    assert m.velocity == 300.0


def test_drag_left_moves_offset_forward_immediately():
    """Dragging left by 100 px at sensitivity 1 adds 100 to the offset."""
    m = make()
    m.velocity = 0.0
    assert m.drag_start(500.0, 1.0)
    assert m.mode is MomentumMode.DRAGGING
    assert m.drag_move(400.0, 1.1)
    assert m.offset == pytest.approx(100.0)
    assert m.velocity == 0.0


def test_drag_right_wraps_below_zero():
    m = make()
    m.drag_start(100.0, 0.0)
    m.drag_move(200.0, 0.05)
    assert m.offset == pytest.approx(TRACK - 100.0)


def test_release_turns_pointer_speed_into_momentum():
    m = make()
    m.drag_start(500.0, 1.0)
    m.drag_move(400.0, 1.1)
    assert m.drag_end()
    assert m.mode is MomentumMode.IDLE
    assert m.velocity == pytest.approx(1000.0)


def test_drag_sensitivity_scales_offset_and_release():
    m = make(params=MomentumParams(drag_sensitivity=2.0))
    m.drag_start(0.0, 0.0)
    m.drag_move(-10.0, 0.01)
    assert m.offset == pytest.approx(20.0)
    m.drag_end()
    assert m.velocity == pytest.approx(2000.0)


def test_drag_move_tiny_dt_is_clamped():
    m = make()
    m.drag_start(0.0, 5.0)
    m.drag_move(-1.0, 5.0)
    assert m.drag.last_velocity == pytest.approx(-1000.0)


def test_drag_move_without_start_is_ignored():
    m = make()
    assert not m.drag_move(10.0, 1.0)
    assert not m.drag_end()
    assert m.offset == 0.0


def test_wheel_adds_scaled_impulse():
    m = make()
    assert m.wheel(10.0)
    assert m.velocity == pytest.approx(10.0 * 0.6 * 20.0)
    m.wheel(-5.0)
    assert m.velocity == pytest.approx(60.0)


def test_entering_guard_blocks_all_input():
    m = MomentumController(track=TRACK)
    assert m.entering
    assert not m.drag_start(0.0, 0.0)
    assert not m.drag_move(-50.0, 0.1)
    assert not m.drag_end()
    assert not m.wheel(100.0)
    assert m.offset == 0.0
    assert m.velocity == 0.0
    assert m.mode is MomentumMode.IDLE


def test_track_change_keeps_relative_position():
    m = make()
    m.offset = 820.0
    m.set_track(4000.0)
    assert m.offset == pytest.approx(1000.0)
    assert m.track == 4000.0


def test_unmeasured_track_pins_offset():
    m = MomentumController()
    m.finish_entry()
    m.velocity = 100.0
    m.integrate(0.5)
    assert m.offset == 0.0


def test_zero_dt_still_snaps_residual_velocity():
    m = make()
    m.offset = 42.0
    m.velocity = 0.01
    m.integrate(0.0)
    assert m.offset == 42.0
    assert m.velocity == 0.0
