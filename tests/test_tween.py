"""Tests for eased and instant tweens."""

import pytest
from gradient_carousel.tween import EasedTween, InstantTween
from gradient_carousel.math_utils import ease_out_cubic


def test_instant_tween_jumps_to_target():
    tw = InstantTween()
    tw.start((0.0, 0.0), (10.0, 20.0), 1.0)
    assert tw.sample(1.0) == (10.0, 20.0)
    assert not tw.active


def test_eased_tween_endpoints():
    tw = EasedTween(duration=0.45)
    tw.start((0.0,), (100.0,), 2.0)
    assert tw.active
    assert tw.sample(2.0) == (0.0,)
    assert tw.sample(2.45) == (100.0,)
    assert not tw.active


def test_eased_tween_midpoint_uses_ease_out():
    tw = EasedTween(duration=1.0)
    tw.start((0.0, 50.0), (100.0, 150.0), 0.0)
    mid = tw.sample(0.5)
    assert mid[0] == pytest.approx(100.0 * ease_out_cubic(0.5))
    assert mid[1] == pytest.approx(50.0 + 100.0 * ease_out_cubic(0.5))
    assert mid[0] > 50.0


def test_progress_never_goes_backwards():
    tw = EasedTween(duration=1.0)
    tw.start((0.0,), (1.0,), 10.0)
    assert tw.progress(10.6) == pytest.approx(0.6)
    assert tw.progress(10.2) == pytest.approx(0.6)


def test_restart_overrides_in_flight_transition():
    tw = EasedTween(duration=1.0)
    tw.start((0.0,), (100.0,), 0.0)
    halfway = tw.sample(0.5)
    tw.start(halfway, (0.0,), 0.5)
    assert tw.progress(0.5) == 0.0
    assert tw.sample(0.5) == pytest.approx(halfway)
    assert tw.sample(1.5) == (0.0,)


def test_zero_duration_completes_immediately():
    tw = EasedTween(duration=0.0)
    tw.start((0.0,), (5.0,), 0.0)
    assert not tw.active
    assert tw.sample(0.0) == (5.0,)
