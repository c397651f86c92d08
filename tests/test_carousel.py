"""End-to-end tests for the carousel frame sequence."""

import pytest
from gradient_carousel.carousel import CarouselController
from gradient_carousel.tween import InstantTween
from gradient_carousel.types import ColorPair


def make_palette(n):
    return [ColorPair((i * 20, 0, 0), (0, 0, i * 20)) for i in range(n)]


def ready(count=10, **kwargs):
    ctl = CarouselController.create(count, item_size=300, viewport_half_width=640, **kwargs)
    ctl.skip_entry()
    ctl.start()
    return ctl


def test_create_measures_track():
    ctl = CarouselController.create(10, item_size=300)
    assert ctl.layout.pitch == 328
    assert ctl.track == 3280
    assert ctl.count == 10


def test_initial_frame_centers_first_item():
    ctl = ready()
    frame = ctl.refresh(0.0)
    assert frame.nearest_index == 0
    assert len(frame.cards) == 10


def test_half_pitch_tie_keeps_lower_index():
    ctl = ready()
    ctl.offset = 164
    assert ctl.refresh(0.0).nearest_index == 0


def test_input_locked_until_entry_finishes():
    ctl = CarouselController.create(10, item_size=300, viewport_half_width=640)
    entry = ctl.begin_entry(0.0, 1280)
    assert entry.order == [8, 9, 0, 1, 2]
    assert entry.duration == pytest.approx(0.8)
    assert not ctl.on_drag_start(100, 0.1)
    assert not ctl.on_wheel(1)

    ctl.start()
    ctl.tick(0.0)
    assert ctl.entering
    ctl.tick(1.0)
    assert not ctl.entering
    assert ctl.entry is None
    assert ctl.on_wheel(1)


def test_first_tick_after_start_moves_nothing():
    ctl = ready()
    ctl.on_wheel(10)
    assert ctl.velocity == pytest.approx(120)
    ctl.tick(5.0)
    assert ctl.offset == 0
    ctl.tick(5.5)
    assert ctl.offset == pytest.approx(60)


def test_stop_then_start_does_not_jump():
    ctl = ready()
    ctl.on_wheel(10)
    ctl.tick(0.0)
    ctl.tick(0.1)
    before = ctl.offset
    ctl.stop()
    ctl.tick(50.0)
    assert ctl.offset == before
    ctl.start()
    ctl.tick(100.0)
    assert ctl.offset == before


def test_gradient_follows_centered_item():
    ctl = ready(palette=make_palette(10), tween=InstantTween())
    ctl.refresh(0.0)
    assert ctl.active_index == 0
    assert ctl.colors.primary == (0, 0, 0)
    ctl.offset = 328
    ctl.refresh(0.1)
    assert ctl.active_index == 1
    assert ctl.colors.primary == (20, 0, 0)
    assert ctl.colors.secondary == (0, 0, 20)


def test_drag_scrolls_and_coasts():
    ctl = ready()
    ctl.tick(0.0)
    assert ctl.on_drag_start(500, 0.0)
    assert ctl.on_drag_move(400, 0.1)
    assert ctl.offset == pytest.approx(100)
    assert ctl.on_drag_end()
    assert ctl.velocity == pytest.approx(1000)
    ctl.tick(0.1)
    assert ctl.offset > 100


def test_resize_keeps_scroll_fraction():
    ctl = ready()
    ctl.offset = 820
    frame = ctl.on_resize(640, 372)
    assert ctl.track == 4000
    assert ctl.offset == pytest.approx(1000)
    assert frame.nearest_index == 2


def test_empty_carousel_has_no_active_item():
    ctl = ready(count=0)
    frame = ctl.tick(0.0)
    assert frame.cards == []
    assert ctl.active_index == -1


def test_palette_swap_applies_on_next_retarget():
    ctl = ready(tween=InstantTween())
    ctl.refresh(0.0)
    assert ctl.colors.primary == (240, 240, 240)
    ctl.set_palette(make_palette(10))
    ctl.offset = 656
    ctl.refresh(0.1)
    assert ctl.colors.primary == (40, 0, 0)
