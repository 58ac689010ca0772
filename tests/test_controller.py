from __future__ import annotations

import pytest

from gallery.controller import LOADING, VIEW_STATE, SlideshowController


def make_controller(clock, count, interval=5):
    controller = SlideshowController(interval, clock=clock)
    controller.on_images_loaded([f"image-{i}" for i in range(count)])
    return controller


def test_new_controller_is_empty(clock):
    controller = SlideshowController(5, clock=clock)
    assert controller.state == VIEW_STATE.EMPTY
    assert controller.index is None
    assert len(controller) == 0
    assert controller.current_view() is LOADING


def test_invalid_interval_is_rejected(clock):
    with pytest.raises(ValueError):
        SlideshowController(0, clock=clock)


def test_swap_scenario_with_three_images(clock):
    controller = make_controller(clock, 3)

    controller.on_tick(clock.advance(4.9))
    assert controller.index == 0
    controller.on_tick(clock.advance(0.2))
    assert controller.index == 1
    controller.on_tick(clock.advance(5.1))
    assert controller.index == 2
    controller.on_tick(clock.advance(5.1))
    assert controller.index == 0


def test_tick_reads_clock_when_no_time_given(clock):
    controller = make_controller(clock, 2)
    clock.advance(5)
    controller.on_tick()
    assert controller.index == 1


@pytest.mark.parametrize("interval", [0.5, 1, 5, 30])
@pytest.mark.parametrize("count", [2, 3, 7])
def test_full_cycle_returns_to_start(clock, interval, count):
    controller = make_controller(clock, count, interval)
    start = controller.index
    for _ in range(count):
        controller.on_tick(clock.advance(interval))
    assert controller.index == start


@pytest.mark.parametrize("count", [0, 1])
def test_tick_never_moves_small_slideshows(clock, count):
    controller = make_controller(clock, count)
    for elapsed in (1, 5, 10, 1000):
        controller.on_tick(clock.advance(elapsed))
    assert controller.index == (0 if count else None)


def test_single_image_is_always_shown(clock):
    controller = make_controller(clock, 1)
    for _ in range(20):
        controller.on_tick(clock.advance(3))
        view = controller.current_view()
        assert view.state == VIEW_STATE.SHOWING
        assert view.image == "image-0"


def test_loading_empty_list_shows_placeholder(clock):
    controller = make_controller(clock, 0)
    assert controller.state == VIEW_STATE.EMPTY
    view = controller.current_view()
    assert view is LOADING
    assert view.image is None


def test_reload_clamps_index(clock):
    controller = make_controller(clock, 5)
    for _ in range(4):
        controller.on_tick(clock.advance(5))
    assert controller.index == 4

    controller.on_images_loaded(["a", "b"])
    assert controller.index == 0
    assert controller.current_view().image == "a"


def test_reload_keeps_valid_index(clock):
    controller = make_controller(clock, 3)
    controller.on_tick(clock.advance(5))
    controller.on_images_loaded(["a", "b", "c", "d"])
    assert controller.index == 1


@pytest.mark.parametrize("count", [1, 2, 10])
def test_index_within_bounds_after_load(clock, count):
    controller = make_controller(clock, 10)
    for _ in range(9):
        controller.on_tick(clock.advance(5))
    controller.on_images_loaded(list(range(count)))
    assert 0 <= controller.index < count


def test_reload_with_empty_list_reenters_empty(clock):
    controller = make_controller(clock, 3)
    controller.on_images_loaded([])
    assert controller.state == VIEW_STATE.EMPTY
    assert controller.current_view() is LOADING


def test_first_images_get_full_interval(clock):
    controller = SlideshowController(5, clock=clock)
    # Authorization and download may take much longer than the interval.
    clock.advance(60)
    controller.on_images_loaded(["a", "b"])
    assert controller.current_view().countdown == 5
    controller.on_tick(clock.advance(1))
    assert controller.index == 0


def test_countdown_decreases_within_interval(clock):
    controller = make_controller(clock, 2)
    values = []
    for _ in range(49):
        clock.advance(0.1)
        values.append(controller.current_view().countdown)
    assert values[0] == 5
    assert values[-1] == 1
    assert all(isinstance(v, int) and v >= 0 for v in values)
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_countdown_wraps_after_swap(clock):
    controller = make_controller(clock, 2)
    controller.on_tick(clock.advance(4.9))
    assert controller.current_view().countdown == 1
    controller.on_tick(clock.advance(0.2))
    assert controller.current_view().countdown == 5


def test_countdown_never_negative(clock):
    controller = make_controller(clock, 1)
    clock.advance(100)
    assert controller.current_view().countdown == 0


def test_current_view_has_no_side_effects(clock):
    controller = make_controller(clock, 3)
    clock.advance(50)
    controller.current_view()
    controller.current_view()
    assert controller.index == 0
