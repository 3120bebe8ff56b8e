import random

import pytest

from scene_engine.errors import ConfigurationError
from scene_engine.layout.placement import (
    DockedBar, choose_window_rect, fit_linear_items, full_length_bar, reserve_docked_space, size_linear_bar,
)
from scene_engine.models.enums import Orientation
from scene_engine.models.geometry import Dimensions, Rectangle

SCREEN = Dimensions(1920, 1080)


def test_docked_bars_reserve_space():
    bars = [
        DockedBar(Orientation.LEFT, Rectangle(0, 100, 80, 500)),
        DockedBar(Orientation.TOP, Rectangle(0, 0, 1920, 24)),
    ]
    area = reserve_docked_space(SCREEN, bars)
    assert (area.x, area.y, area.width, area.height) == (80, 24, 1840, 1056)

    area = reserve_docked_space(SCREEN, [DockedBar(Orientation.BOTTOM, Rectangle(0, 1040, 1920, 40))])
    assert area.as_rectangle() == Rectangle(0, 0, 1920, 1040)


def test_unknown_orientation_is_rejected():
    with pytest.raises(ConfigurationError):
        reserve_docked_space(SCREEN, [DockedBar('diagonal', Rectangle(0, 0, 1, 1))])


def test_fullscreen_window_fills_work_area(rng):
    bars = [DockedBar(Orientation.RIGHT, Rectangle(1840, 0, 80, 1080))]
    rect, fullscreen = choose_window_rect(rng, SCREEN, bars, fullscreen_probability=1)
    assert fullscreen
    assert rect == Rectangle(0, 0, 1840, 1080)


def test_floating_window_stays_mostly_on_screen():
    rng = random.Random(7)
    for _ in range(200):
        rect, fullscreen = choose_window_rect(rng, SCREEN, fullscreen_probability=0, min_y=24)
        assert not fullscreen
        assert 100 <= rect.width <= SCREEN.width
        assert 100 <= rect.height <= SCREEN.height
        assert -0.25 * rect.width <= rect.x <= SCREEN.width - 0.25 * rect.width
        assert rect.y >= 24


def test_window_placement_is_reproducible():
    first = [choose_window_rect(random.Random(3), SCREEN) for _ in range(3)]
    second = [choose_window_rect(random.Random(3), SCREEN) for _ in range(3)]
    assert first == second


def test_fit_linear_items_shrinks_only_when_needed():
    assert fit_linear_items(5, 100, 1000) == 100
    assert fit_linear_items(20, 100, 1000) == 50
    assert fit_linear_items(0, 100, 1000) == 100


def test_linear_bar_is_capped_and_centered():
    box, size = size_linear_bar(Orientation.BOTTOM, 20, 143, SCREEN, 150)
    assert size == pytest.approx((1920 - 150) / 20)
    assert box.width == pytest.approx(1920 - 150)
    assert box.height == pytest.approx(size)
    assert box.y2 == pytest.approx(1080)
    assert box.center[0] == pytest.approx(960)

    box, size = size_linear_bar(Orientation.LEFT, 5, 50, SCREEN, 60)
    assert size == 50
    assert box == Rectangle(0, 540 - 125, 50, 250)


def test_full_length_bar():
    assert full_length_bar(Orientation.TOP, 40, SCREEN) == Rectangle(0, 0, 1920, 40)
    assert full_length_bar(Orientation.RIGHT, 80, SCREEN) == Rectangle(1840, 0, 80, 1080)
