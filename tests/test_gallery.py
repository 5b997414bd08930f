import pytest

from wxanim.animator import Animator
from wxanim.gallery import (
    ANIMATION_DURATION_MS,
    BitmapScaling,
    GalleryNavigator,
    dots_layout,
    scaled_image_size,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def navigator(clock):
    nav = GalleryNavigator(Animator(clock=clock))
    nav.image_count = 3
    return nav


def finish(nav, clock):
    clock.now += ANIMATION_DURATION_MS / 1000.0
    nav.animator.tick()


def test_center_keeps_size():
    assert scaled_image_size(40, 30, 200, 100, BitmapScaling.CENTER) == (40.0, 30.0)


def test_fit_fills_one_side_and_keeps_aspect():
    w, h = scaled_image_size(40, 30, 200, 100, BitmapScaling.FIT)
    assert w <= 200 + 1e-9 and h <= 100 + 1e-9
    assert w == pytest.approx(200) or h == pytest.approx(100)
    assert w / h == pytest.approx(40 / 30)


def test_fill_width():
    w, h = scaled_image_size(40, 30, 200, 100, BitmapScaling.FILL_WIDTH)
    assert w == pytest.approx(200)
    assert w / h == pytest.approx(40 / 30)


def test_fill_height():
    w, h = scaled_image_size(40, 30, 200, 100, BitmapScaling.FILL_HEIGHT)
    assert h == pytest.approx(100)
    assert w / h == pytest.approx(40 / 30)


def test_scaled_size_rejects_empty_image():
    with pytest.raises(ValueError):
        scaled_image_size(0, 30, 200, 100, BitmapScaling.FIT)


def test_dots_layout_row():
    dots = dots_layout(300, 200, 4, 4, 6)
    assert len(dots) == 4
    assert len({y for _, y in dots}) == 1
    steps = {b[0] - a[0] for a, b in zip(dots, dots[1:])}
    assert steps == {4 * 2 + 6}
    assert dots[0][1] + 4 * 2 < 200


def test_dots_layout_centred():
    dots = dots_layout(300, 200, 3, 4, 6)
    left = dots[0][0]
    right = dots[-1][0] + 4 * 2
    assert abs((300 - right) - left) <= 1


def test_dots_layout_empty():
    assert dots_layout(300, 200, 0, 4, 6) == []


def test_previous_at_start_does_nothing(navigator):
    assert navigator.animate_to_previous() is False
    assert navigator.animator.is_running() is False


def test_next_slides_to_following_image(navigator, clock):
    changes = []
    navigator.on_change = lambda: changes.append(navigator.selected_index)
    assert navigator.animate_to_next() is True
    assert navigator.animator.animated_values[0].description == "xOffset"

    clock.now += 0.1
    assert navigator.animator.tick() is True
    assert 0.0 < navigator.offset < 1.0
    assert 0.0 < navigator.scroll_position < 1.0

    finish(navigator, clock)
    assert navigator.animator.is_running() is False
    assert navigator.selected_index == 1
    assert navigator.offset == 0.0
    assert navigator.scroll_position == 1.0
    assert changes[-1] == 1


def test_no_new_slide_while_running(navigator):
    assert navigator.animate_to_next() is True
    assert navigator.animate_to_next() is False
    assert navigator.animate_to_previous() is False


def test_next_stops_at_last_image(navigator, clock):
    for _ in range(2):
        assert navigator.animate_to_next() is True
        finish(navigator, clock)
    assert navigator.selected_index == 2
    assert navigator.animate_to_next() is False


def test_previous_goes_back(navigator, clock):
    navigator.animate_to_next()
    finish(navigator, clock)
    assert navigator.animate_to_previous() is True
    clock.now += 0.1
    navigator.animator.tick()
    assert -1.0 < navigator.offset < 0.0
    finish(navigator, clock)
    assert navigator.selected_index == 0


def test_empty_gallery_does_not_slide(clock):
    nav = GalleryNavigator(Animator(clock=clock))
    assert nav.animate_to_next() is False


def test_hover_shows_and_hides_arrows(navigator):
    navigator.hover(5, 10, 300, 30)
    assert navigator.show_left_arrow is True
    navigator.hover(290, 10, 300, 30)
    assert navigator.show_right_arrow is True
    navigator.hover(150, 10, 300, 30)
    assert (navigator.show_left_arrow, navigator.show_right_arrow) == (False, False)


def test_leave_hides_arrows(navigator):
    navigator.hover(5, 10, 300, 30)
    navigator.leave()
    assert navigator.show_left_arrow is False


def test_click_needs_visible_arrow(navigator):
    assert navigator.click(290, 10, 300, 30) is False
    assert navigator.animator.is_running() is False


def test_click_right_arrow_advances(navigator, clock):
    navigator.hover(290, 10, 300, 30)
    assert navigator.click(290, 10, 300, 30) is True
    finish(navigator, clock)
    assert navigator.selected_index == 1


def test_keys(navigator, clock):
    assert navigator.key("Up") is False
    assert navigator.key("Right") is True
    finish(navigator, clock)
    assert navigator.selected_index == 1
    assert navigator.key("Left") is True
    finish(navigator, clock)
    assert navigator.selected_index == 0