import pytest

from crab2d.graphics import (
    M5_SCREEN_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
    Display,
    DisplayControl,
)
from crab2d.vec2 import Vec2


def mode3():
    return Display(DisplayControl(video_mode=3, show_bg2=True))


def painted(display):
    return sum(1 for v in display.vram if v)


def test_color_channels_round_trip():
    c = Color.from_rgb(6, 6, 10)
    assert (c.red, c.green, c.blue) == (6, 6, 10)


def test_color_named_constants():
    assert Color.WHITE == Color.from_rgb(31, 31, 31)
    assert Color.BLACK.value == 0
    assert Color.YELLOW.blue == 0 and Color.YELLOW.red == 31


def test_color_channel_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgb(32, 0, 0)


def test_display_control_rejects_bad_mode():
    with pytest.raises(ValueError):
        DisplayControl(video_mode=6)


def test_set_display_mode_and_video_mode():
    d = Display()
    d.set_display_mode(DisplayControl(video_mode=5))
    assert d.video_mode() == 5


def test_point_then_pixel():
    d = mode3()
    d.point(Vec2(10, 20), Color.YELLOW)
    assert d.pixel(Vec2(10, 20)) == Color.YELLOW
    assert painted(d) == 1


def test_mode5_rows_are_narrower():
    d = Display(DisplayControl(video_mode=5))
    d.point(Vec2(0, 1), Color.RED)
    d.set_display_mode(DisplayControl(video_mode=3))
    assert d.pixel(Vec2(M5_SCREEN_WIDTH, 0)) == Color.RED


def test_flip_page_separates_pages():
    d = Display(DisplayControl(video_mode=5))
    d.point(Vec2(3, 3), Color.WHITE)
    d.flip_page()
    assert d.control.show_frame1
    assert d.pixel(Vec2(3, 3)) == Color.BLACK
    d.flip_page()
    assert not d.control.show_frame1
    assert d.pixel(Vec2(3, 3)) == Color.WHITE


def test_clear_fills_mode3_bitmap():
    d = mode3()
    d.clear(Color.BLUE)
    assert painted(d) == SCREEN_WIDTH * SCREEN_HEIGHT
    assert d.pixel(Vec2(SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1)) == Color.BLUE


def test_rect_is_inclusive():
    d = mode3()
    d.rect(Vec2(20, 20), 40, 30, Color.WHITE)
    assert painted(d) == 41 * 31
    assert d.pixel(Vec2(60, 50)) == Color.WHITE
    assert d.pixel(Vec2(61, 50)) == Color.BLACK


def test_frame_outlines_only():
    d = mode3()
    d.frame(Vec2(20, 20), 40, 40, Color.MAGENTA)
    for corner in (Vec2(20, 20), Vec2(60, 20), Vec2(20, 60), Vec2(60, 60)):
        assert d.pixel(corner) == Color.MAGENTA
    assert d.pixel(Vec2(40, 40)) == Color.BLACK
    assert painted(d) == 4 * 40


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        (Vec2(5, 7), Vec2(50, 7), 46),
        (Vec2(120, 160 - 1), Vec2(120, 0), 160),
    ],
)
def test_straight_lines(p1, p2, expected):
    d = mode3()
    d.line(p1, p2, Color.WHITE)
    assert painted(d) == expected


@pytest.mark.parametrize(
    "p1, p2",
    [(Vec2(0, 0), Vec2(30, 10)), (Vec2(30, 40), Vec2(5, 2)), (Vec2(10, 10), Vec2(20, 20))],
)
def test_diagonal_line_endpoints_and_length(p1, p2):
    d = mode3()
    d.line(p1, p2, Color.GREEN)
    assert d.pixel(p1) == Color.GREEN
    assert d.pixel(p2) == Color.GREEN
    assert painted(d) == max(abs(p2.x - p1.x), abs(p2.y - p1.y)) + 1


def test_negative_point_raises():
    with pytest.raises(ValueError):
        mode3().point(Vec2(-1, 0), Color.WHITE)


def test_point_beyond_video_memory_raises():
    d = mode3()
    d.flip_page()
    with pytest.raises(IndexError):
        d.point(Vec2(0, SCREEN_HEIGHT - 1), Color.WHITE)