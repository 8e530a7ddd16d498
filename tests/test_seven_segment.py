from dataclasses import replace

import pytest

from pixeldemos.graphics import BLACK, GREEN, RED, WHITE, FrameBuffer, Point, Rectangle, Size
from pixeldemos.seven_segment import Segments, SevenSegmentConfig, SevenSegmentDisplay


def lit(fb, color):
    return {p for p in fb.bounding_box().points() if fb.get_pixel(p) == color}


def render_digit(digit, color=GREEN, inactive=None, config=None):
    display = SevenSegmentDisplay(config or SevenSegmentConfig())
    fb = FrameBuffer(40, 60)
    display.draw_digit_to_fbuf(fb, digit, Point(0, 0), color, inactive)
    return fb


def test_from_digit_one_and_eight():
    assert Segments.from_digit(1) == Segments.B | Segments.C
    eight = Segments.from_digit(8)
    assert all(eight.contains(s) for s in Segments)


@pytest.mark.parametrize("digit", [10, 255, -1])
def test_from_digit_rejects_non_digits(digit):
    assert Segments.from_digit(digit) is None


def test_contains():
    seven = Segments.from_digit(7)
    assert seven.contains(Segments.A)
    assert not seven.contains(Segments.G)


@pytest.mark.parametrize("digit", range(10))
def test_digit_stays_inside_its_box(digit):
    cfg = SevenSegmentConfig()
    fb = render_digit(digit, inactive=WHITE)
    box = Rectangle(Point(0, 0), cfg.digit_size)
    pixels = lit(fb, GREEN) | lit(fb, WHITE)
    assert pixels
    assert all(box.contains(p) for p in pixels)


def test_eight_is_mirror_symmetric():
    w = SevenSegmentConfig().digit_size.width
    pixels = lit(render_digit(8), GREEN)
    assert {Point(w - 1 - p.x, p.y) for p in pixels} == pixels


def test_one_only_uses_right_column():
    cfg = SevenSegmentConfig()
    pixels = lit(render_digit(1), GREEN)
    assert pixels
    assert all(p.x >= cfg.digit_size.width - cfg.segment_width for p in pixels)


def test_inactive_segments_complete_the_eight():
    fb = render_digit(1, GREEN, WHITE)
    assert lit(fb, GREEN) | lit(fb, WHITE) == lit(render_digit(8), GREEN)
    assert lit(fb, GREEN).isdisjoint(lit(fb, WHITE))


def test_non_digit_draws_all_inactive():
    assert lit(render_digit(10, GREEN, WHITE), WHITE) == lit(render_digit(8, WHITE), WHITE)
    assert lit(render_digit(10, GREEN, None), GREEN) == set()


def test_segments_match_digit_rendering():
    display = SevenSegmentDisplay(SevenSegmentConfig())
    fb = FrameBuffer(40, 60)
    display.draw_segments_to_fbuf(fb, Segments.from_digit(4), Point(0, 0), GREEN, None)
    assert fb.data == render_digit(4).data


def test_colon_draws_two_squares():
    cfg = SevenSegmentConfig()
    display = SevenSegmentDisplay(cfg)
    fb = FrameBuffer(20, 60)
    display.draw_colon_to_fbuf(fb, Point(3, 2), GREEN)
    pixels = lit(fb, GREEN)
    assert len(pixels) == 2 * cfg.segment_width ** 2
    assert {p.x for p in pixels} == set(range(3, 3 + cfg.segment_width))


def test_time_display_width_scales_with_config():
    cfg = SevenSegmentConfig()
    base = SevenSegmentDisplay.time_display_width(cfg)
    wider = replace(cfg, digit_size=Size(cfg.digit_size.width + 1, cfg.digit_size.height))
    assert SevenSegmentDisplay.time_display_width(wider) - base == 6
    spaced = replace(cfg, digit_spacing=cfg.digit_spacing + 1)
    assert SevenSegmentDisplay.time_display_width(spaced) - base == 7
    thicker = replace(cfg, segment_width=cfg.segment_width + 1)
    assert SevenSegmentDisplay.time_display_width(thicker) - base == 2


def draw(hours, minutes, seconds, fbuf=None):
    display = FrameBuffer(240, 240)
    fbuf = fbuf or FrameBuffer(240, 80)
    ss = SevenSegmentDisplay(SevenSegmentConfig(Size(25, 45), 4, 5))
    ss.draw_time(display, fbuf, hours, minutes, seconds, GREEN, WHITE)
    return display, fbuf


def test_draw_time_copies_buffer_to_display_band():
    display, fbuf = draw(12, 34, 56)
    display_lit = lit(display, GREEN)
    assert len(display_lit) == fbuf.data.count(GREEN)
    rows = {p.y for p in display_lit | lit(display, WHITE)}
    assert max(rows) - min(rows) < fbuf.height


def test_draw_time_clears_buffer_first():
    fbuf = FrameBuffer(240, 80)
    fbuf.clear(RED)
    draw(1, 2, 3, fbuf)
    assert RED not in fbuf.data
    assert BLACK in fbuf.data


def test_draw_time_depends_on_time():
    assert draw(10, 20, 30)[1].data == draw(10, 20, 30)[1].data
    assert draw(10, 20, 30)[1].data != draw(10, 20, 31)[1].data