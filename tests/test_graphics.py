import pytest

from pixeldemos.graphics import (
    BLACK,
    RED,
    WHITE,
    FrameBuffer,
    Point,
    Rectangle,
    Size,
    rgb565,
)


def painted(fb, color):
    return {p for p in fb.bounding_box().points() if fb.get_pixel(p) == color}


def test_rgb565_extremes():
    assert rgb565(31, 63, 31) == WHITE == 0xFFFF
    assert RED == 0xF800
    assert rgb565(0, 0, 0) == BLACK


@pytest.mark.parametrize("r,g,b", [(1, 2, 3), (31, 0, 17), (5, 63, 0), (0, 25, 31)])
def test_rgb565_channels_are_independent(r, g, b):
    assert rgb565(r, 0, 0) | rgb565(0, g, 0) | rgb565(0, 0, b) == rgb565(r, g, b)


def test_rgb565_masks_overflowing_channels():
    assert rgb565(32, 64, 32) == rgb565(0, 0, 0)


def test_rectangle_points_cover_area():
    rect = Rectangle(Point(3, -2), Size(4, 5))
    points = list(rect.points())
    assert len(points) == len(set(points)) == 4 * 5
    assert points[0] == rect.top_left
    assert points[-1] == rect.top_left + Size(3, 4)
    assert list(rect.rows()) == list(range(-2, 3))
    assert list(rect.columns()) == list(range(3, 7))


def test_zero_sized():
    assert Rectangle(Point(1, 1), Size(0, 4)).is_zero_sized()
    assert Rectangle(Point(1, 1), Size(4, 0)).is_zero_sized()
    assert not Rectangle(Point(1, 1), Size(1, 1)).is_zero_sized()


def test_center_of_screen():
    assert Rectangle(Point(0, 0), Size(240, 240)).center() == Point(119, 119)


def test_translate_keeps_size():
    rect = Rectangle(Point(2, 3), Size(7, 8))
    moved = rect.translate(Point(-5, 10))
    assert moved.size == rect.size
    assert moved.top_left == Point(-3, 13)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Rectangle(Point(0, 0), Size(-1, 2))


def test_frame_buffer_geometry():
    fb = FrameBuffer(12, 7)
    assert fb.size() == Size(12, 7)
    assert fb.bounding_box() == Rectangle(Point(0, 0), Size(12, 7))
    assert len(fb.data) == 12 * 7


def test_fill_rect_clips_to_bounds():
    fb = FrameBuffer(10, 10)
    rect = Rectangle(Point(-3, 6), Size(6, 8))
    fb.fill_rect(rect, RED)
    expected = {p for p in rect.points() if fb.bounding_box().contains(p)}
    assert painted(fb, RED) == expected


def test_stroke_rect_draws_only_edges():
    fb = FrameBuffer(10, 8)
    fb.stroke_rect(fb.bounding_box(), WHITE, 1)
    lit = painted(fb, WHITE)
    for p in fb.bounding_box().points():
        on_edge = p.x in (0, fb.width - 1) or p.y in (0, fb.height - 1)
        assert (p in lit) == on_edge


def test_fill_contiguous_round_trip():
    source = FrameBuffer(6, 4)
    source.fill_rect(Rectangle(Point(1, 1), Size(3, 2)), RED)
    copy = FrameBuffer(6, 4)
    copy.fill_contiguous(copy.bounding_box(), source.data)
    assert copy.data == source.data


def test_fill_contiguous_clips_outside_pixels():
    fb = FrameBuffer(4, 4)
    area = Rectangle(Point(-1, 0), Size(4, 1))
    fb.fill_contiguous(area, [RED, WHITE, WHITE, WHITE])
    assert RED not in fb.data
    assert painted(fb, WHITE) == {Point(0, 0), Point(1, 0), Point(2, 0)}


def test_get_pixel_out_of_bounds():
    fb = FrameBuffer(3, 3)
    with pytest.raises(IndexError):
        fb.get_pixel(Point(3, 0))


def test_set_pixel_out_of_bounds_ignored():
    fb = FrameBuffer(3, 3)
    fb.set_pixel(Point(-1, 1), RED)
    fb.set_pixel(Point(1, 5), RED)
    assert RED not in fb.data


def test_clear():
    fb = FrameBuffer(5, 5)
    fb.set_pixel(Point(2, 2), WHITE)
    fb.clear(RED)
    assert set(fb.data) == {RED}