"""Seven-segment digit rendering with hexagonal, pointed segments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Protocol, Iterable

from .graphics import FrameBuffer, Point, Rectangle, Size


class Segments(enum.IntFlag):
    """Lit segments of a digit.

    Layout::

         AAA
        F   B
         GGG
        E   C
         DDD
    """

    G = 0b00000001
    F = 0b00000010
    E = 0b00000100
    D = 0b00001000
    C = 0b00010000
    B = 0b00100000
    A = 0b01000000

    @classmethod
    def from_digit(cls, digit: int) -> Optional[Segments]:
        """Return the segments of a decimal digit, or None for anything else."""
        bits = _DIGIT_SEGMENTS.get(digit)
        return None if bits is None else cls(bits)

    def contains(self, segment: int) -> bool:
        return bool(self & segment)


_S = Segments
_DIGIT_SEGMENTS = {
    0: _S.A | _S.B | _S.C | _S.D | _S.E | _S.F,
    1: _S.B | _S.C,
    2: _S.A | _S.B | _S.D | _S.E | _S.G,
    3: _S.A | _S.B | _S.C | _S.D | _S.G,
    4: _S.B | _S.C | _S.F | _S.G,
    5: _S.A | _S.C | _S.D | _S.F | _S.G,
    6: _S.A | _S.C | _S.D | _S.E | _S.F | _S.G,
    7: _S.A | _S.B | _S.C,
    8: _S.A | _S.B | _S.C | _S.D | _S.E | _S.F | _S.G,
    9: _S.A | _S.B | _S.C | _S.D | _S.F | _S.G,
}


@dataclass(frozen=True)
class SevenSegmentConfig:
    """Geometry of the digits."""

    digit_size: Size = Size(24, 48)
    digit_spacing: int = 8
    segment_width: int = 4


class DrawTarget(Protocol):
    def bounding_box(self) -> Rectangle: ...

    def fill_contiguous(self, area: Rectangle, colors: Iterable[int]) -> None: ...


class SevenSegmentDisplay:
    """Draws digits, colons and HH:MM:SS times into frame buffers."""

    def __init__(self, config: Optional[SevenSegmentConfig] = None) -> None:
        self.config = config if config is not None else SevenSegmentConfig()

    @staticmethod
    def _draw_horizontal_segment(fbuf: FrameBuffer, rect: Rectangle, color: int) -> None:
        if rect.is_zero_sized():
            return
        center_2y = rect.top_left.y * 2 + rect.size.height - 1
        for y in rect.rows():
            offset = abs(y * 2 - center_2y) // 2
            width = rect.size.width - offset * 2
            if width > 0:
                fbuf.fill_rect(Rectangle(Point(rect.top_left.x + offset, y), Size(width, 1)), color)

    @staticmethod
    def _draw_vertical_segment(fbuf: FrameBuffer, rect: Rectangle, color: int) -> None:
        if rect.is_zero_sized():
            return
        center_2x = rect.top_left.x * 2 + rect.size.width - 1
        for x in rect.columns():
            offset = abs(x * 2 - center_2x) // 2
            height = rect.size.height - offset * 2
            if height > 0:
                fbuf.fill_rect(Rectangle(Point(x, rect.top_left.y + offset), Size(1, height)), color)

    def _draw_segment(self, fbuf: FrameBuffer, rect: Rectangle, color: int) -> None:
        if rect.size.width > rect.size.height:
            self._draw_horizontal_segment(fbuf, rect, color)
        else:
            self._draw_vertical_segment(fbuf, rect, color)

    @staticmethod
    def _reduced_rect(rect: Rectangle) -> Rectangle:
        """Shorten a segment so horizontal and vertical segments do not overlap."""
        if rect.is_zero_sized():
            return rect
        width, height = rect.size.width, rect.size.height
        if width > height:
            inset = height // 2 + 1
            return Rectangle(rect.top_left + Point(inset, 0), Size(max(width - 2 * inset, 0), height))
        inset = width // 2 + 1
        return Rectangle(rect.top_left + Point(0, inset), Size(width, max(height - 2 * inset, 0)))

    def draw_digit_to_fbuf(
        self,
        fbuf: FrameBuffer,
        digit: int,
        position: Point,
        color: int,
        inactive_color: Optional[int] = None,
    ) -> None:
        segments = Segments.from_digit(digit) or Segments(0)
        self.draw_segments_to_fbuf(fbuf, segments, position, color, inactive_color)

    def draw_segments_to_fbuf(
        self,
        fbuf: FrameBuffer,
        segments: Segments,
        position: Point,
        color: int,
        inactive_color: Optional[int] = None,
    ) -> None:
        """Draw the given segments; unlit ones use inactive_color, or are skipped if None."""
        sw = self.config.segment_width
        w = self.config.digit_size.width
        h = self.config.digit_size.height
        half = h // 2

        layout = (
            (Segments.A, Rectangle(position, Size(w, sw))),
            (Segments.F, Rectangle(position, Size(sw, half))),
            (Segments.B, Rectangle(position + Point(w - sw, 0), Size(sw, half))),
            (Segments.G, Rectangle(position + Point(0, half - sw // 2), Size(w, sw))),
            (Segments.E, Rectangle(position + Point(0, half), Size(sw, half))),
            (Segments.C, Rectangle(position + Point(w - sw, half), Size(sw, half))),
            (Segments.D, Rectangle(position + Point(0, h - sw), Size(w, sw))),
        )
        for segment, rect in layout:
            if segments.contains(segment):
                self._draw_segment(fbuf, self._reduced_rect(rect), color)
            elif inactive_color is not None:
                self._draw_segment(fbuf, self._reduced_rect(rect), inactive_color)

    def draw_colon_to_fbuf(self, fbuf: FrameBuffer, position: Point, color: int) -> None:
        sw = self.config.segment_width
        dy = self.config.digit_size.height // 3
        for y in (dy - sw // 2, dy * 2 - sw // 2):
            fbuf.fill_rect(Rectangle(position + Point(0, y), Size(sw, sw)), color)

    def draw_time(
        self,
        display: DrawTarget,
        fbuf: FrameBuffer,
        hours: int,
        minutes: int,
        seconds: int,
        color: int,
        inactive_color: Optional[int] = None,
    ) -> None:
        """Render HH:MM:SS centred in fbuf, then copy fbuf to the centre of display."""
        cfg = self.config
        digit_step = cfg.digit_size.width + cfg.digit_spacing
        colon_step = cfg.segment_width + cfg.digit_spacing

        fbuf.clear(fbuf.default_color)

        fbuf_size = fbuf.size()
        total_width = self.time_display_width(cfg)
        x = max(fbuf_size.width - total_width, 0) // 2
        y = max(fbuf_size.height - cfg.digit_size.height, 0) // 2

        for index, value in enumerate((hours, minutes, seconds)):
            if index:
                self.draw_colon_to_fbuf(fbuf, Point(x, y), color)
                x += colon_step
            self.draw_digit_to_fbuf(fbuf, value // 10, Point(x, y), color, inactive_color)
            x += digit_step
            self.draw_digit_to_fbuf(fbuf, value % 10, Point(x, y), color, inactive_color)
            x += digit_step

        center = display.bounding_box().center()
        target = Point(center.x - fbuf_size.width // 2, center.y - fbuf_size.height // 2)
        display.fill_contiguous(Rectangle(target, fbuf_size), list(fbuf.data))

    @staticmethod
    def time_display_width(config: SevenSegmentConfig) -> int:
        """Total width of six digits, two colons and the spacing between them."""
        return config.digit_size.width * 6 + config.segment_width * 2 + config.digit_spacing * 7