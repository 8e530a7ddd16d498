"""BDF bitmap fonts and a text style that renders them onto draw targets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Sequence

from .graphics import Point, Rectangle, Size


class PixelTarget(Protocol):
    def set_pixel(self, point: Point, color: int) -> None: ...


class Baseline(enum.Enum):
    """Vertical anchor of the position a string is drawn at."""

    TOP = "top"
    BOTTOM = "bottom"
    MIDDLE = "middle"
    ALPHABETIC = "alphabetic"


def _bits(data: bytes, start: int) -> Iterator[bool]:
    """Yield the bits of data from bit index start on, most significant bit first."""
    for index in range(start, len(data) * 8):
        byte, bit = divmod(index, 8)
        yield bool(data[byte] & (0x80 >> bit))


@dataclass(frozen=True)
class BdfGlyph:
    """One glyph: its bounding box, advance and where its bitmap starts."""

    character: str
    bounding_box: Rectangle
    device_width: int
    start_index: int

    def draw(self, position: Point, color: int, data: bytes, target: PixelTarget) -> None:
        """Set the glyph's lit pixels on target; pixels past the end of data stay unset."""
        bits = _bits(data, self.start_index)
        for point in self.bounding_box.translate(position).points():
            lit = next(bits, None)
            if lit is None:
                return
            if lit:
                target.set_pixel(point, color)


@dataclass(frozen=True)
class BdfFont:
    """A bitmap font: glyph table plus packed one-bit-per-pixel data."""

    replacement_character: int
    ascent: int
    descent: int
    glyphs: Sequence[BdfGlyph]
    data: bytes

    def get_glyph(self, c: str) -> BdfGlyph:
        """Return the glyph for c, or the replacement glyph if the font lacks it."""
        for glyph in self.glyphs:
            if glyph.character == c:
                return glyph
        return self.glyphs[self.replacement_character]


@dataclass(frozen=True)
class TextMetrics:
    """Bounding box of measured text and where the next text would start."""

    bounding_box: Rectangle
    next_position: Point


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class BdfTextStyle:
    """Character style drawing text in one colour with a BDF font."""

    font: BdfFont
    color: int

    def baseline_offset(self, baseline: Baseline) -> int:
        if baseline is Baseline.TOP:
            return max(self.font.ascent - 1, 0)
        if baseline is Baseline.BOTTOM:
            return -self.font.descent
        if baseline is Baseline.MIDDLE:
            return _div_trunc(self.font.ascent - self.font.descent, 2)
        return 0

    def set_text_color(self, text_color: Optional[int]) -> None:
        """Change the text colour; None (transparent) leaves it unchanged."""
        if text_color is not None:
            self.color = text_color

    def draw_string(
        self, text: str, position: Point, baseline: Baseline, target: PixelTarget
    ) -> Point:
        """Draw text and return the position following it."""
        position = position + Point(0, self.baseline_offset(baseline))
        for c in text:
            glyph = self.font.get_glyph(c)
            glyph.draw(position, self.color, self.font.data, target)
            position = position + Point(glyph.device_width, 0)
        return position

    def draw_whitespace(
        self, width: int, position: Point, baseline: Baseline, target: PixelTarget
    ) -> Point:
        position = position + Point(0, self.baseline_offset(baseline))
        return position + Size(width, 0)

    def measure_string(self, text: str, position: Point, baseline: Baseline) -> TextMetrics:
        position = position + Point(0, self.baseline_offset(baseline))
        dx = sum(self.font.get_glyph(c).device_width for c in text)
        bounding_box = Rectangle(
            position - Size(0, max(self.font.ascent - 1, 0)),
            Size(dx, self.line_height()),
        )
        return TextMetrics(bounding_box, position + Size(dx, 0))

    def line_height(self) -> int:
        return self.font.ascent + self.font.descent