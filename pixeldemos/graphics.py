"""Minimal raster primitives: points, sizes, rectangles and an RGB565 frame buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union


def rgb565(r: int, g: int, b: int) -> int:
    """Pack 5-bit red, 6-bit green and 5-bit blue channels into a 16-bit colour."""
    return ((r & 0x1F) << 11) | ((g & 0x3F) << 5) | (b & 0x1F)


BLACK = rgb565(0, 0, 0)
WHITE = rgb565(31, 63, 31)
RED = rgb565(31, 0, 0)
GREEN = rgb565(0, 63, 0)
BLUE = rgb565(0, 0, 31)


@dataclass(frozen=True)
class Size:
    """Width and height of an area in pixels."""

    width: int
    height: int

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        return Size(self.width - other.width, self.height - other.height)


@dataclass(frozen=True)
class Point:
    """A pixel coordinate; y grows downwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Union[Point, Size]) -> Point:
        if isinstance(other, Size):
            return Point(self.x + other.width, self.y + other.height)
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Union[Point, Size]) -> Point:
        if isinstance(other, Size):
            return Point(self.x - other.width, self.y - other.height)
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        return Point(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    top_left: Point
    size: Size

    def __post_init__(self) -> None:
        if self.size.width < 0 or self.size.height < 0:
            raise ValueError(f"rectangle size must not be negative: {self.size}")

    def is_zero_sized(self) -> bool:
        return self.size.width == 0 or self.size.height == 0

    def rows(self) -> range:
        return range(self.top_left.y, self.top_left.y + self.size.height)

    def columns(self) -> range:
        return range(self.top_left.x, self.top_left.x + self.size.width)

    def points(self) -> Iterator[Point]:
        """Yield every point of the rectangle, row by row."""
        columns = self.columns()
        for y in self.rows():
            for x in columns:
                yield Point(x, y)

    def center(self) -> Point:
        return Point(
            self.top_left.x + max(self.size.width - 1, 0) // 2,
            self.top_left.y + max(self.size.height - 1, 0) // 2,
        )

    def translate(self, offset: Point) -> Rectangle:
        return Rectangle(self.top_left + offset, self.size)

    def contains(self, point: Point) -> bool:
        return point.x in self.columns() and point.y in self.rows()


class FrameBuffer:
    """A row-major in-memory pixel buffer that clips drawing to its bounds."""

    def __init__(self, width: int, height: int, fill: int = BLACK) -> None:
        if width < 0 or height < 0:
            raise ValueError("frame buffer dimensions must not be negative")
        self.width = width
        self.height = height
        self.default_color = fill
        self.data = [fill] * (width * height)

    def size(self) -> Size:
        return Size(self.width, self.height)

    def bounding_box(self) -> Rectangle:
        return Rectangle(Point(0, 0), self.size())

    def clear(self, color: int) -> None:
        self.data[:] = [color] * len(self.data)

    def _index(self, point: Point) -> int | None:
        if 0 <= point.x < self.width and 0 <= point.y < self.height:
            return point.y * self.width + point.x
        return None

    def get_pixel(self, point: Point) -> int:
        index = self._index(point)
        if index is None:
            raise IndexError(f"point {point} outside {self.width}x{self.height} buffer")
        return self.data[index]

    def set_pixel(self, point: Point, color: int) -> None:
        """Set one pixel; points outside the buffer are ignored."""
        index = self._index(point)
        if index is not None:
            self.data[index] = color

    def fill_rect(self, rect: Rectangle, color: int) -> None:
        x0 = max(rect.top_left.x, 0)
        x1 = min(rect.top_left.x + rect.size.width, self.width)
        y0 = max(rect.top_left.y, 0)
        y1 = min(rect.top_left.y + rect.size.height, self.height)
        if x1 <= x0:
            return
        span = [color] * (x1 - x0)
        for y in range(y0, y1):
            start = y * self.width
            self.data[start + x0:start + x1] = span

    def stroke_rect(self, rect: Rectangle, color: int, width: int = 1) -> None:
        """Draw a border of the given width centred on the rectangle's edge."""
        if width <= 0:
            return
        outset = width // 2
        outer = Rectangle(
            rect.top_left - Point(outset, outset),
            Size(rect.size.width + 2 * outset, rect.size.height + 2 * outset),
        )
        inner = Rectangle(
            outer.top_left + Point(width, width),
            Size(max(outer.size.width - 2 * width, 0), max(outer.size.height - 2 * width, 0)),
        )
        for point in outer.points():
            if not inner.contains(point):
                self.set_pixel(point, color)

    def fill_contiguous(self, area: Rectangle, colors: Iterable[int]) -> None:
        """Write colours row by row into the area, clipping to the buffer."""
        for point, color in zip(area.points(), colors):
            self.set_pixel(point, color)