"""A seven-segment clock that ticks once a second."""

from __future__ import annotations

import argparse
import itertools
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .graphics import BLACK, GREEN, FrameBuffer, Size, rgb565
from .seven_segment import SevenSegmentConfig, SevenSegmentDisplay

DISPLAY_WIDTH = 240
DISPLAY_HEIGHT = 240
BAND_WIDTH = 240
BAND_HEIGHT = 80
CLOCK_CONFIG = SevenSegmentConfig(Size(25, 45), 4, 5)
ACTIVE_COLOR = GREEN
INACTIVE_COLOR = rgb565(0, 4, 0)


@dataclass
class ClockTime:
    """Wall-clock time of day."""

    hours: int = 23
    minutes: int = 20
    seconds: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hours < 24 and 0 <= self.minutes < 60 and 0 <= self.seconds < 60):
            raise ValueError(f"invalid time {self.hours}:{self.minutes}:{self.seconds}")

    def tick(self) -> None:
        """Advance by one second, wrapping at midnight."""
        self.seconds += 1
        if self.seconds >= 60:
            self.seconds = 0
            self.minutes += 1
            if self.minutes >= 60:
                self.minutes = 0
                self.hours += 1
                if self.hours >= 24:
                    self.hours = 0

    def format(self) -> str:
        return f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}"


def _draw(display: FrameBuffer, band: FrameBuffer, clock_time: ClockTime) -> None:
    SevenSegmentDisplay(CLOCK_CONFIG).draw_time(
        display,
        band,
        clock_time.hours,
        clock_time.minutes,
        clock_time.seconds,
        ACTIVE_COLOR,
        INACTIVE_COLOR,
    )


def render_clock(
    clock_time: ClockTime, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT
) -> FrameBuffer:
    """Render the time onto a fresh black display of the given size."""
    display = FrameBuffer(width, height, BLACK)
    _draw(display, FrameBuffer(BAND_WIDTH, BAND_HEIGHT, BLACK), clock_time)
    return display


def _parse_time(text: str) -> ClockTime:
    try:
        hours, minutes, seconds = (int(part) for part in text.split(":"))
        return ClockTime(hours, minutes, seconds)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected HH:MM:SS, got {text!r}") from exc


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a seven-segment clock.")
    parser.add_argument("--start", type=_parse_time, default=ClockTime(), help="start time HH:MM:SS")
    parser.add_argument("--ticks", type=_non_negative, default=None, help="stop after this many ticks")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between ticks")
    args = parser.parse_args(argv)

    clock_time: ClockTime = args.start
    display = FrameBuffer(DISPLAY_WIDTH, DISPLAY_HEIGHT, BLACK)
    band = FrameBuffer(BAND_WIDTH, BAND_HEIGHT, BLACK)
    counter = itertools.count() if args.ticks is None else range(args.ticks)
    try:
        for _ in counter:
            time.sleep(args.interval)
            clock_time.tick()
            print(f"time: {clock_time.format()}", flush=True)
            _draw(display, band, clock_time)
    except KeyboardInterrupt:
        pass
    return 0