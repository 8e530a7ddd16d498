"""Snake game loop: joystick input, rendering and automatic restart."""

from __future__ import annotations

import argparse
import itertools
import os
import time
from typing import Iterator, List, Optional, Sequence, Tuple

from .graphics import BLACK, GREEN, RED, WHITE, FrameBuffer, Point, Rectangle, Size, rgb565
from .snake import GRID_SIZE, SCREEN_SIZE, Direction, Game, set_random_seed

JOYSTICK_CENTER = 3900
DEAD_ZONE = 100

HEAD_COLOR = GREEN
BODY_COLOR = rgb565(0, 200 >> 3, 0)
FOOD_COLOR = RED
BORDER_COLOR = WHITE

FRAME_INTERVAL = 0.15
RESTART_DELAY = 2.0


def _axis(value: int) -> int:
    if value < JOYSTICK_CENTER - DEAD_ZONE:
        return -1
    if value > JOYSTICK_CENTER + DEAD_ZONE:
        return 1
    return 0


def direction_from_joystick(x_value: int, y_value: int) -> Optional[Direction]:
    """Map raw joystick ADC readings to a direction; the x axis wins on diagonals."""
    x_dir = _axis(x_value)
    y_dir = _axis(y_value)
    if x_dir == -1:
        return Direction.LEFT
    if x_dir == 1:
        return Direction.RIGHT
    if y_dir == -1:
        return Direction.UP
    if y_dir == 1:
        return Direction.DOWN
    return None


def _cell(x: int, y: int) -> Rectangle:
    return Rectangle(Point(x * GRID_SIZE, y * GRID_SIZE), Size(GRID_SIZE, GRID_SIZE))


def draw_game(fbuf: FrameBuffer, game: Game) -> None:
    """Draw the snake, the food and the screen border into fbuf."""
    fbuf.clear(BLACK)
    for index, position in enumerate(game.snake):
        color = HEAD_COLOR if index == 0 else BODY_COLOR
        fbuf.fill_rect(_cell(position.x, position.y), color)
    fbuf.fill_rect(_cell(game.food.x, game.food.y), FOOD_COLOR)
    fbuf.stroke_rect(Rectangle(Point(0, 0), Size(SCREEN_SIZE, SCREEN_SIZE)), BORDER_COLOR, 1)


def _read_samples(path: str) -> List[Tuple[int, int]]:
    samples = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            text = line.strip()
            if not text:
                continue
            parts = text.replace(",", " ").split()
            if len(parts) != 2:
                raise ValueError(f"line {number}: expected two readings, got {text!r}")
            try:
                samples.append((int(parts[0]), int(parts[1])))
            except ValueError as exc:
                raise ValueError(f"line {number}: readings must be integers, got {text!r}") from exc
    return samples


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play snake driven by joystick readings.")
    parser.add_argument("--seed", type=_non_negative_int, default=None, help="food placement seed")
    parser.add_argument("--steps", type=_non_negative_int, default=None, help="stop after this many steps")
    parser.add_argument("--interval", type=_non_negative_float, default=FRAME_INTERVAL,
                        help="seconds between frames")
    parser.add_argument("--restart-delay", type=_non_negative_float, default=RESTART_DELAY,
                        help="seconds to wait after a game ends")
    parser.add_argument("--input", default=None,
                        help="file of 'x y' joystick readings, one per step; centred when exhausted")
    args = parser.parse_args(argv)

    samples: List[Tuple[int, int]] = []
    if args.input is not None:
        try:
            samples = _read_samples(args.input)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))

    seed = args.seed if args.seed is not None else int.from_bytes(os.urandom(2), "little")
    set_random_seed(seed)
    print(f"random seed: {seed}", flush=True)

    readings: Iterator[Tuple[int, int]] = iter(samples)
    fbuf = FrameBuffer(SCREEN_SIZE, SCREEN_SIZE, BLACK)
    display = FrameBuffer(SCREEN_SIZE, SCREEN_SIZE, BLACK)
    screen = Rectangle(Point(0, 0), Size(SCREEN_SIZE, SCREEN_SIZE))

    game = Game()
    print("game started", flush=True)
    counter = itertools.count() if args.steps is None else range(args.steps)
    try:
        for _ in counter:
            x_value, y_value = next(readings, (JOYSTICK_CENTER, JOYSTICK_CENTER))
            direction = direction_from_joystick(x_value, y_value)
            if direction is not None:
                game.set_direction(direction)

            game.update()

            if game.game_over:
                print(f"game over, final score: {game.score}", flush=True)
                time.sleep(args.restart_delay)
                game.reset()
                print("game restarted", flush=True)
                continue

            draw_game(fbuf, game)
            display.fill_contiguous(screen, fbuf.data)
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    return 0