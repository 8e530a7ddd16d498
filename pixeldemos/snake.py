"""Snake game logic on a square grid."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

GRID_SIZE = 10
GRID_COUNT = 24
SCREEN_SIZE = 240

_LCG_MULTIPLIER = 25173
_LCG_INCREMENT = 13849


@dataclass
class _Lcg:
    """16-bit linear congruential generator."""

    state: int = 0

    def next(self) -> int:
        self.state = (self.state * _LCG_MULTIPLIER + _LCG_INCREMENT) & 0xFFFF
        return self.state


_rng = _Lcg()


def set_random_seed(seed: int) -> None:
    """Seed the shared pseudo-random generator (truncated to 16 bits)."""
    _rng.state = seed & 0xFFFF


def random() -> int:
    """Return the next 16-bit pseudo-random number."""
    return _rng.next()


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Position:
    """A grid cell."""

    x: int
    y: int


def _initial_snake() -> List[Position]:
    cx = cy = GRID_COUNT // 2
    return [Position(cx, cy), Position(cx - 1, cy), Position(cx - 2, cy)]


@dataclass
class Game:
    """Snake state: body (head first), heading, food, score and whether it has ended."""

    snake: List[Position] = field(default_factory=_initial_snake)
    direction: Direction = Direction.RIGHT
    food: Position = Position(0, 0)
    score: int = 0
    game_over: bool = False
    _next_direction: Direction = field(default=Direction.RIGHT, repr=False)

    def __post_init__(self) -> None:
        self._spawn_food()

    def _spawn_food(self) -> None:
        """Place food on a random cell not occupied by the snake."""
        while True:
            x = random() % GRID_COUNT
            y = random() % GRID_COUNT
            candidate = Position(x, y)
            if candidate not in self.snake:
                self.food = candidate
                return

    def set_direction(self, direction: Direction) -> None:
        """Turn, unless the turn would reverse the snake onto itself."""
        if direction != self.direction.opposite():
            self._next_direction = direction
            self.direction = direction
            logger.debug("direction changed to %s", direction.name)
        else:
            logger.debug("reversal to %s rejected", direction.name)

    def update(self) -> None:
        """Advance one step: move, grow on food, end on wall or self collision."""
        if self.game_over:
            return
        head = self.snake[0]
        dx, dy = _STEPS[self.direction]
        new_head = Position(head.x + dx, head.y + dy)

        if not (0 <= new_head.x < GRID_COUNT and 0 <= new_head.y < GRID_COUNT):
            self.game_over = True
            return
        if new_head in self.snake:
            self.game_over = True
            return

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self._spawn_food()
        else:
            self.snake.pop()

    def reset(self) -> None:
        """Start a new game in place."""
        fresh = Game()
        self.snake = fresh.snake
        self.direction = fresh.direction
        self._next_direction = fresh._next_direction
        self.food = fresh.food
        self.score = fresh.score
        self.game_over = fresh.game_over