from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from snakegame.canvas import Canvas, fill_cell
from snakegame.config import (
    FOOD_MAX_ATTEMPTS,
    GAME_COLOR,
    GAME_HEIGHT,
    GAME_WIDTH,
    KEY_BINDINGS,
    SNAKE_START_LENGTH,
    SNAKE_START_SPEED,
    SNAKE_START_X,
    SNAKE_START_Y,
)

logger = logging.getLogger(__name__)

Vec2 = Tuple[int, int]


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def opposite(a: Vec2, b: Vec2) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def wrap(value: int, size: int) -> int:
    """Fold a coordinate that stepped one cell off the grid back onto it."""
    if value > size - 1:
        return 0
    if value < 0:
        return size - 1
    return value


def unit_step(start: int, end: int, size: int) -> int:
    # (start -> end) on a wrapping axis, e.g. 0 -> 34 on a 35 grid is -1
    delta = end - start
    if delta > 1:
        delta -= size
    elif delta < -1:
        delta += size
    return delta


DIRECTIONS = {
    "UP": (0, -1),
    "RIGHT": (1, 0),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
}


class NoFreeCellError(RuntimeError):
    """Raised when food cannot be placed because no grid cell is free."""


@dataclass
class Segment:
    x: int
    y: int

    @property
    def position(self) -> Vec2:
        return self.x, self.y


@dataclass(frozen=True)
class StartConfig:
    x: int
    y: int
    length: int
    speed: int


class Snake:
    def __init__(
        self,
        x: int = SNAKE_START_X,
        y: int = SNAKE_START_Y,
        length: int = SNAKE_START_LENGTH,
        speed: int = SNAKE_START_SPEED,
        color: str = GAME_COLOR,
        grid_size: Tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT),
    ) -> None:
        if length < 1:
            raise ValueError("length must be >= 1")
        if speed < 0:
            raise ValueError("speed must be >= 0")
        if grid_size[0] < 1 or grid_size[1] < 1:
            raise ValueError("grid_size must be positive")

        self.grid_width, self.grid_height = grid_size
        self.color = color
        self._start = StartConfig(x=x, y=y, length=length, speed=speed)

        self._body: List[Segment] = []
        self._direction: Vec2 = DIRECTIONS["RIGHT"]
        self._speed = speed
        self._dead = False
        self._delta: Optional[float] = None

        self.spawn()

    @property
    def body(self) -> List[Vec2]:
        return [segment.position for segment in self._body]

    @property
    def head(self) -> Vec2:
        return self._body[0].position

    @property
    def direction(self) -> Vec2:
        return self._direction

    @property
    def heading(self) -> Vec2:
        """Direction the snake last moved in, taken from the head and the segment behind it.

        Differs from ``direction`` when a turn has been queued but not yet
        committed by ``move``.
        """
        if len(self._body) < 2:
            return self._direction
        head, neck = self._body[0], self._body[1]
        return (
            unit_step(neck.x, head.x, self.grid_width),
            unit_step(neck.y, head.y, self.grid_height),
        )

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def dead(self) -> bool:
        return self._dead

    @property
    def grid_size(self) -> Tuple[int, int]:
        return self.grid_width, self.grid_height

    @property
    def start_config(self) -> StartConfig:
        return self._start

    @property
    def score(self) -> int:
        return len(self._body) - self._start.length

    def spawn(self) -> None:
        """Lay the body out as a horizontal line ending at the start position, heading right."""
        x, y = self._start.x, self._start.y
        self._body = [
            Segment((x - part) % self.grid_width, y) for part in range(self._start.length)
        ]
        self._delta = None
        self._direction = DIRECTIONS["RIGHT"]
        self._speed = self._start.speed

    def reset(self) -> None:
        self._dead = False
        self.spawn()
        logger.debug("Snake reset to %s", self._start)

    def move(self) -> None:
        if self._dead:
            return

        head = self._body[0]
        next_x, next_y = add_pos(head.position, self._direction)
        new_head = (wrap(next_x, self.grid_width), wrap(next_y, self.grid_height))

        # tail first; a segment still counts until it has actually moved
        for i in range(len(self._body) - 1, 0, -1):
            part = self._body[i]
            previous = self._body[i - 1]
            if part.position == new_head:
                self._dead = True
            part.x, part.y = previous.x, previous.y

        head.x, head.y = new_head

        if self._dead:
            logger.info("Snake ran into itself at %s, score %d", new_head, self.score)

    def draw(self, canvas: Canvas, timestamp: float) -> None:
        if self._dead:
            return

        canvas.fill_style = self.color
        for segment in self._body:
            fill_cell(canvas, segment.x, segment.y)

        if self._delta is None:
            self._delta = timestamp

        if timestamp - self._delta > self._speed:
            self.move()
            self._delta = timestamp

    def grow(self) -> None:
        tail = self._body[-1]
        if len(self._body) > 1:
            before = self._body[-2]
            dx = unit_step(before.x, tail.x, self.grid_width)
            dy = unit_step(before.y, tail.y, self.grid_height)
        else:
            dx, dy = -self._direction[0], -self._direction[1]

        self._body.append(
            Segment(wrap(tail.x + dx, self.grid_width), wrap(tail.y + dy, self.grid_height))
        )
        self._speed = self._speed - 1 if self._speed > 0 else 0

    def has_collided(self, food: "Food") -> bool:
        return self.head == food.position

    def set_direction(self, code: str) -> bool:
        """Turn towards the direction bound to ``code``.

        Unknown codes and turns straight back onto the neck are ignored.
        Returns whether the direction was changed.
        """
        name = KEY_BINDINGS.get(code)
        if name is None:
            return False

        new_direction = DIRECTIONS[name]
        if len(self._body) > 1 and opposite(new_direction, self.heading):
            return False

        self._direction = new_direction
        return True


class Food:
    def __init__(
        self,
        snake: Snake,
        rng: Optional[random.Random] = None,
        color: str = GAME_COLOR,
        max_attempts: int = FOOD_MAX_ATTEMPTS,
    ) -> None:
        self.random = rng if rng is not None else random.Random()
        self.color = color
        self.max_attempts = max_attempts
        self.x = 0
        self.y = 0
        self.generate(snake)

    @property
    def position(self) -> Vec2:
        return self.x, self.y

    def _random_cell(self, snake: Snake) -> Optional[Vec2]:
        width, height = snake.grid_size
        occupied = set(snake.body)
        if len(occupied) >= width * height:
            return None

        for _ in range(self.max_attempts):
            # rounding, not truncation: edge cells come up half as often
            x = round(self.random.random() * (width - 1))
            y = round(self.random.random() * (height - 1))
            if (x, y) not in occupied:
                return x, y
        return None

    def generate(self, snake: Snake) -> Vec2:
        cell = self._random_cell(snake)
        if cell is None:
            raise NoFreeCellError(
                f"no free cell for food after {self.max_attempts} attempts "
                f"(snake length {len(snake.body)})"
            )
        self.x, self.y = cell
        logger.debug("Food placed at %s", cell)
        return cell

    def draw(self, canvas: Canvas) -> None:
        canvas.fill_style = self.color
        fill_cell(canvas, self.x, self.y)
