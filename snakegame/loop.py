from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from snakegame.canvas import Canvas
from snakegame.config import FOOD_TOTAL, GAME_HEIGHT, GAME_RESOLUTION, GAME_WIDTH
from snakegame.game import Food, NoFreeCellError, Snake

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives one snake and its food from host frame callbacks.

    The host calls ``tick`` once per frame with a monotonically increasing
    timestamp in milliseconds. Rendering happens every tick; the snake only
    moves once ``speed`` ms have passed since its last move.
    """

    def __init__(
        self,
        canvas: Canvas,
        snake: Optional[Snake] = None,
        food_total: int = FOOD_TOTAL,
        rng: Optional[random.Random] = None,
        on_score: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.canvas = canvas
        self.snake = snake if snake is not None else Snake()
        self.random = rng if rng is not None else random.Random()
        self.on_score = on_score
        self.board_full = False
        self.foods: List[Food] = [Food(self.snake, rng=self.random) for _ in range(food_total)]

    @property
    def score(self) -> int:
        return self.snake.score

    @property
    def running(self) -> bool:
        return not (self.snake.dead or self.board_full)

    def tick(self, timestamp: float) -> bool:
        if not self.running:
            return False

        width, height = canvas_size(*self.snake.grid_size)
        self.canvas.clear_rect(0, 0, width, height)

        self.snake.draw(self.canvas, timestamp)

        for food in self.foods:
            food.draw(self.canvas)

            if not self.snake.has_collided(food):
                continue

            self.snake.grow()
            logger.info("Food eaten at %s, score %d", food.position, self.score)
            if self.on_score is not None:
                self.on_score(self.score)

            try:
                food.generate(self.snake)
            except NoFreeCellError as exc:
                logger.warning("Board full: %s", exc)
                self.board_full = True
                return False

        return self.running

    def restart(self) -> None:
        self.snake.reset()
        self.board_full = False
        for food in self.foods:
            food.generate(self.snake)
        if self.on_score is not None:
            self.on_score(self.score)
        logger.info("Game restarted")


def canvas_size(width: int = GAME_WIDTH, height: int = GAME_HEIGHT) -> Tuple[int, int]:
    return width * GAME_RESOLUTION, height * GAME_RESOLUTION
