import random

import pytest

from snakegame.config import GAME_COLOR, GAME_RESOLUTION
from snakegame.game import Food, NoFreeCellError, Snake


def test_food_not_on_snake():
    snake = Snake(4, 2, 5, 100, grid_size=(5, 5))
    for seed in range(50):
        food = Food(snake, rng=random.Random(seed))
        assert food.position not in snake.body
        assert 0 <= food.x < 5
        assert 0 <= food.y < 5


def test_generate_relocates_off_grown_snake():
    rng = random.Random(3)
    snake = Snake(4, 2, 5, 100, grid_size=(5, 5))
    food = Food(snake, rng=rng)
    for _ in range(10):
        snake.grow()
        snake.move()
        position = food.generate(snake)
        assert position == food.position
        assert position not in snake.body


def test_last_free_cell_is_found():
    snake = Snake(2, 0, 2, 100, grid_size=(3, 1))
    food = Food(snake, rng=random.Random(0))
    assert food.position == (0, 0)


def test_full_grid_raises():
    snake = Snake(2, 0, 3, 100, grid_size=(3, 1))
    with pytest.raises(NoFreeCellError):
        Food(snake, rng=random.Random(0))


def test_retry_cap_raises(fixed_random):
    snake = Snake(1, 0, 2, 100, grid_size=(5, 5))
    assert (0, 0) in snake.body
    with pytest.raises(NoFreeCellError):
        Food(snake, rng=fixed_random(0.0), max_attempts=5)


def test_sampling_rounds_to_nearest_cell(fixed_random):
    snake = Snake(5, 5, 3, 100)
    assert Food(snake, rng=fixed_random(0.99)).position == (34, 34)
    # 0.49 * 34 = 16.66
    assert Food(snake, rng=fixed_random(0.49)).position == (17, 17)
    assert Food(snake, rng=fixed_random(0.01)).position == (0, 0)


def test_draw_fills_food_cell(canvas):
    snake = Snake()
    food = Food(snake, rng=random.Random(5))
    food.x, food.y = 3, 4
    food.draw(canvas)
    size = GAME_RESOLUTION - 1
    assert canvas.calls == [
        ("fill", GAME_COLOR, 3 * GAME_RESOLUTION - 1, 4 * GAME_RESOLUTION - 1, size, size),
    ]
