from __future__ import annotations

from typing import Dict

GAME_WIDTH = 35
GAME_HEIGHT = 35
GAME_RESOLUTION = 25  # pixels per cell
GAME_BACKGROUND = "#ADC3B7"
GAME_COLOR = "#233223"

SNAKE_START_LENGTH = 5
SNAKE_START_X = GAME_WIDTH // 2
SNAKE_START_Y = GAME_HEIGHT // 2
SNAKE_START_SPEED = 100  # ms between moves

FOOD_TOTAL = 1
FOOD_MAX_ATTEMPTS = 10_000

# KeyboardEvent.code names, two aliases per direction
KEY_BINDINGS: Dict[str, str] = {
    "KeyW": "UP",
    "ArrowUp": "UP",
    "KeyS": "DOWN",
    "ArrowDown": "DOWN",
    "KeyA": "LEFT",
    "ArrowLeft": "LEFT",
    "KeyD": "RIGHT",
    "ArrowRight": "RIGHT",
}
