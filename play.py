from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from snakegame.canvas import PygameCanvas
from snakegame.loop import GameLoop, canvas_size

# pygame keys -> KeyboardEvent.code names understood by Snake.set_direction
PYGAME_KEY_CODES = {
    pygame.K_w: "KeyW",
    pygame.K_UP: "ArrowUp",
    pygame.K_s: "KeyS",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_a: "KeyA",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_d: "KeyD",
    pygame.K_RIGHT: "ArrowRight",
}
RESTART_KEYS = (pygame.K_r, pygame.K_SPACE)


def parse_args():
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    window = pygame.display.set_mode(canvas_size())
    clock = pygame.time.Clock()

    def show_score(score: int) -> None:
        pygame.display.set_caption(f"Snake - Score: {score}")

    loop = GameLoop(
        PygameCanvas(window),
        rng=random.Random(args.seed),
        on_score=show_score,
    )
    show_score(loop.score)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                print(f"Game over! Final score: {loop.score}")
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN:
                code = PYGAME_KEY_CODES.get(event.key)
                if code is not None:
                    loop.snake.set_direction(code)
                elif event.key in RESTART_KEYS and not loop.running:
                    loop.restart()

        if loop.tick(pygame.time.get_ticks()):
            pygame.display.flip()
        else:
            pygame.display.set_caption(f"Snake - Game over! Score: {loop.score} (R to restart)")

        clock.tick(args.fps)


if __name__ == "__main__":
    main()
