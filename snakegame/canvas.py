from __future__ import annotations

from typing import Protocol

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

from snakegame.config import GAME_BACKGROUND, GAME_COLOR, GAME_RESOLUTION


class Canvas(Protocol):
    """Minimal 2D drawing surface the game draws through."""

    fill_style: str

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        ...

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        ...


def fill_cell(canvas: Canvas, x: int, y: int, resolution: int = GAME_RESOLUTION) -> None:
    # one pixel gap between cells
    canvas.fill_rect(
        x * resolution - 1,
        y * resolution - 1,
        resolution - 1,
        resolution - 1,
    )


class PygameCanvas:
    def __init__(self, surface, background: str = GAME_BACKGROUND) -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        self.surface = surface
        self.background = background
        self.fill_style = GAME_COLOR

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        rect = pygame.Rect(x, y, width, height)
        pygame.draw.rect(self.surface, pygame.Color(self.fill_style), rect)

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        rect = pygame.Rect(x, y, width, height)
        self.surface.fill(pygame.Color(self.background), rect)
