import pytest

from snakegame.canvas import PygameCanvas, fill_cell
from snakegame.config import GAME_BACKGROUND, GAME_COLOR

pygame = pytest.importorskip("pygame")


def rgb(color):
    return tuple(pygame.Color(color))[:3]


def test_pygame_canvas_paints_cells():
    surface = pygame.Surface((100, 100))
    canvas = PygameCanvas(surface)
    assert (canvas.width, canvas.height) == (100, 100)

    canvas.clear_rect(0, 0, 100, 100)
    assert tuple(surface.get_at((50, 50)))[:3] == rgb(GAME_BACKGROUND)

    canvas.fill_style = GAME_COLOR
    fill_cell(canvas, 1, 1)
    # cell (1, 1) spans pixels 24..47
    assert tuple(surface.get_at((30, 30)))[:3] == rgb(GAME_COLOR)
    assert tuple(surface.get_at((10, 10)))[:3] == rgb(GAME_BACKGROUND)
    assert tuple(surface.get_at((48, 48)))[:3] == rgb(GAME_BACKGROUND)
