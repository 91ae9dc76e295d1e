from __future__ import annotations

import pygame
import pytest

from invaders.constants import GREEN, HEIGHT, ORANGE, RED, WIDTH, YELLOW
from invaders.phase import Ended
from invaders.renderer import Renderer


@pytest.fixture(scope="module")
def renderer():
    return Renderer()


@pytest.fixture
def surface():
    return pygame.Surface((WIDTH, HEIGHT))


def color_at(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surface.get_at((x, y)))[:3]


def colors_in(surface: pygame.Surface, rect: pygame.Rect) -> set:
    return {
        color_at(surface, x, y)
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }


def test_title_screen_has_no_sprites(renderer, surface, sim):
    renderer.draw(surface, sim)

    assert GREEN not in colors_in(surface, sim.ship.rect)
    assert RED not in colors_in(surface, sim.grid.cell_rect(0, 2))
    # Title and prompt are white text around the middle of the screen
    band = pygame.Rect(0, HEIGHT // 2 - 80, WIDTH, 100)
    assert (255, 255, 255) in colors_in(surface, band)


def test_playing_draws_ship_aliens_and_bullet(renderer, surface, playing):
    playing.fire()
    renderer.draw(surface, playing)

    assert colors_in(surface, playing.ship.rect) == {GREEN}
    assert colors_in(surface, playing.bullet.rect) == {YELLOW}
    for r, c in playing.grid.alive_cells():
        assert colors_in(surface, playing.grid.cell_rect(r, c)) == {RED}
    assert RED not in colors_in(surface, playing.grid.cell_rect(0, 0))


def test_hud_is_drawn_while_playing(renderer, surface, playing):
    renderer.draw(surface, playing)

    assert (255, 255, 255) in colors_in(surface, pygame.Rect(20, 5, 100, 30))
    assert (255, 255, 255) in colors_in(surface, pygame.Rect(660, 5, 100, 30))


def test_explosion_is_an_orange_disc(renderer, surface, playing):
    playing.explosions.spawn(400, 300)
    renderer.draw(surface, playing)

    assert color_at(surface, 400, 300) == ORANGE
    assert color_at(surface, 400 - 20, 300 - 20) != ORANGE


def test_game_over_message(renderer, surface, playing):
    playing.phase = Ended(won=False)
    renderer.draw(surface, playing)

    band = pygame.Rect(0, HEIGHT // 2 - 40, WIDTH, 90)
    assert (255, 255, 255) in colors_in(surface, band)
    assert colors_in(surface, playing.ship.rect) == {GREEN}
