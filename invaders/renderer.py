"""
Draw the game state
"""

from __future__ import annotations

import pygame

from invaders.constants import (
    BLACK,
    FONT_NAME,
    GREEN,
    HEIGHT,
    HUD_FONT_SIZE,
    MESSAGE_FONT_SIZE,
    ORANGE,
    RED,
    STAR_SIZE,
    TITLE,
    TITLE_FONT_SIZE,
    WHITE,
    WIDTH,
    YELLOW,
)
from invaders.phase import Idle
from invaders.simulation import Simulation


class Renderer:
    """
    Paints a ``Simulation`` onto a surface, back to front.
    """

    def __init__(self) -> None:
        pygame.font.init()
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)
        self.message_font = pygame.font.SysFont(FONT_NAME, MESSAGE_FONT_SIZE)
        self.hud_font = pygame.font.SysFont(FONT_NAME, HUD_FONT_SIZE, bold=True)

    def draw(self, surface: pygame.Surface, sim: Simulation) -> None:
        """
        Draw the whole frame.

        :param surface: Target surface, WIDTH x HEIGHT
        :type surface: pygame.Surface

        :param sim: Game state to draw
        :type sim: Simulation
        """
        surface.fill(BLACK)
        self._draw_stars(surface, sim)

        if isinstance(sim.phase, Idle):
            self._draw_title(surface)
            return

        self._draw_hud(surface, sim)
        self._draw_ship(surface, sim)
        self._draw_bullet(surface, sim)
        self._draw_aliens(surface, sim)
        self._draw_explosions(surface, sim)

        if sim.ended:
            self._draw_game_over(surface, sim.phase.won)

    def _text(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        x: int,
        baseline: int,
    ) -> None:
        image = font.render(text, True, WHITE)
        surface.blit(image, (x, baseline - font.get_ascent()))

    def _centered_text(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        text: str,
        baseline: int,
    ) -> None:
        text_width, _ = font.size(text)
        self._text(surface, font, text, (WIDTH - text_width) // 2, baseline)

    def _draw_stars(self, surface: pygame.Surface, sim: Simulation) -> None:
        for star in sim.starfield.stars:
            surface.fill(WHITE, (star.x, star.y, STAR_SIZE, STAR_SIZE))

    def _draw_title(self, surface: pygame.Surface) -> None:
        self._centered_text(surface, self.title_font, TITLE, HEIGHT // 2 - 40)
        self._centered_text(
            surface, self.message_font, "Press Enter to start", HEIGHT // 2 + 10
        )

    def _draw_hud(self, surface: pygame.Surface, sim: Simulation) -> None:
        self._text(surface, self.hud_font, f"Score: {sim.score}", 20, 30)
        self._text(surface, self.hud_font, f"Lives: {sim.lives}", WIDTH - 140, 30)
        self._centered_text(surface, self.hud_font, f"Level: {sim.level}", 30)

    def _draw_ship(self, surface: pygame.Surface, sim: Simulation) -> None:
        surface.fill(GREEN, sim.ship.rect)

    def _draw_bullet(self, surface: pygame.Surface, sim: Simulation) -> None:
        if sim.bullet.active:
            surface.fill(YELLOW, sim.bullet.rect)

    def _draw_aliens(self, surface: pygame.Surface, sim: Simulation) -> None:
        for r, c in sim.grid.alive_cells():
            surface.fill(RED, sim.grid.cell_rect(r, c))

    def _draw_explosions(self, surface: pygame.Surface, sim: Simulation) -> None:
        for explosion in sim.explosions.active:
            radius = explosion.radius
            pygame.draw.ellipse(
                surface,
                ORANGE,
                (
                    explosion.x - radius,
                    explosion.y - radius,
                    radius * 2,
                    radius * 2,
                ),
            )

    def _draw_game_over(self, surface: pygame.Surface, won: bool) -> None:
        message = "YOU WIN!" if won else "GAME OVER"
        baseline = HEIGHT // 2
        self._centered_text(surface, self.title_font, message, baseline)
        self._centered_text(
            surface, self.message_font, "Press Enter to play again", baseline + 40
        )
