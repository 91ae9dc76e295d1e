"""
Frame-driven game simulation
"""

from __future__ import annotations

import random

from invaders.alien import AlienGrid
from invaders.constants import (
    ENEMY_HEIGHT,
    ENEMY_WIDTH,
    MAX_LEVEL,
    POINTS_PER_KILL,
    START_LIVES,
)
from invaders.effects import ExplosionPool, Starfield
from invaders.levels import LevelLayout, configure_level
from invaders.phase import IDLE, PLAYING, Ended, Phase, Playing
from invaders.settings import GameSettings
from invaders.ship import Bullet, Ship
from invaders.utils import logger, make_random


class Simulation:  # pylint: disable=too-many-instance-attributes
    """
    Space Invaders game state, advanced one frame per ``tick``.

    Drawing is left to the caller: the driver ticks, then renders the
    resulting state.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param settings: Game settings, defaults if None
        :type settings: GameSettings | None

        :param rng: Random source for the starfield, seeded from the
            settings if None
        :type rng: random.Random | None
        """
        self.settings = settings or GameSettings()
        self.rng = rng or make_random(self.settings.seed)

        self.starfield = Starfield(self.rng)
        self.explosions = ExplosionPool()

        self.ship = Ship()
        self.bullet = Bullet()
        self.grid = AlienGrid()

        self.phase: Phase = IDLE
        self.score = 0
        self.lives = START_LIVES
        self.level = 0

        self.load_level(0)

    @property
    def playing(self) -> bool:
        return isinstance(self.phase, Playing)

    @property
    def ended(self) -> bool:
        return isinstance(self.phase, Ended)

    def load_level(self, level: int) -> LevelLayout:
        """
        Switch to ``level`` and lay out its aliens.

        :param level: Level index in ``[0, MAX_LEVEL]``
        :type level: int

        :return: The level layout
        :rtype: LevelLayout
        """
        layout = configure_level(self.grid, level)
        self.level = level
        logger.debug(
            f"Level {level}: {layout.rows}x{layout.cols} aliens, "
            f"speed {layout.speed}"
        )
        return layout

    def start(self) -> None:
        """
        Enter key: start from the title screen or restart after a game over.

        Does nothing while a game is in progress.
        """
        if self.playing:
            return

        if self.ended:
            self.reset()
            return

        logger.info("Game started")
        self.phase = PLAYING

    def reset(self) -> None:
        """
        Start a new game from the tutorial level.

        Stars and explosions carry over.
        """
        self.score = 0
        self.lives = START_LIVES
        self.ship.recenter()
        self.bullet.deactivate()
        self.load_level(0)
        self.phase = PLAYING
        logger.info("Game restarted")

    def fire(self) -> bool:
        """
        Fire request, honoured only while playing.

        :return: True if a bullet was launched
        :rtype: bool
        """
        if not self.playing:
            return False
        return self.bullet.fire(self.ship)

    def all_enemies_dead(self) -> bool:
        return self.grid.all_dead()

    def _end(self, won: bool) -> None:
        self.phase = Ended(won=won)
        logger.info(
            f"{'You win' if won else 'Game over'}: score {self.score}, "
            f"level {self.level}"
        )

    def _update_bullet(self) -> None:
        missed = self.bullet.update()
        if not missed:
            return

        self.lives -= 1
        logger.debug(f"Missed shot, lives left: {max(self.lives, 0)}")

        if self.lives <= 0:
            self.lives = 0
            self._end(won=False)

    def _check_collisions(self) -> None:
        if not self.bullet.active:
            return

        hit = self.grid.hit(self.bullet.rect)
        if hit is None:
            return

        self.bullet.deactivate()
        self.score += POINTS_PER_KILL

        x, y = self.grid.cell_position(*hit)
        self.explosions.spawn(x + ENEMY_WIDTH // 2, y + ENEMY_HEIGHT // 2)
        logger.debug(f"Hit alien {hit}, score: {self.score}")

    def _check_level_clear(self) -> None:
        if not self.all_enemies_dead():
            return

        if self.level < MAX_LEVEL:
            self.load_level(self.level + 1)
        else:
            self._end(won=True)

    def tick(self) -> None:
        """
        Advance one frame.

        Stars and explosions animate in every phase; the rest of the game
        only moves while playing. A level clear is handled in the same frame
        as the last kill.
        """
        self.starfield.update()
        self.explosions.update()

        if not self.playing:
            return

        self.ship.update()
        self._update_bullet()
        self.grid.update(live_bounds=self.settings.live_bounds)
        self._check_collisions()
        self._check_level_clear()
