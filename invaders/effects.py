"""
Cosmetic effects: starfield and explosions
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from invaders.constants import (
    EXPLOSION_BASE_RADIUS,
    EXPLOSION_TTL,
    HEIGHT,
    MAX_EXPLOSIONS,
    STAR_COUNT,
    WIDTH,
)


@dataclass
class Star:
    """
    Star entity
    """

    x: int
    y: int
    vy: int


class Starfield:
    """
    Fixed set of stars falling at their own speed and wrapping to the top.
    """

    def __init__(self, rng: random.Random, count: int = STAR_COUNT) -> None:
        """
        :param rng: Random source for placement and speeds
        :type rng: random.Random

        :param count: Number of stars
        :type count: int
        """
        self._rng = rng
        self.stars = [
            Star(
                x=rng.randrange(WIDTH),
                y=rng.randrange(HEIGHT),
                vy=self._random_speed(),
            )
            for _ in range(count)
        ]

    def _random_speed(self) -> int:
        return self._rng.randint(1, 3)

    def update(self) -> None:
        """
        Move every star down, respawning at the top once off the bottom.
        """
        for star in self.stars:
            star.y += star.vy

            if star.y > HEIGHT:
                star.x = self._rng.randrange(WIDTH)
                star.y = 0
                star.vy = self._random_speed()


@dataclass
class Explosion:
    """
    Explosion slot; free when ``ttl`` is 0
    """

    x: int = 0
    y: int = 0
    ttl: int = 0

    @property
    def active(self) -> bool:
        return self.ttl > 0

    @property
    def radius(self) -> int:
        return EXPLOSION_BASE_RADIUS + (EXPLOSION_TTL - self.ttl)


class ExplosionPool:
    """
    Preallocated explosions. Spawns are dropped when every slot is busy.
    """

    def __init__(self, capacity: int = MAX_EXPLOSIONS) -> None:
        self.slots = [Explosion() for _ in range(capacity)]

    def spawn(self, x: int, y: int) -> bool:
        """
        Start an explosion centered at (x, y) in the first free slot.

        :param x: Center x
        :type x: int

        :param y: Center y
        :type y: int

        :return: False if the pool was full and the explosion was dropped
        :rtype: bool
        """
        for slot in self.slots:
            if not slot.active:
                slot.x = x
                slot.y = y
                slot.ttl = EXPLOSION_TTL
                return True
        return False

    def update(self) -> None:
        for slot in self.slots:
            if slot.ttl > 0:
                slot.ttl -= 1

    @property
    def active(self) -> list[Explosion]:
        return [slot for slot in self.slots if slot.active]
