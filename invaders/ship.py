"""
Player ship and its projectile
"""

from __future__ import annotations

import pygame

from invaders.constants import (
    BULLET_HEIGHT,
    BULLET_SPEED,
    BULLET_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_SPEED,
    PLAYER_WIDTH,
    PLAYER_Y,
    WIDTH,
)


class Ship:
    """
    Ship class

    Moves horizontally only, driven by the ``moving_left`` and
    ``moving_right`` intent flags.
    """

    width = PLAYER_WIDTH
    height = PLAYER_HEIGHT
    speed = PLAYER_SPEED

    def __init__(self) -> None:
        self.x = 0
        self.y = PLAYER_Y
        self.moving_left = False
        self.moving_right = False
        self.recenter()

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def recenter(self) -> None:
        """
        Put the ship back at the bottom center with no movement intent
        """
        self.x = WIDTH // 2 - self.width // 2
        self.y = PLAYER_Y
        self.moving_left = False
        self.moving_right = False

    def set_intent(self, left: bool, right: bool) -> None:
        """
        Set both movement intents

        :param left: Move left on update
        :type left: bool

        :param right: Move right on update
        :type right: bool
        """
        self.moving_left = left
        self.moving_right = right

    def update(self) -> None:
        """
        Apply the movement intents, keeping the ship on screen.

        Both intents may be set at once; they cancel out except against a
        wall.
        """
        if self.moving_left:
            self.x = max(0, self.x - self.speed)

        if self.moving_right:
            self.x = min(WIDTH - self.width, self.x + self.speed)


class Bullet:
    """
    Bullet class

    There is a single bullet per game; ``active`` tells whether it is in
    flight.
    """

    width = BULLET_WIDTH
    height = BULLET_HEIGHT
    speed = BULLET_SPEED

    def __init__(self) -> None:
        self.active = False
        self.x = 0
        self.y = 0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def fire(self, ship: Ship) -> bool:
        """
        Launch the bullet from the top center of the ship.

        :param ship: The ship firing
        :type ship: Ship

        :return: False if a bullet was already in flight
        :rtype: bool
        """
        if self.active:
            return False

        self.active = True
        self.x = ship.x + ship.width // 2 - self.width // 2
        self.y = ship.y - self.height
        return True

    def update(self) -> bool:
        """
        Move the bullet up.

        :return: True if the bullet just left the top of the screen
        :rtype: bool
        """
        if not self.active:
            return False

        self.y -= self.speed

        if self.y + self.height < 0:
            self.active = False
            return True

        return False

    def deactivate(self) -> None:
        self.active = False
