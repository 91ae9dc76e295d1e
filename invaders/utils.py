"""
Space Invaders utils
"""

from __future__ import annotations

import logging
import random

import pygame


class Logger:
    """
    Logger class for Space Invaders
    """

    def __init__(self, name: str = "invaders") -> None:
        self._logger = logging.getLogger(name)

    def configure(self, level: str = "INFO") -> None:
        """
        Configure the root handler and the game log level.

        :param level: Name of the logging level
        :type level: str
        """
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        self._logger.setLevel(level.upper())

    def debug(self, message: str) -> None:
        """
        Log a debug message.
        """
        self._logger.debug(message)

    def info(self, message: str) -> None:
        """
        Log an info message.
        """
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """
        Log a warning message.
        """
        self._logger.warning(message)

    def error(self, message: str) -> None:
        """
        Log an error message.
        """
        self._logger.error(message)


logger = Logger()


def make_random(seed: int | None = None) -> random.Random:
    """
    Create the random source used by the starfield.

    :param seed: Seed for reproducible runs, ``None`` for OS entropy
    :type seed: int | None

    :return: random.Random
    """
    return random.Random(seed)


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """

    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
