"""
Space Invaders game
"""

from __future__ import annotations

import pygame

from invaders.constants import HEIGHT, WIDTH
from invaders.controls import Controls
from invaders.renderer import Renderer
from invaders.settings import GameSettings
from invaders.simulation import Simulation
from invaders.utils import logger, set_screen


class Game:
    """
    Game class
    """

    _carry_on = True

    def __init__(self, name: str, fps: int):
        """
        :param name: Name of the game
        :type name: str

        :param fps: Target frames per second
        :type fps: int
        """
        logger.debug(f"Initializing {name}")
        self._name = name
        self._fps = fps
        self._clock = pygame.time.Clock()
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        """
        Set the screen

        :param width: Width of the screen
        :type width: int

        :param height: Height of the screen
        :type height: int

        :return: pygame.Surface
        :rtype: pygame.Surface

        :raise pygame.error: If the window cannot be created
        """

        logger.debug("Setting screen")

        try:
            return set_screen(self._name, width, height)
        except pygame.error as e:
            logger.error(f"Failed to open a {width}x{height} window: {e}")
            raise

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def handle_game_logic(self):
        """
        Handle the game logic

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def draw_stuff(self):
        """
        Draw the stuff

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def run(self):
        """
        Run the game until the window is closed
        """
        logger.debug("Running the game")

        while self._carry_on:
            self._clock.tick(self._fps)
            self.handle_events()
            self.handle_game_logic()
            self.draw_stuff()

        pygame.quit()


class SpaceInvaders(Game):
    """
    Space Invaders class
    """

    def __init__(self, settings: GameSettings | None = None):
        self._settings = settings or GameSettings()
        logger.configure(self._settings.log_level)
        logger.info("Starting Space Invaders...")
        logger.info(str(self._settings.to_dict()))
        super().__init__(self._settings.title, self._settings.fps)

        self._screen = self._set_screen(WIDTH, HEIGHT)
        self._simulation = Simulation(self._settings)
        self._controls = Controls(self._simulation)
        self._renderer = Renderer()

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            else:
                self._controls.handle_event(event)

    def handle_game_logic(self):
        """
        Handle the game logic
        """
        self._simulation.tick()

    def draw_stuff(self):
        """
        Draw the stuff
        """
        self._renderer.draw(self._screen, self._simulation)
        pygame.display.flip()


def run(settings: GameSettings | None = None):
    """
    Main entry point for Space Invaders.

    Opens the window and runs the game loop until the window is closed.
    """
    SpaceInvaders(settings).run()


if __name__ == "__main__":
    run()
