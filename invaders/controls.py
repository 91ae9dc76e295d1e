"""
Keyboard bindings
"""

from __future__ import annotations

import pygame

from invaders.simulation import Simulation

LEFT_KEYS = frozenset({pygame.K_LEFT, pygame.K_a})
RIGHT_KEYS = frozenset({pygame.K_RIGHT, pygame.K_d})
FIRE_KEYS = frozenset({pygame.K_SPACE})
START_KEYS = frozenset({pygame.K_RETURN, pygame.K_KP_ENTER})


class Controls:
    """
    Translate key events into ship intents, fire requests and phase changes.

    Never moves anything itself; movement happens in ``Simulation.tick``.
    """

    def __init__(self, simulation: Simulation) -> None:
        self.simulation = simulation

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Dispatch a pygame event; non-keyboard events are ignored.

        :param event: The event to handle
        :type event: pygame.event.Event
        """
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)

    def key_down(self, key: int) -> None:
        sim = self.simulation

        if key in START_KEYS:
            sim.start()
            return

        # Only Enter does anything on the title and game over screens
        if not sim.playing:
            return

        if key in LEFT_KEYS:
            sim.ship.moving_left = True
        elif key in RIGHT_KEYS:
            sim.ship.moving_right = True
        elif key in FIRE_KEYS:
            sim.fire()

    def key_up(self, key: int) -> None:
        ship = self.simulation.ship

        if key in LEFT_KEYS:
            ship.moving_left = False
        elif key in RIGHT_KEYS:
            ship.moving_right = False
