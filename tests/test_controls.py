from __future__ import annotations

import pygame
import pytest

from invaders.controls import Controls
from invaders.phase import IDLE, PLAYING, Ended


@pytest.fixture
def controls(sim):
    return Controls(sim)


def press(controls: Controls, key: int) -> None:
    controls.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def release(controls: Controls, key: int) -> None:
    controls.handle_event(pygame.event.Event(pygame.KEYUP, key=key))


def test_enter_starts_the_game(controls, sim):
    press(controls, pygame.K_RETURN)

    assert sim.phase == PLAYING


def test_keypad_enter_starts_the_game(controls, sim):
    press(controls, pygame.K_KP_ENTER)

    assert sim.phase == PLAYING


def test_title_screen_ignores_other_keys(controls, sim):
    for key in (pygame.K_LEFT, pygame.K_d, pygame.K_SPACE):
        press(controls, key)

    assert sim.phase == IDLE
    assert not sim.ship.moving_left and not sim.ship.moving_right
    assert not sim.bullet.active


@pytest.mark.parametrize("key", [pygame.K_LEFT, pygame.K_a])
def test_left_keys(controls, sim, key):
    sim.start()

    press(controls, key)
    assert sim.ship.moving_left

    release(controls, key)
    assert not sim.ship.moving_left


@pytest.mark.parametrize("key", [pygame.K_RIGHT, pygame.K_d])
def test_right_keys(controls, sim, key):
    sim.start()

    press(controls, key)
    assert sim.ship.moving_right

    release(controls, key)
    assert not sim.ship.moving_right


def test_key_down_does_not_move_the_ship(controls, sim):
    sim.start()

    press(controls, pygame.K_LEFT)

    assert sim.ship.x == 370
    sim.tick()
    assert sim.ship.x == 362


def test_space_fires(controls, sim):
    sim.start()

    press(controls, pygame.K_SPACE)

    assert sim.bullet.active
    assert sim.bullet.y == 508


def test_space_release_does_nothing(controls, sim):
    sim.start()

    release(controls, pygame.K_SPACE)

    assert not sim.bullet.active


def test_enter_while_playing_is_ignored(controls, sim):
    sim.start()
    sim.score = 30

    press(controls, pygame.K_RETURN)

    assert sim.phase == PLAYING
    assert sim.score == 30


def test_enter_after_game_over_resets(controls, sim):
    sim.start()
    sim.score = 50
    sim.lives = 0
    sim.phase = Ended(won=False)

    press(controls, pygame.K_RETURN)

    assert sim.phase == PLAYING
    assert (sim.score, sim.lives, sim.level) == (0, 3, 0)


def test_release_clears_intent_after_game_over(controls, sim):
    sim.start()
    press(controls, pygame.K_LEFT)
    sim.phase = Ended(won=True)

    release(controls, pygame.K_LEFT)

    assert not sim.ship.moving_left


def test_other_events_are_ignored(controls, sim):
    controls.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1))

    assert sim.phase == IDLE
