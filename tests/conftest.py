from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from invaders.settings import GameSettings
from invaders.simulation import Simulation


@pytest.fixture
def sim() -> Simulation:
    """A fresh game on the title screen with a fixed starfield seed."""
    return Simulation(GameSettings(seed=1234))


@pytest.fixture
def playing(sim: Simulation) -> Simulation:
    """A game at the tutorial level, just after pressing Enter."""
    sim.start()
    return sim
