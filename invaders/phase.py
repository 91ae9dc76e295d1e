"""
Game phases
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    """Title screen, waiting for Enter"""


@dataclass(frozen=True)
class Playing:
    """A level is in progress"""


@dataclass(frozen=True)
class Ended:
    """Game over, won or lost"""

    won: bool


Phase = Union[Idle, Playing, Ended]

IDLE = Idle()
PLAYING = Playing()
