"""
Level layouts
"""

from __future__ import annotations

from dataclasses import dataclass

from invaders.alien import AlienGrid
from invaders.constants import MAX_LEVEL


@dataclass(frozen=True)
class LevelLayout:
    """
    Size of the alive block and grid motion for one level
    """

    rows: int
    cols: int
    direction: int
    speed: int

    @property
    def tutorial(self) -> bool:
        return self.speed == 0


# Level 0 is the tutorial: a short static row.
LEVELS: tuple[LevelLayout, ...] = (
    LevelLayout(rows=1, cols=4, direction=0, speed=0),
    LevelLayout(rows=1, cols=6, direction=1, speed=2),
    LevelLayout(rows=2, cols=6, direction=1, speed=3),
    LevelLayout(rows=2, cols=8, direction=1, speed=4),
    LevelLayout(rows=3, cols=6, direction=1, speed=5),
    LevelLayout(rows=3, cols=8, direction=1, speed=6),
)


def configure_level(grid: AlienGrid, level: int) -> LevelLayout:
    """
    Populate ``grid`` with the centered alien block of ``level``.

    Resets the grid offset and sets the motion for the level.

    :param grid: Grid to reset
    :type grid: AlienGrid

    :param level: Level index in ``[0, MAX_LEVEL]``
    :type level: int

    :return: The applied level layout
    :rtype: LevelLayout
    """
    assert 0 <= level <= MAX_LEVEL, f"level {level} out of range"

    layout = LEVELS[level]
    rows = min(layout.rows, grid.rows)
    cols = min(layout.cols, grid.cols)
    start_col = (grid.cols - cols) // 2

    grid.clear()
    for r in range(rows):
        for c in range(cols):
            grid.alive[r][start_col + c] = True

    grid.motion.offset_x = 0
    grid.motion.direction = layout.direction
    grid.motion.speed = layout.speed
    grid.motion.tutorial = layout.tutorial

    return layout
