"""
Alien grid and its horizontal motion
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import pygame

from invaders.constants import (
    COLS,
    ENEMY_HEIGHT,
    ENEMY_SPACING_X,
    ENEMY_SPACING_Y,
    ENEMY_START_X,
    ENEMY_START_Y,
    ENEMY_WIDTH,
    ROWS,
    WALL_MARGIN,
    WIDTH,
)


@dataclass
class AlienMotion:
    """
    Shared horizontal offset of the whole grid.

    ``direction`` is -1, 0 or +1. The tutorial level never moves.
    """

    offset_x: int = 0
    direction: int = 0
    speed: int = 0
    tutorial: bool = True


class AlienGrid:
    """
    Fixed ``rows`` x ``cols`` matrix of aliens.

    Only the ``alive`` flags change during a level, and only from True to
    False.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        self.rows = rows
        self.cols = cols
        self.alive = [[False] * cols for _ in range(rows)]
        self.motion = AlienMotion()

    def clear(self) -> None:
        for row in self.alive:
            for c in range(self.cols):
                row[c] = False

    def cell_position(self, row: int, col: int) -> tuple[int, int]:
        x = (
            ENEMY_START_X
            + self.motion.offset_x
            + col * (ENEMY_WIDTH + ENEMY_SPACING_X)
        )
        y = ENEMY_START_Y + row * (ENEMY_HEIGHT + ENEMY_SPACING_Y)
        return x, y

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        x, y = self.cell_position(row, col)
        return pygame.Rect(x, y, ENEMY_WIDTH, ENEMY_HEIGHT)

    def alive_cells(self) -> Iterator[tuple[int, int]]:
        """
        Yield ``(row, col)`` of every alive alien in row-major order
        """
        for r in range(self.rows):
            for c in range(self.cols):
                if self.alive[r][c]:
                    yield r, c

    def alive_count(self) -> int:
        return sum(row.count(True) for row in self.alive)

    def all_dead(self) -> bool:
        return not any(any(row) for row in self.alive)

    def bounds(self, live_only: bool = False) -> tuple[int, int]:
        """
        Horizontal extent of the group.

        :param live_only: Measure from the outermost columns that still have
            a live alien instead of the full grid
        :type live_only: bool

        :return: ``(left, right)`` in screen pixels
        :rtype: tuple[int, int]
        """
        first_col, last_col = 0, self.cols - 1

        if live_only:
            cols = [c for _, c in self.alive_cells()]
            if cols:
                first_col, last_col = min(cols), max(cols)

        left, _ = self.cell_position(0, first_col)
        last_x, _ = self.cell_position(0, last_col)
        return left, last_x + ENEMY_WIDTH

    def update(self, live_bounds: bool = False) -> None:
        """
        Slide the grid sideways, reversing at the wall margins.

        The offset moves first; when the new bounds cross a margin the
        direction flips, so the group overshoots by at most one step.

        :param live_bounds: Bounce on the live aliens instead of the full grid
        :type live_bounds: bool
        """
        motion = self.motion
        if motion.tutorial:
            return

        motion.offset_x += motion.speed * motion.direction

        left, right = self.bounds(live_only=live_bounds)
        if left < WALL_MARGIN or right > WIDTH - WALL_MARGIN:
            motion.direction *= -1

    def hit(self, rect: pygame.Rect) -> tuple[int, int] | None:
        """
        Kill the first alive alien that intersects ``rect``.

        :param rect: Area to test, usually the bullet
        :type rect: pygame.Rect

        :return: ``(row, col)`` of the killed alien, or None
        """
        for r, c in self.alive_cells():
            if self.cell_rect(r, c).colliderect(rect):
                self.alive[r][c] = False
                return r, c
        return None
