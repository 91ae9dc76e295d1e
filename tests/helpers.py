from __future__ import annotations

from invaders.simulation import Simulation


def tick_until(sim: Simulation, condition, limit: int = 200) -> int:
    """Tick until ``condition(sim)`` holds; return the number of ticks."""
    for n in range(1, limit + 1):
        sim.tick()
        if condition(sim):
            return n
    raise AssertionError(f"condition not met after {limit} ticks")


def shoot_column(sim: Simulation, col: int) -> int:
    """Park the ship under ``col`` of a static grid, fire and wait for the
    bullet to land. Returns the number of ticks taken."""
    sim.ship.x = 75 + 70 * col
    assert sim.fire()
    return tick_until(sim, lambda s: not s.bullet.active)


def miss(sim: Simulation) -> int:
    """Fire from the far left, where no alien ever is at level 0."""
    sim.ship.x = 0
    assert sim.fire()
    return tick_until(sim, lambda s: not s.bullet.active)
