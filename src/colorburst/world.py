import random

from esper import World

from colorburst.components.grid import Grid
from colorburst.components.run_state import GameMode, RunState
from colorburst.components.shooter import Shooter
from colorburst.constants import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    GRID_COLS,
    GRID_ROWS,
    SHOOTER_BOTTOM_MARGIN,
)


def create_world(
    initial_mode: GameMode = GameMode.MENU,
    *,
    width: float = FIELD_WIDTH,
    height: float = FIELD_HEIGHT,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the run state, an empty grid and the shooter.

    Every random draw in the simulation goes through ``world.random`` so a
    seeded ``rng`` reproduces a whole run.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "field_size", (width, height))

    world.create_entity(RunState(mode=initial_mode))
    world.create_entity(Grid(rows=rows, cols=cols))
    world.create_entity(Shooter(x=width / 2, y=height - SHOOTER_BOTTOM_MARGIN))
    return world
