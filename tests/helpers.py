from __future__ import annotations

import random
from typing import Dict, Tuple

from esper import World

from colorburst.components.bubble_color import BubbleColor
from colorburst.components.projectile import Projectile
from colorburst.constants import BUBBLE_RADIUS
from colorburst.events.bus import EventBus
from colorburst.session import GameSession
from colorburst.systems.grid_ops import clear_grid, place_bubble

Layout = Dict[Tuple[int, int], BubbleColor]


def playing_session(seed: int = 0, level: int = 1) -> GameSession:
    """A session in PLAYING mode at the given level with an empty grid."""

    session = GameSession(rng=random.Random(seed))
    session.start_game()
    if level != 1:
        session.level_system.start_level(level)
    clear_grid(session.world)
    return session


def stage(world: World, layout: Layout) -> None:
    for (row, col), color in layout.items():
        place_bubble(world, row, col, color)


def launch(world: World, x: float, y: float, vx: float = 0.0, vy: float = 0.0,
           color: BubbleColor = BubbleColor.RED) -> int:
    return world.create_entity(
        Projectile(x=x, y=y, vx=vx, vy=vy, color=color, radius=BUBBLE_RADIUS)
    )


def capture(bus: EventBus, name: str) -> list[dict]:
    events: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: events.append(payload))
    return events
