from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from colorburst.components.bubble import Bubble
from colorburst.components.bubble_color import BubbleColor
from colorburst.components.popping import Popping
from colorburst.components.run_state import GameMode
from colorburst.systems.grid_ops import occupied_cells
from colorburst.systems.shooter_system import active_projectile
from colorburst.utils.game_state import get_run_state, get_shooter


@dataclass(frozen=True, slots=True)
class BubbleView:
    row: int
    col: int
    x: float
    y: float
    color: BubbleColor
    radius: float
    pop_progress: Optional[float] = None


@dataclass(frozen=True, slots=True)
class ProjectileView:
    x: float
    y: float
    color: BubbleColor
    radius: float


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Read-only view of everything a presentation layer draws in one frame.

    Coordinates use the simulation's frame: origin top-left, y grows downward.
    """

    mode: GameMode
    level: int
    score: int
    lives: int
    combo: int
    max_combo: int
    aim_angle: float
    current_color: Optional[BubbleColor]
    next_color: Optional[BubbleColor]
    shooter_position: Tuple[float, float]
    field_size: Tuple[float, float]
    projectile: Optional[ProjectileView]
    bubbles: Tuple[BubbleView, ...]


def build_snapshot(world: World) -> FrameSnapshot:
    state = get_run_state(world)
    shooter = get_shooter(world)

    bubbles = []
    for row, col, entity in occupied_cells(world):
        bubble = world.component_for_entity(entity, Bubble)
        popping = world.try_component(entity, Popping)
        bubbles.append(
            BubbleView(
                row=row,
                col=col,
                x=bubble.x,
                y=bubble.y,
                color=bubble.color,
                radius=bubble.radius,
                pop_progress=popping.progress if popping is not None else None,
            )
        )

    projectile_view = None
    found = active_projectile(world)
    if found is not None:
        _, projectile = found
        projectile_view = ProjectileView(
            x=projectile.x,
            y=projectile.y,
            color=projectile.color,
            radius=projectile.radius,
        )

    return FrameSnapshot(
        mode=state.mode,
        level=state.level,
        score=state.score,
        lives=state.lives,
        combo=state.combo,
        max_combo=state.max_combo,
        aim_angle=shooter.aim_angle,
        current_color=shooter.current_color,
        next_color=shooter.next_color,
        shooter_position=(shooter.x, shooter.y),
        field_size=tuple(world.field_size),
        projectile=projectile_view,
        bubbles=tuple(bubbles),
    )
