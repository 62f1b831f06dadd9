from __future__ import annotations

import logging
import math
from typing import Optional

from esper import World

from colorburst.components.projectile import Projectile
from colorburst.components.run_state import GameMode
from colorburst.constants import AIM_MARGIN, BUBBLE_RADIUS, LAUNCH_OFFSET, PROJECTILE_SPEED
from colorburst.events.bus import EVENT_LEVEL_STARTED, EVENT_PROJECTILE_FIRED, EventBus
from colorburst.factories.levels import draw_color, level_config
from colorburst.utils.game_state import get_run_state, get_shooter

logger = logging.getLogger(__name__)

MIN_AIM_ANGLE = -math.pi + AIM_MARGIN
MAX_AIM_ANGLE = -AIM_MARGIN


def active_projectile(world: World) -> Optional[tuple[int, Projectile]]:
    for entity, projectile in world.get_component(Projectile):
        return entity, projectile
    return None


class ShooterSystem:
    """Owns the aim angle, the loaded colors and launching the projectile."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_LEVEL_STARTED, self.on_level_started)

    def on_level_started(self, sender, **kwargs):
        self.load_colors()

    def load_colors(self) -> None:
        shooter = get_shooter(self.world)
        shooter.current_color = self._draw()
        shooter.next_color = self._draw()

    def set_aim_direction(self, dx: float, dy: float) -> bool:
        """Aim along (dx, dy); ignored unless the target is above the launch point."""
        if dy >= 0:
            return False
        angle = math.atan2(dy, dx)
        get_shooter(self.world).aim_angle = max(MIN_AIM_ANGLE, min(MAX_AIM_ANGLE, angle))
        return True

    def aim_at(self, x: float, y: float) -> bool:
        shooter = get_shooter(self.world)
        return self.set_aim_direction(x - shooter.x, y - shooter.y)

    def fire(self) -> bool:
        state = get_run_state(self.world)
        shooter = get_shooter(self.world)
        if state.mode != GameMode.PLAYING:
            return False
        if shooter.current_color is None or active_projectile(self.world) is not None:
            return False
        color = shooter.current_color
        projectile = Projectile(
            x=shooter.x,
            y=shooter.y - LAUNCH_OFFSET,
            vx=math.cos(shooter.aim_angle) * PROJECTILE_SPEED,
            vy=math.sin(shooter.aim_angle) * PROJECTILE_SPEED,
            color=color,
            radius=BUBBLE_RADIUS,
        )
        self.world.create_entity(projectile)
        shooter.current_color = shooter.next_color
        shooter.next_color = self._draw()
        logger.debug("Fired %s at angle %.3f", color.value, shooter.aim_angle)
        self.event_bus.emit(
            EVENT_PROJECTILE_FIRED,
            color=color,
            x=projectile.x,
            y=projectile.y,
            vx=projectile.vx,
            vy=projectile.vy,
        )
        return True

    def _draw(self):
        config = level_config(get_run_state(self.world).level)
        return draw_color(config, self.world.random)
