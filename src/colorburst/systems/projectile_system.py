from __future__ import annotations

import math
from typing import Optional

from esper import World

from colorburst.components.bubble import Bubble
from colorburst.components.projectile import Projectile
from colorburst.events.bus import EVENT_PROJECTILE_IMPACT, EventBus
from colorburst.systems.grid_ops import Position, is_popping, occupied_cells
from colorburst.systems.shooter_system import active_projectile


class ProjectileSystem:
    """Integrates the flying bubble one step per tick and detects impact."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def process(self) -> None:
        found = active_projectile(self.world)
        if found is None:
            return
        entity, projectile = found
        projectile.x += projectile.vx
        projectile.y += projectile.vy
        self._reflect(projectile)

        hit = self.first_collision(projectile)
        if hit is None and projectile.y - projectile.radius >= 0:
            return
        x, y, color = projectile.x, projectile.y, projectile.color
        self.world.delete_entity(entity, immediate=True)
        self.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=x, y=y, color=color, hit=hit)

    def _reflect(self, projectile: Projectile) -> None:
        width = self.world.field_size[0]
        if projectile.x - projectile.radius < 0:
            projectile.x = projectile.radius
            projectile.vx *= -1
        if projectile.x + projectile.radius > width:
            projectile.x = width - projectile.radius
            projectile.vx *= -1

    def first_collision(self, projectile: Projectile) -> Optional[Position]:
        """First settled bubble in row-major order within touching distance.

        This is the first hit found, not the nearest one.
        """
        for row, col, entity in occupied_cells(self.world):
            if is_popping(self.world, entity):
                continue
            bubble = self.world.component_for_entity(entity, Bubble)
            distance = math.hypot(projectile.x - bubble.x, projectile.y - bubble.y)
            if distance < bubble.radius * 2:
                return row, col
        return None
