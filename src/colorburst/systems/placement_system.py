import logging

from esper import World

from colorburst.components.bubble_color import BubbleColor
from colorburst.events.bus import (
    EVENT_AREA_CLEAR_REQUESTED,
    EVENT_BUBBLE_PLACED,
    EVENT_PROJECTILE_IMPACT,
    EventBus,
)
from colorburst.systems.grid_ops import get_grid, place_bubble, snap_to_cell

logger = logging.getLogger(__name__)


class PlacementSystem:
    """Snaps an impact position to the nearest grid cell and commits it.

    An occupied target cell is overwritten; no free neighbor is searched for.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PROJECTILE_IMPACT, self.on_impact)

    def on_impact(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        color = kwargs.get('color')
        if x is None or y is None or not isinstance(color, BubbleColor):
            return
        grid = get_grid(self.world)
        row, col = snap_to_cell(x, y, grid.rows, grid.cols, grid.row_offset)
        if color is BubbleColor.BOMB:
            logger.debug("Area clear at (%d, %d)", row, col)
            self.event_bus.emit(EVENT_AREA_CLEAR_REQUESTED, row=row, col=col)
            return
        if grid.entity_at(row, col) is not None:
            logger.debug("Overwriting occupied cell (%d, %d)", row, col)
        place_bubble(self.world, row, col, color)
        self.event_bus.emit(EVENT_BUBBLE_PLACED, row=row, col=col, color=color)
