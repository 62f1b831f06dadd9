from esper import World

from colorburst.components.grid_cell import GridCell
from colorburst.components.popping import Popping
from colorburst.constants import POP_STEP
from colorburst.events.bus import EVENT_BUBBLE_REMOVED, EventBus
from colorburst.systems.grid_ops import remove_bubble


class PopAnimationSystem:
    """Advances removal progress once per tick and frees finished cells.

    Progress is counted in ticks, not wall time, so a fixed tick rate gives
    the same result regardless of how often frames are drawn.
    """

    def __init__(self, world: World, event_bus: EventBus, step: float = POP_STEP):
        self.world = world
        self.event_bus = event_bus
        self.step = step

    def process(self) -> None:
        finished = []
        for ent, (popping, cell) in list(self.world.get_components(Popping, GridCell)):
            popping.progress = min(1.0, popping.progress + self.step)
            if popping.progress >= 1.0:
                finished.append((cell.row, cell.col))
        for row, col in sorted(finished):
            if remove_bubble(self.world, row, col):
                self.event_bus.emit(EVENT_BUBBLE_REMOVED, row=row, col=col)
