from esper import World

from colorburst.events.bus import EVENT_BUBBLES_POPPED, EVENT_CLUSTER_DROPPED, EventBus
from colorburst.systems.grid_ops import find_unsupported, mark_popping


class StabilitySystem:
    """Drops every bubble that lost its path to the ceiling row."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_BUBBLES_POPPED, self.on_bubbles_popped)

    def on_bubbles_popped(self, sender, **kwargs):
        dropped = mark_popping(self.world, find_unsupported(self.world))
        if dropped:
            self.event_bus.emit(EVENT_CLUSTER_DROPPED, positions=dropped, count=len(dropped))
