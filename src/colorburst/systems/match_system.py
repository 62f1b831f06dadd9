from esper import World

from colorburst.constants import AREA_CLEAR_RADIUS, MATCH_THRESHOLD
from colorburst.events.bus import (
    EVENT_AREA_CLEAR_REQUESTED,
    EVENT_AREA_CLEARED,
    EVENT_BUBBLE_PLACED,
    EVENT_BUBBLES_POPPED,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_MISSED,
    EventBus,
)
from colorburst.systems.grid_ops import find_area, find_color_group, mark_popping


class MatchSystem:
    """Resolves a freshly placed bubble: color matches and area clears.

    Popped bubbles are announced before the match itself so the stability
    pass (and its drop score) runs against the combo value prior to this match.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_BUBBLE_PLACED, self.on_bubble_placed)
        event_bus.subscribe(EVENT_AREA_CLEAR_REQUESTED, self.on_area_clear)

    def on_bubble_placed(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        group = find_color_group(self.world, row, col)
        if len(group) < MATCH_THRESHOLD:
            self.event_bus.emit(EVENT_MATCH_MISSED, row=row, col=col, size=len(group))
            return
        positions = mark_popping(self.world, group)
        self.event_bus.emit(EVENT_BUBBLES_POPPED, positions=positions, reason='match')
        self.event_bus.emit(EVENT_MATCH_FOUND, positions=positions, size=len(positions))

    def on_area_clear(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        positions = mark_popping(self.world, find_area(self.world, row, col, AREA_CLEAR_RADIUS))
        self.event_bus.emit(EVENT_BUBBLES_POPPED, positions=positions, reason='area_clear')
        self.event_bus.emit(EVENT_AREA_CLEARED, positions=positions, count=len(positions))
