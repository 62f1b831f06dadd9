import logging

from esper import World

from colorburst.constants import AREA_CLEAR_POINTS, DROP_POINTS, MATCH_POINTS
from colorburst.events.bus import (
    EVENT_AREA_CLEARED,
    EVENT_CLUSTER_DROPPED,
    EVENT_COMBO_CHANGED,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_MISSED,
    EVENT_SCORE_CHANGED,
    EventBus,
)
from colorburst.utils.game_state import get_run_state

logger = logging.getLogger(__name__)


class ScoringSystem:
    """Single owner of score and combo updates."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MATCH_FOUND, self.on_match_found)
        event_bus.subscribe(EVENT_MATCH_MISSED, self.on_match_missed)
        event_bus.subscribe(EVENT_CLUSTER_DROPPED, self.on_cluster_dropped)
        event_bus.subscribe(EVENT_AREA_CLEARED, self.on_area_cleared)

    def on_match_found(self, sender, **kwargs):
        size = kwargs.get('size', 0)
        state = get_run_state(self.world)
        state.register_match()
        self._emit_combo()
        self._award(size * MATCH_POINTS * state.combo, reason='match')

    def on_match_missed(self, sender, **kwargs):
        state = get_run_state(self.world)
        if state.combo:
            state.reset_combo()
            self._emit_combo()

    def on_cluster_dropped(self, sender, **kwargs):
        count = kwargs.get('count', 0)
        state = get_run_state(self.world)
        self._award(count * DROP_POINTS * (state.combo + 1), reason='drop')

    def on_area_cleared(self, sender, **kwargs):
        count = kwargs.get('count', 0)
        self._award(count * AREA_CLEAR_POINTS, reason='area_clear')

    def _award(self, points: int, *, reason: str) -> None:
        state = get_run_state(self.world)
        delta = state.add_score(points)
        if not delta:
            return
        logger.debug("+%d (%s), score %d", delta, reason, state.score)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=delta, reason=reason)

    def _emit_combo(self) -> None:
        state = get_run_state(self.world)
        self.event_bus.emit(EVENT_COMBO_CHANGED, combo=state.combo, max_combo=state.max_combo)
