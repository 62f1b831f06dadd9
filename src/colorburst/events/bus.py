from typing import Callable, Dict

from blinker import Signal


class EventBus:
    """Routes named domain events between the systems of one session.

    Each event name maps to a lazily created ``blinker.Signal``. Receivers are
    connected strongly, so a bound method stays subscribed for as long as the
    bus lives.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Callable) -> None:
        signal = self._signals.get(name)
        if signal is None:
            signal = self._signals[name] = Signal(name)
        signal.connect(fn, weak=False)

    def emit(self, name: str, **payload) -> None:
        signal = self._signals.get(name)
        if signal is not None:
            signal.send(self, **payload)


# ============================================================================
# SHOOTER & PROJECTILE
# ============================================================================
EVENT_PROJECTILE_FIRED = "projectile_fired"        # payload: color=BubbleColor, x, y, vx, vy
EVENT_PROJECTILE_IMPACT = "projectile_impact"      # payload: x, y, color=BubbleColor, hit=(r,c)|None


# ============================================================================
# GRID MECHANICS
# ============================================================================
EVENT_BUBBLE_PLACED = "bubble_placed"                  # payload: row, col, color=BubbleColor
EVENT_AREA_CLEAR_REQUESTED = "area_clear_requested"    # payload: row, col
EVENT_BUBBLES_POPPED = "bubbles_popped"                # payload: positions=[(r,c),...], reason=str
EVENT_BUBBLE_REMOVED = "bubble_removed"                # payload: row, col


# ============================================================================
# MATCHING & STABILITY
# ============================================================================
EVENT_MATCH_FOUND = "match_found"          # payload: positions=[(r,c),...], size=int
EVENT_MATCH_MISSED = "match_missed"        # payload: row, col, size=int
EVENT_CLUSTER_DROPPED = "cluster_dropped"  # payload: positions=[(r,c),...], count=int
EVENT_AREA_CLEARED = "area_cleared"        # payload: positions=[(r,c),...], count=int


# ============================================================================
# SCORING
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int, reason=str
EVENT_COMBO_CHANGED = "combo_changed"      # payload: combo=int, max_combo=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_LIFE_LOST = "life_lost"                  # payload: lives=int
EVENT_LEVEL_STARTED = "level_started"          # payload: level=int
EVENT_LEVEL_COMPLETED = "level_completed"      # payload: level=int
EVENT_RUN_WON = "run_won"                      # payload: score=int, max_combo=int
EVENT_RUN_LOST = "run_lost"                    # payload: score=int, max_combo=int, level=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
