from __future__ import annotations

import logging

from esper import World

from colorburst.components.run_state import GameMode, RunState
from colorburst.components.shooter import Shooter
from colorburst.events.bus import EVENT_GAME_MODE_CHANGED, EventBus

logger = logging.getLogger(__name__)


def get_run_state(world: World) -> RunState:
    for _, state in world.get_component(RunState):
        return state
    raise RuntimeError("RunState component not found")


def get_shooter(world: World) -> Shooter:
    for _, shooter in world.get_component(Shooter):
        return shooter
    raise RuntimeError("Shooter component not found")


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the run mode and emit a change event when it differs."""

    state = get_run_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    logger.info("Game mode %s -> %s", previous_mode.name, mode.name)
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
