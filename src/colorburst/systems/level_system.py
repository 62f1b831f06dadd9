"""Run and level lifecycle: starting runs, reseeding levels, detecting clears."""
from __future__ import annotations

import logging

from esper import World

from colorburst.components.projectile import Projectile
from colorburst.components.run_state import GameMode
from colorburst.events.bus import (
    EVENT_LEVEL_COMPLETED,
    EVENT_LEVEL_STARTED,
    EVENT_RUN_WON,
    EventBus,
)
from colorburst.factories.levels import draw_color, level_config
from colorburst.systems.grid_ops import grid_is_empty, seed_grid
from colorburst.utils.game_state import get_run_state, set_game_mode

logger = logging.getLogger(__name__)


class LevelSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def start_run(self) -> None:
        get_run_state(self.world).begin_run()
        self.start_level(1)

    def start_level(self, level: int) -> None:
        state = get_run_state(self.world)
        state.begin_level(level)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        for entity, _ in list(self.world.get_component(Projectile)):
            self.world.delete_entity(entity, immediate=True)
        config = level_config(state.level)
        rng = self.world.random
        seed_grid(self.world, lambda: draw_color(config, rng), rng)
        logger.info("Level %d started (%d colors)", state.level, config.colors)
        self.event_bus.emit(EVENT_LEVEL_STARTED, level=state.level)

    def return_to_menu(self) -> bool:
        state = get_run_state(self.world)
        if state.mode not in (GameMode.WON, GameMode.LOST):
            return False
        set_game_mode(self.world, self.event_bus, GameMode.MENU)
        state.return_to_menu()
        return True

    def process(self) -> None:
        state = get_run_state(self.world)
        if state.mode != GameMode.PLAYING or not grid_is_empty(self.world):
            return
        self.event_bus.emit(EVENT_LEVEL_COMPLETED, level=state.level)
        if state.is_final_level:
            logger.info("All levels cleared with score %d", state.score)
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            self.event_bus.emit(EVENT_RUN_WON, score=state.score, max_combo=state.max_combo)
            return
        self.start_level(state.level + 1)
