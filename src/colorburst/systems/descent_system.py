import logging

from esper import World

from colorburst.components.bubble import Bubble
from colorburst.components.run_state import GameMode
from colorburst.constants import FAILURE_LINE_MARGIN
from colorburst.events.bus import EVENT_LIFE_LOST, EVENT_RUN_LOST, EventBus
from colorburst.factories.levels import level_config
from colorburst.systems.grid_ops import get_grid, is_popping, occupied_cells, refresh_positions
from colorburst.utils.game_state import get_run_state, get_shooter, set_game_mode

logger = logging.getLogger(__name__)


class DescentSystem:
    """Lowers the ceiling on levels with a row speed and enforces the failure line."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def failure_line(self) -> float:
        return get_shooter(self.world).y - FAILURE_LINE_MARGIN

    def process(self) -> None:
        state = get_run_state(self.world)
        config = level_config(state.level)
        if not config.row_speed:
            return
        grid = get_grid(self.world)
        grid.row_offset += config.row_speed
        refresh_positions(self.world)
        if not self.crossed_failure_line():
            return
        state.lives = max(0, state.lives - 1)
        if state.lives <= 0:
            logger.info("Run lost on level %d with score %d", state.level, state.score)
            set_game_mode(self.world, self.event_bus, GameMode.LOST)
            self.event_bus.emit(
                EVENT_RUN_LOST,
                score=state.score,
                max_combo=state.max_combo,
                level=state.level,
            )
            return
        grid.row_offset = 0.0
        refresh_positions(self.world)
        logger.info("Life lost, %d remaining", state.lives)
        self.event_bus.emit(EVENT_LIFE_LOST, lives=state.lives)

    def crossed_failure_line(self) -> bool:
        limit = self.failure_line()
        for _, _, entity in occupied_cells(self.world):
            if is_popping(self.world, entity):
                continue
            bubble = self.world.component_for_entity(entity, Bubble)
            if bubble.y + bubble.radius > limit:
                return True
        return False
