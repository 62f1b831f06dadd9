import random

from colorburst.components.bubble import Bubble
from colorburst.components.bubble_color import BubbleColor
from colorburst.components.run_state import GameMode
from colorburst.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_LEVEL_COMPLETED,
    EVENT_LEVEL_STARTED,
    EVENT_LIFE_LOST,
    EVENT_RUN_LOST,
    EVENT_RUN_WON,
)
from colorburst.factories.levels import level_config
from colorburst.session import GameSession
from colorburst.systems.grid_ops import (
    bubble_y,
    clear_grid,
    get_grid,
    mark_popping,
    occupied_cells,
    refresh_positions,
)
from colorburst.systems.shooter_system import active_projectile
from colorburst.utils.game_state import get_run_state, get_shooter
from tests.helpers import capture, launch, playing_session, stage


def test_new_session_waits_in_menu():
    session = GameSession(rng=random.Random(1))
    session.tick()
    assert session.mode == GameMode.MENU
    assert list(occupied_cells(session.world)) == []


def test_start_game_seeds_level_one():
    session = GameSession(rng=random.Random(3))
    started = capture(session.event_bus, EVENT_LEVEL_STARTED)
    modes = capture(session.event_bus, EVENT_GAME_MODE_CHANGED)

    session.start_game()

    assert session.mode == GameMode.PLAYING
    assert (session.level, session.score, session.lives, session.combo) == (1, 0, 3, 0)
    assert started == [{'level': 1}]
    assert modes == [{'previous_mode': GameMode.MENU, 'new_mode': GameMode.PLAYING}]
    cells = list(occupied_cells(session.world))
    assert cells
    assert all(row < 5 for row, _, _ in cells)
    palette = set(level_config(1).palette)
    colors = {session.world.component_for_entity(e, Bubble).color for _, _, e in cells}
    assert colors <= palette
    shooter = get_shooter(session.world)
    assert shooter.current_color in palette
    assert shooter.next_color in palette


def test_same_seed_reproduces_the_grid():
    def layout(seed):
        session = GameSession(rng=random.Random(seed))
        session.start_game()
        return [
            (row, col, session.world.component_for_entity(e, Bubble).color)
            for row, col, e in occupied_cells(session.world)
        ]

    assert layout(11) == layout(11)


def test_clearing_grid_advances_level():
    session = playing_session()
    state = get_run_state(session.world)
    state.score = 120
    state.combo = 2
    completed = capture(session.event_bus, EVENT_LEVEL_COMPLETED)

    session.tick()

    assert completed == [{'level': 1}]
    assert session.level == 2
    assert session.combo == 0
    assert session.score == 120
    assert list(occupied_cells(session.world))


def test_level_start_discards_projectile_in_flight():
    session = playing_session()
    launch(session.world, 400, 500, vy=-12.0)
    session.level_system.start_level(2)
    assert active_projectile(session.world) is None


def test_clearing_final_level_wins_run():
    session = playing_session(level=20)
    state = get_run_state(session.world)
    state.score = 999
    state.max_combo = 5
    won = capture(session.event_bus, EVENT_RUN_WON)

    session.tick()

    assert session.mode == GameMode.WON
    assert won == [{'score': 999, 'max_combo': 5}]
    session.tick()
    assert session.level == 20
    assert won == [{'score': 999, 'max_combo': 5}]


def test_start_level_clamps_index():
    session = playing_session()
    session.level_system.start_level(99)
    assert session.level == 20
    session.level_system.start_level(0)
    assert session.level == 1


def test_restart_from_result_returns_to_menu():
    session = playing_session(level=20)
    get_run_state(session.world).max_combo = 4
    session.tick()
    assert session.mode == GameMode.WON

    assert session.restart_from_result() is True

    assert session.mode == GameMode.MENU
    assert (session.level, session.score, session.lives, session.combo) == (1, 0, 3, 0)
    assert session.max_combo == 4
    session.start_game()
    assert session.max_combo == 4


def test_restart_ignored_while_playing():
    session = playing_session()
    assert session.restart_from_result() is False
    assert session.mode == GameMode.PLAYING


def test_press_follows_mode():
    session = GameSession(rng=random.Random(5))
    session.press()
    assert session.mode == GameMode.PLAYING

    session.press()
    assert active_projectile(session.world) is not None

    clear_grid(session.world)
    session.level_system.start_level(20)
    clear_grid(session.world)
    session.tick()
    assert session.mode == GameMode.WON
    session.press()
    assert session.mode == GameMode.MENU


def _sink_below_failure_line(session):
    stage(session.world, {(9, 0): BubbleColor.RED})
    get_grid(session.world).row_offset = 420.0
    refresh_positions(session.world)


def test_descent_moves_rows_down():
    session = playing_session(level=5)
    stage(session.world, {(0, 0): BubbleColor.RED})
    session.tick()
    grid = get_grid(session.world)
    assert grid.row_offset == level_config(5).row_speed
    entity = grid.entity_at(0, 0)
    assert session.world.component_for_entity(entity, Bubble).y == bubble_y(0, grid.row_offset)


def test_no_descent_on_early_levels():
    session = playing_session(level=1)
    stage(session.world, {(0, 0): BubbleColor.RED})
    session.tick()
    assert get_grid(session.world).row_offset == 0.0


def test_crossing_failure_line_costs_a_life():
    session = playing_session(level=5)
    _sink_below_failure_line(session)
    lost = capture(session.event_bus, EVENT_LIFE_LOST)

    session.tick()

    assert lost == [{'lives': 2}]
    assert session.mode == GameMode.PLAYING
    grid = get_grid(session.world)
    assert grid.row_offset == 0.0
    bubble = session.world.component_for_entity(grid.entity_at(9, 0), Bubble)
    assert bubble.y == bubble_y(9)


def test_crossing_with_last_life_loses_run():
    session = playing_session(level=5)
    state = get_run_state(session.world)
    state.lives = 1
    state.score = 75
    state.max_combo = 3
    _sink_below_failure_line(session)
    lost = capture(session.event_bus, EVENT_RUN_LOST)

    session.tick()

    assert session.mode == GameMode.LOST
    assert session.lives == 0
    assert lost == [{'score': 75, 'max_combo': 3, 'level': 5}]
    assert session.max_combo == 3


def test_popping_bubbles_never_cross_failure_line():
    session = playing_session(level=5)
    _sink_below_failure_line(session)
    mark_popping(session.world, [(9, 0)])
    session.tick()
    assert session.lives == 3
