from colorburst.components.bubble import Bubble
from colorburst.components.bubble_color import BubbleColor
from colorburst.components.popping import Popping
from colorburst.events.bus import (
    EVENT_BUBBLES_POPPED,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_MISSED,
    EVENT_PROJECTILE_IMPACT,
)
from colorburst.systems.grid_ops import (
    bubble_x,
    bubble_y,
    find_color_group,
    get_grid,
    mark_popping,
)
from colorburst.utils.game_state import get_run_state
from tests.helpers import capture, launch, playing_session, stage

R, B, G = BubbleColor.RED, BubbleColor.BLUE, BubbleColor.GREEN


def _popping_cells(world):
    grid = get_grid(world)
    cells = []
    for row, slots in enumerate(grid.slots):
        for col, entity in enumerate(slots):
            if entity is not None and world.has_component(entity, Popping):
                cells.append((row, col))
    return cells


def test_uniform_component_returns_every_member():
    session = playing_session()
    chain = {(0, c): R for c in range(6)}
    chain.update({(1, 2): R, (2, 2): R, (0, 7): B, (1, 6): G})
    stage(session.world, chain)
    group = find_color_group(session.world, 0, 0)
    assert sorted(group) == sorted(pos for pos, color in chain.items() if color is R)


def test_wildcard_seed_yields_no_group():
    session = playing_session()
    stage(session.world, {(0, 0): BubbleColor.RAINBOW, (0, 1): R, (0, 2): R})
    assert find_color_group(session.world, 0, 0) == []


def test_special_seed_yields_no_group():
    session = playing_session()
    stage(session.world, {(0, 0): BubbleColor.FREEZE, (0, 1): BubbleColor.FREEZE, (0, 2): BubbleColor.FREEZE})
    assert find_color_group(session.world, 0, 1) == []


def test_wildcard_neighbor_joins_group():
    session = playing_session()
    stage(session.world, {(0, 0): R, (0, 1): BubbleColor.RAINBOW, (0, 2): R, (0, 3): B})
    assert sorted(find_color_group(session.world, 0, 0)) == [(0, 0), (0, 1), (0, 2)]


def test_popping_bubbles_are_excluded_from_groups():
    session = playing_session()
    stage(session.world, {(0, 0): R, (0, 1): R, (0, 2): R})
    mark_popping(session.world, [(0, 1)])
    assert find_color_group(session.world, 0, 0) == [(0, 0)]


def test_triangle_plus_projectile_pops_four():
    session = playing_session()
    stage(session.world, {(0, 0): R, (0, 1): R, (1, 0): R})
    found = capture(session.event_bus, EVENT_MATCH_FOUND)
    # Just short of cell (1, 1), close enough to touch (0, 1).
    launch(session.world, bubble_x(1, 1), bubble_y(1), vy=-5.0, color=R)

    session.tick()

    assert sorted(_popping_cells(session.world)) == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert found and found[0]['size'] == 4
    assert session.score == 40
    assert session.combo == 1
    assert session.max_combo == 1


def test_two_bubbles_is_a_miss_and_resets_combo():
    session = playing_session()
    stage(session.world, {(0, 0): R, (0, 5): B})
    state = get_run_state(session.world)
    state.combo = 3
    state.max_combo = 3
    missed = capture(session.event_bus, EVENT_MATCH_MISSED)

    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=bubble_x(0, 1), y=bubble_y(0), color=R)

    assert missed == [{'row': 0, 'col': 1, 'size': 2}]
    assert session.combo == 0
    assert session.max_combo == 3
    assert session.score == 0
    assert _popping_cells(session.world) == []


def test_match_pops_before_reporting():
    session = playing_session()
    stage(session.world, {(0, 0): G, (0, 1): G})
    order = []
    session.event_bus.subscribe(EVENT_BUBBLES_POPPED, lambda s, **k: order.append(('popped', k['reason'])))
    session.event_bus.subscribe(EVENT_MATCH_FOUND, lambda s, **k: order.append(('found', k['size'])))

    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=bubble_x(0, 2), y=bubble_y(0), color=G)

    assert order == [('popped', 'match'), ('found', 3)]


def test_placed_color_is_written_to_grid():
    session = playing_session()
    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=bubble_x(3, 4), y=bubble_y(3), color=B)
    entity = get_grid(session.world).entity_at(3, 4)
    assert entity is not None
    assert session.world.component_for_entity(entity, Bubble).color is B


def test_rainbow_projectile_settles_as_a_miss():
    session = playing_session()
    stage(session.world, {(0, 0): R, (0, 1): R})
    state = get_run_state(session.world)
    state.combo = 2
    state.max_combo = 2
    missed = capture(session.event_bus, EVENT_MATCH_MISSED)

    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=bubble_x(0, 2), y=bubble_y(0), color=BubbleColor.RAINBOW)

    entity = get_grid(session.world).entity_at(0, 2)
    assert session.world.component_for_entity(entity, Bubble).color is BubbleColor.RAINBOW
    assert missed == [{'row': 0, 'col': 2, 'size': 0}]
    assert session.combo == 0
    assert session.max_combo == 2
    assert session.score == 0
    assert _popping_cells(session.world) == []
