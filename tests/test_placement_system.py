import pytest

from colorburst.components.bubble import Bubble
from colorburst.components.bubble_color import BubbleColor
from colorburst.components.grid_cell import GridCell
from colorburst.events.bus import EVENT_BUBBLE_PLACED, EVENT_PROJECTILE_IMPACT
from colorburst.systems.grid_ops import (
    bubble_x,
    bubble_y,
    get_grid,
    place_bubble,
    remove_bubble,
)
from tests.helpers import capture, playing_session, stage


def test_occupied_cell_is_overwritten():
    session = playing_session()
    stage(session.world, {(2, 3): BubbleColor.GREEN})
    old = get_grid(session.world).entity_at(2, 3)
    placed = capture(session.event_bus, EVENT_BUBBLE_PLACED)

    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=bubble_x(2, 3) + 4, y=bubble_y(2) - 3, color=BubbleColor.BLUE)

    new = get_grid(session.world).entity_at(2, 3)
    assert new != old
    assert not session.world.entity_exists(old)
    assert session.world.component_for_entity(new, Bubble).color is BubbleColor.BLUE
    assert placed == [{'row': 2, 'col': 3, 'color': BubbleColor.BLUE}]


def test_placed_bubble_sits_at_cell_centre():
    session = playing_session()
    grid = get_grid(session.world)
    grid.row_offset = 12.5
    entity = place_bubble(session.world, 3, 2, BubbleColor.RED)
    bubble = session.world.component_for_entity(entity, Bubble)
    cell = session.world.component_for_entity(entity, GridCell)
    assert (cell.row, cell.col) == (3, 2)
    assert bubble.x == bubble_x(3, 2)
    assert bubble.y == bubble_y(3, 12.5)


def test_place_outside_grid_raises():
    session = playing_session()
    with pytest.raises(ValueError):
        place_bubble(session.world, 1, 14, BubbleColor.RED)


def test_remove_bubble_frees_slot():
    session = playing_session()
    entity = place_bubble(session.world, 0, 0, BubbleColor.RED)
    assert remove_bubble(session.world, 0, 0) is True
    assert get_grid(session.world).entity_at(0, 0) is None
    assert not session.world.entity_exists(entity)
    assert remove_bubble(session.world, 0, 0) is False


def test_impact_below_grid_clamps_to_last_row():
    session = playing_session()
    placed = capture(session.event_bus, EVENT_BUBBLE_PLACED)
    session.event_bus.emit(EVENT_PROJECTILE_IMPACT, x=-50, y=2000, color=BubbleColor.RED)
    assert placed[0]['row'] == 9
    assert placed[0]['col'] == 0
