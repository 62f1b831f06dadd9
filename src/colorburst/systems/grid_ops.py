from __future__ import annotations

import math
import random
from collections import deque
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from esper import World

from colorburst.components.bubble import Bubble
from colorburst.components.bubble_color import BubbleColor
from colorburst.components.grid import Grid
from colorburst.components.grid_cell import GridCell
from colorburst.components.popping import Popping
from colorburst.constants import (
    BUBBLE_RADIUS,
    BUBBLE_SPACING,
    ROW_HEIGHT_FACTOR,
    SEED_FILL_CHANCE,
    SEED_ROWS,
)

Position = Tuple[int, int]
NeighborFn = Callable[[int, int], List[Position]]


# ----------------------------------------------------------------------
# Geometry
# ----------------------------------------------------------------------

def row_x_offset(row: int) -> float:
    return BUBBLE_SPACING / 2 if row % 2 else 0.0


def bubble_x(row: int, col: int) -> float:
    return row_x_offset(row) + col * BUBBLE_SPACING + BUBBLE_SPACING


def bubble_y(row: int, row_offset: float = 0.0) -> float:
    return row * BUBBLE_SPACING * ROW_HEIGHT_FACTOR + BUBBLE_SPACING + row_offset


def row_width(row: int, cols: int) -> int:
    return cols if row % 2 == 0 else cols - 1


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def snap_to_cell(x: float, y: float, rows: int, cols: int, row_offset: float = 0.0) -> Position:
    """Nearest grid cell for a pixel position, clamped to the grid bounds."""
    row = _round_half_up((y - BUBBLE_SPACING - row_offset) / (BUBBLE_SPACING * ROW_HEIGHT_FACTOR))
    row = max(0, min(rows - 1, row))
    col = _round_half_up((x - row_x_offset(row) - BUBBLE_SPACING) / BUBBLE_SPACING)
    col = max(0, min(row_width(row, cols) - 1, col))
    return row, col


# ----------------------------------------------------------------------
# Adjacency and traversal
# ----------------------------------------------------------------------

def neighbors(row: int, col: int, rows: int, cols: int) -> List[Position]:
    """In-bounds hex neighbors of a cell.

    Even rows reach diagonally to ``col - 1`` and ``col`` in the rows above and
    below; odd rows reach ``col`` and ``col + 1``.
    """
    diagonal = col - 1 if row % 2 == 0 else col + 1
    candidates = [
        (row - 1, col),
        (row - 1, diagonal),
        (row + 1, col),
        (row + 1, diagonal),
        (row, col - 1),
        (row, col + 1),
    ]
    return [
        (r, c) for r, c in candidates
        if 0 <= r < rows and 0 <= c < row_width(r, cols)
    ]


def breadth_first(
    seeds: Iterable[Position],
    admit: Callable[[Position], bool],
    neighbor_fn: NeighborFn,
) -> List[Position]:
    """Visit every admitted cell reachable from the seeds, each at most once.

    Returns cells in visit order. ``admit`` must not depend on traversal state.
    """
    visited: set[Position] = set()
    queue: deque[Position] = deque()
    for seed in seeds:
        if seed in visited:
            continue
        visited.add(seed)
        if admit(seed):
            queue.append(seed)
    order: List[Position] = []
    while queue:
        pos = queue.popleft()
        order.append(pos)
        for nxt in neighbor_fn(*pos):
            if nxt in visited:
                continue
            visited.add(nxt)
            if admit(nxt):
                queue.append(nxt)
    return order


# ----------------------------------------------------------------------
# World access
# ----------------------------------------------------------------------

def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Grid component not found")


def grid_neighbor_fn(grid: Grid) -> NeighborFn:
    return lambda row, col: neighbors(row, col, grid.rows, grid.cols)


def occupied_cells(world: World) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(row, col, entity)`` for every filled slot in row-major order."""
    grid = get_grid(world)
    for row, slots in enumerate(grid.slots):
        for col, entity in enumerate(slots):
            if entity is not None:
                yield row, col, entity


def is_popping(world: World, entity: int) -> bool:
    return world.has_component(entity, Popping)


def active_color_map(world: World) -> Dict[Position, BubbleColor]:
    """Colors of every settled bubble that is not being removed."""
    mapping: Dict[Position, BubbleColor] = {}
    for row, col, entity in occupied_cells(world):
        if is_popping(world, entity):
            continue
        try:
            bubble = world.component_for_entity(entity, Bubble)
        except KeyError:
            continue
        mapping[(row, col)] = bubble.color
    return mapping


def grid_is_empty(world: World) -> bool:
    return next(occupied_cells(world), None) is None


def place_bubble(world: World, row: int, col: int, color: BubbleColor) -> int:
    """Write a bubble into a cell, replacing any previous occupant."""
    grid = get_grid(world)
    if not grid.in_bounds(row, col):
        raise ValueError(f"cell ({row}, {col}) is outside the grid")
    previous = grid.slots[row][col]
    if previous is not None:
        world.delete_entity(previous, immediate=True)
    entity = world.create_entity(
        GridCell(row=row, col=col),
        Bubble(
            color=color,
            x=bubble_x(row, col),
            y=bubble_y(row, grid.row_offset),
            radius=BUBBLE_RADIUS,
        ),
    )
    grid.slots[row][col] = entity
    return entity


def remove_bubble(world: World, row: int, col: int) -> bool:
    grid = get_grid(world)
    entity = grid.entity_at(row, col)
    if entity is None:
        return False
    grid.slots[row][col] = None
    world.delete_entity(entity, immediate=True)
    return True


def mark_popping(world: World, positions: Iterable[Position]) -> List[Position]:
    """Start (or restart) the removal animation for each occupied position."""
    grid = get_grid(world)
    marked: List[Position] = []
    for row, col in positions:
        entity = grid.entity_at(row, col)
        if entity is None:
            continue
        if world.has_component(entity, Popping):
            world.component_for_entity(entity, Popping).progress = 0.0
        else:
            world.add_component(entity, Popping())
        marked.append((row, col))
    return marked


def refresh_positions(world: World) -> None:
    grid = get_grid(world)
    for row, col, entity in occupied_cells(world):
        bubble = world.component_for_entity(entity, Bubble)
        bubble.x = bubble_x(row, col)
        bubble.y = bubble_y(row, grid.row_offset)


def clear_grid(world: World) -> None:
    grid = get_grid(world)
    for row, col, entity in list(occupied_cells(world)):
        grid.slots[row][col] = None
        world.delete_entity(entity, immediate=True)


def seed_grid(
    world: World,
    draw: Callable[[], BubbleColor],
    rng: random.Random,
    *,
    rows: int = SEED_ROWS,
    fill_chance: float = SEED_FILL_CHANCE,
) -> List[Position]:
    """Replace the grid contents with a fresh random top section."""
    grid = get_grid(world)
    clear_grid(world)
    grid.row_offset = 0.0
    placed: List[Position] = []
    for row in range(min(rows, grid.rows)):
        for col in range(grid.row_width(row)):
            if rng.random() < fill_chance:
                place_bubble(world, row, col, draw())
                placed.append((row, col))
    return placed


# ----------------------------------------------------------------------
# Queries used by matching and stability
# ----------------------------------------------------------------------

def find_color_group(world: World, row: int, col: int) -> List[Position]:
    """Connected same-color group containing the cell, wildcards included.

    Special-colored seeds, empty cells and popping cells yield no group.
    """
    grid = get_grid(world)
    colors = active_color_map(world)
    seed_color = colors.get((row, col))
    if seed_color is None or seed_color.is_special:
        return []

    def admit(pos: Position) -> bool:
        color = colors.get(pos)
        if color is None:
            return False
        return color == seed_color or color.is_wildcard or seed_color.is_wildcard

    return breadth_first([(row, col)], admit, grid_neighbor_fn(grid))


def find_area(world: World, row: int, col: int, radius: int) -> List[Position]:
    """Occupied cells within Euclidean (row, col) distance ``radius``."""
    grid = get_grid(world)
    found: List[Position] = []
    for r in range(max(0, row - radius), min(grid.rows - 1, row + radius) + 1):
        for c, entity in enumerate(grid.slots[r]):
            if entity is None:
                continue
            if math.hypot(r - row, c - col) <= radius:
                found.append((r, c))
    return found


def find_connected_to_ceiling(world: World) -> List[Position]:
    grid = get_grid(world)
    colors = active_color_map(world)
    seeds = [(0, col) for col in range(grid.row_width(0)) if (0, col) in colors]
    return breadth_first(seeds, lambda pos: pos in colors, grid_neighbor_fn(grid))


def find_unsupported(world: World) -> List[Position]:
    """Non-popping bubbles with no path to row 0, in row-major order."""
    connected = set(find_connected_to_ceiling(world))
    return [pos for pos in sorted(active_color_map(world)) if pos not in connected]
