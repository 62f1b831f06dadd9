from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class Grid:
    """Staggered slot storage for settled bubbles.

    ``slots[row][col]`` holds the bubble entity id or ``None``. Even rows have
    ``cols`` slots, odd rows ``cols - 1``. ``row_offset`` shifts every bubble's
    pixel Y without changing logical addresses.
    """
    rows: int
    cols: int
    row_offset: float = 0.0
    slots: List[List[Optional[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.slots:
            self.slots = [[None] * self.row_width(row) for row in range(self.rows)]

    def row_width(self, row: int) -> int:
        return self.cols if row % 2 == 0 else self.cols - 1

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.row_width(row)

    def entity_at(self, row: int, col: int) -> Optional[int]:
        if not self.in_bounds(row, col):
            return None
        return self.slots[row][col]
