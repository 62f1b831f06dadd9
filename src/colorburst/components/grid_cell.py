from dataclasses import dataclass

@dataclass(slots=True)
class GridCell:
    row: int
    col: int
