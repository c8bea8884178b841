from dataclasses import dataclass
from typing import List, Sequence, Tuple

from mazechase.config import HEIGHT, MAZE_ROWS, WIDTH
from mazechase.map.tilemap import CellType


Grid = List[List[CellType]]
XY = Tuple[int, int]

_CHAR_TO_CELL = {
    "W": CellType.WALL,
    "D": CellType.PICKUP,
    "P": CellType.POWER_PICKUP,
}


@dataclass(frozen=True)
class LevelData:
    grid: Grid
    pickups: int
    width: int
    height: int


def load_level(rows: Sequence[str] = MAZE_ROWS, width: int = WIDTH, height: int = HEIGHT) -> LevelData:
    """Turn the static maze rows into a grid of CellType.

    Rows shorter than ``width`` are padded with empty cells, missing rows are
    empty, and anything beyond ``width`` x ``height`` is ignored.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Level must be at least 1x1")

    grid: Grid = []
    pickups = 0
    for y in range(height):
        line = rows[y] if y < len(rows) else ""
        line = line[:width].ljust(width)
        row = [_CHAR_TO_CELL.get(ch, CellType.EMPTY) for ch in line]
        pickups += row.count(CellType.PICKUP)
        grid.append(row)

    return LevelData(grid=grid, pickups=pickups, width=width, height=height)
