from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from mazechase.config import PICKUP_SCORE, POWER_SCORE


XY = Tuple[int, int]


class CellType(Enum):
    WALL = 1
    PICKUP = 2
    POWER_PICKUP = 3
    EMPTY = 4


@dataclass(frozen=True)
class ConsumeResult:
    cell: CellType
    score_delta: int
    enters_power_mode: bool = False


class Board:
    """Fixed-size maze grid. Only pickup consumption changes it."""

    def __init__(self, grid: List[List[CellType]]) -> None:
        self.grid = [list(row) for row in grid]

        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.height else 0

        # 唯一的计数来源：剩余普通豆子数
        self._remaining = sum(row.count(CellType.PICKUP) for row in self.grid)

    @classmethod
    def from_level(cls, level) -> "Board":
        return cls(level.grid)

    @property
    def remaining_pickups(self) -> int:
        return self._remaining

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> CellType:
        return self.grid[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.grid[y][x] == CellType.WALL

    def wrap(self, x: int, y: int) -> XY:
        """Toroidal wrap, one axis at a time. Only ever off by one step."""
        if x < 0:
            x = self.width - 1
        elif x >= self.width:
            x = 0
        if y < 0:
            y = self.height - 1
        elif y >= self.height:
            y = 0
        return (x, y)

    def consume(self, x: int, y: int) -> ConsumeResult:
        cell = self.grid[y][x]
        if cell == CellType.PICKUP:
            self.grid[y][x] = CellType.EMPTY
            self._remaining -= 1
            return ConsumeResult(cell, PICKUP_SCORE)
        if cell == CellType.POWER_PICKUP:
            self.grid[y][x] = CellType.EMPTY
            return ConsumeResult(cell, POWER_SCORE, enters_power_mode=True)
        return ConsumeResult(cell, 0)

    def rows(self) -> Tuple[Tuple[CellType, ...], ...]:
        return tuple(tuple(row) for row in self.grid)
