from __future__ import annotations

from typing import Tuple

from mazechase.map.tilemap import Board
from mazechase.utils.directions import Dir, dir_to_delta


class Entity:
    def __init__(self, spawn: Tuple[int, int], direction: Dir) -> None:
        self.x, self.y = spawn
        self.dir: Dir = direction

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_step(self, board: Board) -> Tuple[int, int]:
        """One cell ahead in the current facing, wrapped onto the board."""
        dx, dy = dir_to_delta(self.dir)
        return board.wrap(self.x + dx, self.y + dy)

    def try_move(self, board: Board) -> bool:
        # 先穿越边界，再判断是否撞墙；撞墙则原地不动
        nx, ny = self.move_step(board)
        if board.is_wall(nx, ny):
            return False
        self.x, self.y = nx, ny
        return True
