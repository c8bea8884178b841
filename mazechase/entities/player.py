from __future__ import annotations

from typing import Tuple

from mazechase.config import PLAYER_START
from mazechase.entities.base import Entity
from mazechase.utils.directions import Dir


class Player(Entity):
    def __init__(self, spawn: Tuple[int, int] = PLAYER_START, direction: Dir = Dir.RIGHT) -> None:
        super().__init__(spawn, direction)
        self._spawn = spawn

    def face(self, direction: Dir) -> None:
        # 只改朝向，位置只由 tick 推进
        self.dir = direction

    def recall(self) -> None:
        """Back to the start cell. Facing is kept."""
        self.x, self.y = self._spawn
