from __future__ import annotations

from typing import Tuple

from mazechase.config import RESPAWN_ORIGIN
from mazechase.entities.base import Entity
from mazechase.utils.directions import Dir


def respawn_slot(index: int) -> Tuple[int, int]:
    ox, oy = RESPAWN_ORIGIN
    return (ox + index % 2, oy + index // 2)


class Pursuer(Entity):
    def __init__(self, spawn: Tuple[int, int], index: int, direction: Dir = Dir.UP) -> None:
        super().__init__(spawn, direction)
        self.index = index
        self.frightened_ticks = 0

    @property
    def frightened(self) -> bool:
        return self.frightened_ticks > 0

    def frighten(self, ticks: int) -> None:
        self.frightened_ticks = ticks

    def calm(self) -> None:
        self.frightened_ticks = 0

    def decay_fright(self) -> None:
        if self.frightened_ticks > 0:
            self.frightened_ticks -= 1

    def respawn(self) -> None:
        """Eaten: back to the slot for this roster index, no longer frightened."""
        self.x, self.y = respawn_slot(self.index)
        self.calm()
