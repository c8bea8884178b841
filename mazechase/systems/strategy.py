from __future__ import annotations

import random
from typing import Optional

from mazechase.config import PURSUER_TURN_CHANCE
from mazechase.entities.pursuer import Pursuer
from mazechase.map.tilemap import Board
from mazechase.utils.directions import Dir


_ALL_DIRS = list(Dir)


class PursuerStrategy:
    """Decides pursuer facing. Swap in a deterministic one for tests."""

    def decide_next_facing(self, pursuer: Pursuer, board: Board) -> Dir:
        """Called once per tick before the pursuer moves."""
        raise NotImplementedError("每个策略必须实现这个方法")

    def on_blocked(self, pursuer: Pursuer, board: Board) -> Dir:
        """Called after the pursuer walked into a wall."""
        raise NotImplementedError("每个策略必须实现这个方法")


class RandomWander(PursuerStrategy):
    # 没有寻路，也不追玩家：随机游走 + 撞墙换向
    def __init__(self, rng: Optional[random.Random] = None, turn_chance: float = PURSUER_TURN_CHANCE) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.turn_chance = turn_chance

    def decide_next_facing(self, pursuer: Pursuer, board: Board) -> Dir:
        if self.rng.random() < self.turn_chance:
            return self.rng.choice(_ALL_DIRS)
        return pursuer.dir

    def on_blocked(self, pursuer: Pursuer, board: Board) -> Dir:
        return self.rng.choice(_ALL_DIRS)
