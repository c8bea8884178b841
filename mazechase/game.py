from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from mazechase.config import POWER_DURATION, PURSUER_SPAWNS, START_LEVEL, START_LIVES
from mazechase.entities.player import Player
from mazechase.entities.pursuer import Pursuer
from mazechase.map.level_loader import load_level
from mazechase.map.tilemap import Board, CellType
from mazechase.systems.mode_controller import PowerMode
from mazechase.systems.strategy import PursuerStrategy, RandomWander
from mazechase.utils.directions import Dir


class Phase(Enum):
    PLAYING = 1
    PAUSED = 2
    WON = 3
    LOST = 4


@dataclass(frozen=True)
class PursuerView:
    x: int
    y: int
    dir: Dir
    frightened: bool
    frightened_ticks: int


@dataclass(frozen=True)
class SessionView:
    """Read-only copy of a session, handed to the renderer between ticks."""

    cells: Tuple[Tuple[CellType, ...], ...]
    width: int
    height: int
    player: Tuple[int, int]
    player_dir: Dir
    pursuers: Tuple[PursuerView, ...]
    score: int
    lives: int
    level: int
    phase: Phase
    power_mode_active: bool
    power_ticks: int
    remaining_pickups: int


class Session:
    def __init__(
        self,
        board: Board,
        player: Player,
        pursuers: List[Pursuer],
        strategy: Optional[PursuerStrategy] = None,
        lives: int = START_LIVES,
        level: int = START_LEVEL,
    ) -> None:
        self.board = board
        self.player = player
        self.pursuers = pursuers
        self.strategy = strategy if strategy is not None else RandomWander()

        self.score = 0
        self.lives = lives
        self.level = level
        self.phase = Phase.PLAYING

        self.power = PowerMode()

    @classmethod
    def new(cls, strategy: Optional[PursuerStrategy] = None) -> "Session":
        """Fresh session built from the static maze."""
        board = Board.from_level(load_level())
        pursuers = [Pursuer(spawn, i) for i, spawn in enumerate(PURSUER_SPAWNS)]
        return cls(board, Player(), pursuers, strategy=strategy)

    @property
    def remaining_pickups(self) -> int:
        return self.board.remaining_pickups

    @property
    def power_mode_active(self) -> bool:
        return self.power.active

    @property
    def power_ticks(self) -> int:
        return self.power.ticks_left

    def enter_power_mode(self) -> None:
        self.power.trigger(POWER_DURATION)
        for p in self.pursuers:
            p.frighten(POWER_DURATION)

    def lose_life(self) -> None:
        self.lives -= 1
        if self.lives <= 0:
            # 同一 tick 先赢后被抓，也算输
            self.lives = 0
            self.phase = Phase.LOST
        else:
            self.player.recall()

    def toggle_pause(self) -> None:
        if self.phase is Phase.PLAYING:
            self.phase = Phase.PAUSED
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.PLAYING
        # WON / LOST: only a restart leaves them

    def snapshot(self) -> SessionView:
        return SessionView(
            cells=self.board.rows(),
            width=self.board.width,
            height=self.board.height,
            player=self.player.pos,
            player_dir=self.player.dir,
            pursuers=tuple(
                PursuerView(p.x, p.y, p.dir, p.frightened, p.frightened_ticks) for p in self.pursuers
            ),
            score=self.score,
            lives=self.lives,
            level=self.level,
            phase=self.phase,
            power_mode_active=self.power_mode_active,
            power_ticks=self.power_ticks,
            remaining_pickups=self.remaining_pickups,
        )
