from typing import Dict, Iterable, Tuple

import pytest

from mazechase.config import HEIGHT, WIDTH
from mazechase.entities.player import Player
from mazechase.entities.pursuer import Pursuer
from mazechase.game import Session
from mazechase.map.level_loader import load_level
from mazechase.map.tilemap import Board
from mazechase.systems.strategy import PursuerStrategy
from mazechase.utils.directions import Dir


FAR_PICKUP = (WIDTH - 1, HEIGHT - 1)


class KeepFacing(PursuerStrategy):
    """Never turns. A pursuer facing a wall stays where it is."""

    def decide_next_facing(self, pursuer, board):
        return pursuer.dir

    def on_blocked(self, pursuer, board):
        return pursuer.dir


def maze_rows(marks: Dict[Tuple[int, int], str], far_pickup: bool = True):
    """Full-size open maze with the given cells marked (W, D or P)."""
    cells = [[" "] * WIDTH for _ in range(HEIGHT)]
    if far_pickup:
        x, y = FAR_PICKUP
        cells[y][x] = "D"
    for (x, y), ch in marks.items():
        cells[y][x] = ch
    return ["".join(row) for row in cells]


def make_session(
    marks: Dict[Tuple[int, int], str] = None,
    player: Tuple[int, int] = (1, 1),
    player_dir: Dir = Dir.RIGHT,
    pursuers: Iterable[Tuple[Tuple[int, int], Dir]] = (),
    lives: int = 3,
    far_pickup: bool = True,
    strategy: PursuerStrategy = None,
) -> Session:
    board = Board.from_level(load_level(maze_rows(marks or {}, far_pickup)))
    p = Player()
    p.x, p.y = player
    p.dir = player_dir
    roster = [Pursuer(pos, i, direction=d) for i, (pos, d) in enumerate(pursuers)]
    return Session(board, p, roster, strategy=strategy or KeepFacing(), lives=lives)


@pytest.fixture
def keep_facing():
    return KeepFacing()


@pytest.fixture
def fresh_session(keep_facing):
    return Session.new(strategy=keep_facing)
