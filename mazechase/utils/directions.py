from __future__ import annotations

from enum import Enum
from typing import Tuple


class Dir(Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


# 方向 -> (dx, dy)，y 轴向下
_DIR_TO_DXY = {
    Dir.UP: (0, -1),
    Dir.DOWN: (0, 1),
    Dir.LEFT: (-1, 0),
    Dir.RIGHT: (1, 0),
}


def dir_to_delta(d: Dir) -> Tuple[int, int]:
    return _DIR_TO_DXY[d]
