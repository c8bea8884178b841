from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from mazechase.game import Phase, PursuerView, SessionView
from mazechase.map.tilemap import CellType
from mazechase.rendering.style import StyleConfig


@dataclass(frozen=True)
class Span:
    text: str
    role: str


@dataclass
class Frame:
    lines: List[List[Span]]

    def text(self) -> str:
        return "\n".join("".join(s.text for s in line) for line in self.lines)

    @property
    def width(self) -> int:
        return max((sum(len(s.text) for s in line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


_CELL_ROLE = {
    CellType.WALL: "wall",
    CellType.PICKUP: "pickup",
    CellType.POWER_PICKUP: "power",
    CellType.EMPTY: "empty",
}

CONTROLS_HELP = "Controls: arrow keys to move, 'p' to pause, 'q' to quit, 'r' to restart"

# 每个阶段都必须有一条状态栏
STATUS_LINES: Dict[Phase, Tuple[str, str]] = {
    Phase.PLAYING: (CONTROLS_HELP, "bar"),
    Phase.PAUSED: ("Game Paused. Press 'p' to continue.", "bar"),
    Phase.WON: ("YOU WIN! Press 'r' to play again or 'q' to quit.", "banner_won"),
    Phase.LOST: ("GAME OVER! Press 'r' to play again or 'q' to quit.", "banner_lost"),
}


class Renderer:
    def __init__(self, style: Optional[StyleConfig] = None) -> None:
        self.style = style if style is not None else StyleConfig.default()
        self._cell_glyph = {
            CellType.WALL: self.style.wall,
            CellType.PICKUP: self.style.pickup,
            CellType.POWER_PICKUP: self.style.power,
            CellType.EMPTY: self.style.empty,
        }

    def render(self, view: SessionView) -> Frame:
        lines = [self._board_line(view, y) for y in range(view.height)]
        lines.append([])
        lines.append([Span(f"Score: {view.score}  Lives: {view.lives}  Level: {view.level}", "hud")])
        lines.append([])
        text, role = STATUS_LINES[view.phase]
        lines.append([Span(text, role)])
        return Frame(lines)

    def _board_line(self, view: SessionView, y: int) -> List[Span]:
        # 同一行里只查一次：x -> 该格第一个追兵
        pursuers_here: Dict[int, PursuerView] = {}
        for p in view.pursuers:
            if p.y == y and p.x not in pursuers_here:
                pursuers_here[p.x] = p

        spans: List[Span] = []
        for x in range(view.width):
            if (x, y) == view.player:
                glyph, role = self.style.player, "player"
            elif x in pursuers_here:
                glyph = self.style.pursuer
                role = "frightened" if pursuers_here[x].frightened else "pursuer"
            else:
                cell = view.cells[y][x]
                glyph, role = self._cell_glyph[cell], _CELL_ROLE[cell]
            _append(spans, glyph, role)
        return spans


def _append(spans: List[Span], text: str, role: str) -> None:
    # 相邻同色合并，减少终端绘制次数
    if spans and spans[-1].role == role:
        spans[-1] = Span(spans[-1].text + text, role)
    else:
        spans.append(Span(text, role))
