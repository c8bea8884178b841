from __future__ import annotations

import argparse
import curses
import locale
import os
import random
import sys
import traceback
from typing import Dict, List, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from mazechase.config import TICK_MS
from mazechase.game import Session
from mazechase.rendering.renderer import Frame, Renderer
from mazechase.rendering.style import StyleConfig
from mazechase.systems.controls import Quit, apply_signal, map_key
from mazechase.systems.simulation import step
from mazechase.systems.strategy import RandomWander


_CURSES_COLORS = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
}


class StartupError(Exception):
    pass


class TerminalScreen:
    def __init__(self, stdscr, style: StyleConfig) -> None:
        self.stdscr = stdscr
        self.style = style
        self._attrs: Dict[str, int] = {}

        try:
            curses.curs_set(0)
        except curses.error:
            pass  # 有些终端不支持隐藏光标
        stdscr.nodelay(True)
        stdscr.keypad(True)

        if style.use_color and curses.has_colors():
            self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        default_bg = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            default_bg = -1
        except curses.error:
            pass

        for pair_id, (role, (fg, bg, bold)) in enumerate(sorted(self.style.colors.items()), start=1):
            if pair_id >= curses.COLOR_PAIRS:
                break
            bg_id = default_bg if bg is None else _CURSES_COLORS[bg]
            curses.init_pair(pair_id, _CURSES_COLORS[fg], bg_id)
            attr = curses.color_pair(pair_id)
            if bold:
                attr |= curses.A_BOLD
            self._attrs[role] = attr

    def ensure_fits(self, frame: Frame) -> None:
        rows, cols = self.stdscr.getmaxyx()
        if rows < frame.height or cols <= frame.width:
            raise StartupError(
                f"terminal is {cols}x{rows}, need at least {frame.width + 1}x{frame.height}"
            )

    def read_keys(self) -> List[int]:
        keys = []
        while True:
            key = self.stdscr.getch()
            if key == -1:
                return keys
            keys.append(key)

    def draw(self, frame: Frame) -> None:
        self.stdscr.erase()
        for y, line in enumerate(frame.lines):
            x = 0
            for span in line:
                self._addstr(y, x, span.text, self._attrs.get(span.role, curses.A_NORMAL))
                x += len(span.text)
        self.stdscr.refresh()

    def _addstr(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass  # 写到屏幕右下角或窗口被缩小时 curses 会报错，忽略


def run(stdscr, options: argparse.Namespace) -> None:
    style = StyleConfig.ascii() if options.ascii else StyleConfig.default()
    if options.no_color:
        style = style.without_color()

    screen = TerminalScreen(stdscr, style)
    renderer = Renderer(style)
    strategy = RandomWander(random.Random(options.seed))

    session = Session.new(strategy=strategy)
    screen.ensure_fits(renderer.render(session.snapshot()))

    clock = pygame.time.Clock()
    fps = 1000.0 / options.tick_ms

    while True:
        # 输入和 tick 在同一个循环里串行处理
        for key in screen.read_keys():
            signal = map_key(key)
            if signal is None:
                continue
            if isinstance(signal, Quit):
                return
            session = apply_signal(session, signal)

        session = step(session)
        screen.draw(renderer.render(session.snapshot()))
        clock.tick(fps)


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazechase", description="Terminal maze-chase game.")
    parser.add_argument("--tick-ms", type=_positive_int, default=TICK_MS, help="milliseconds per tick")
    parser.add_argument("--seed", type=int, default=None, help="seed for pursuer movement")
    parser.add_argument("--ascii", action="store_true", help="use ASCII glyphs only")
    parser.add_argument("--no-color", action="store_true", help="disable colors")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = parse_args(argv)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass  # 用系统默认编码，--ascii 可避开宽字符

    try:
        curses.wrapper(run, options)
    except KeyboardInterrupt:
        return 0
    except (curses.error, StartupError) as e:
        print(f"[mazechase] failed to start: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
