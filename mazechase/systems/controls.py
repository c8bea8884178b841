from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import Dict, Optional, Union

from mazechase.game import Session
from mazechase.utils.directions import Dir


@dataclass(frozen=True)
class SetFacing:
    direction: Dir


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Signal = Union[SetFacing, TogglePause, Restart, Quit]

CTRL_C = 3

_KEY_TO_SIGNAL: Dict[int, Signal] = {
    curses.KEY_UP: SetFacing(Dir.UP),
    curses.KEY_DOWN: SetFacing(Dir.DOWN),
    curses.KEY_LEFT: SetFacing(Dir.LEFT),
    curses.KEY_RIGHT: SetFacing(Dir.RIGHT),
    ord("k"): SetFacing(Dir.UP),
    ord("j"): SetFacing(Dir.DOWN),
    ord("h"): SetFacing(Dir.LEFT),
    ord("l"): SetFacing(Dir.RIGHT),
    ord("p"): TogglePause(),
    ord("r"): Restart(),
    ord("q"): Quit(),
    CTRL_C: Quit(),
}


def map_key(key: Union[int, str]) -> Optional[Signal]:
    """Translate a curses key code (or a one-character string) into a signal."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return _KEY_TO_SIGNAL.get(key)


def apply_signal(session: Session, signal: Signal) -> Session:
    if isinstance(signal, SetFacing):
        session.player.face(signal.direction)
    elif isinstance(signal, TogglePause):
        session.toggle_pause()
    elif isinstance(signal, Restart):
        # 整个会话作废，按静态迷宫重建
        return Session.new(strategy=session.strategy)
    return session
