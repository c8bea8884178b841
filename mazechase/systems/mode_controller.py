from __future__ import annotations

from mazechase.config import POWER_DURATION


class PowerMode:
    """Session-wide power-mode countdown, in ticks."""

    def __init__(self) -> None:
        self._ticks_left = 0

    @property
    def active(self) -> bool:
        return self._ticks_left > 0

    @property
    def ticks_left(self) -> int:
        return self._ticks_left

    def trigger(self, ticks: int = POWER_DURATION) -> None:
        self._ticks_left = ticks

    def update(self) -> bool:
        if self._ticks_left > 0:
            self._ticks_left -= 1
        return self.active
