from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple


# role -> (foreground, background or None for terminal default, bold)
Color = Tuple[str, Optional[str], bool]


def _default_colors() -> Dict[str, Color]:
    return {
        "player": ("yellow", None, False),
        "pursuer": ("red", None, False),
        "frightened": ("blue", None, False),
        "wall": ("magenta", None, False),
        "pickup": ("white", None, False),
        "power": ("white", None, False),
        "hud": ("magenta", "black", True),
        "banner_won": ("green", None, True),
        "banner_lost": ("red", None, True),
        "bar": ("magenta", "cyan", False),
    }


@dataclass(frozen=True)
class StyleConfig:
    """Glyphs and colors for one frame. Passed to the renderer and the terminal host."""

    player: str = "❤"
    pursuer: str = "⚉"
    pickup: str = "·"
    wall: str = "█"
    power: str = "●"
    empty: str = " "
    colors: Dict[str, Color] = field(default_factory=_default_colors)
    use_color: bool = True

    @classmethod
    def default(cls) -> "StyleConfig":
        return cls()

    @classmethod
    def ascii(cls) -> "StyleConfig":
        return cls(player="C", pursuer="M", pickup=".", wall="#", power="o")

    def without_color(self) -> "StyleConfig":
        return replace(self, use_color=False)
