from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mazechase.config import EAT_PURSUER_SCORE
from mazechase.entities.pursuer import Pursuer

if TYPE_CHECKING:
    from mazechase.game import Session


@dataclass
class CollisionResult:
    ate_pursuer: bool = False
    player_caught: bool = False


def resolve_player_pursuer_contact(session: "Session", pursuer: Pursuer) -> CollisionResult:
    if pursuer.pos != session.player.pos:
        return CollisionResult()

    if pursuer.frightened:
        # 吃掉受惊的追兵：加分，回到固定的复活格
        session.score += EAT_PURSUER_SCORE
        pursuer.respawn()
        return CollisionResult(ate_pursuer=True)

    session.lose_life()
    return CollisionResult(player_caught=True)
