"""One discrete tick of the game.

Order inside a tick:

1. the player moves along its facing and eats whatever it lands on;
2. the win check runs (it does not stop the rest of the tick);
3. each pursuer, in roster order, decays its fright countdown, may turn,
   moves, and resolves contact with the player;
4. the session-wide power countdown decays.

Nothing happens unless the session is PLAYING.
"""
from __future__ import annotations

from mazechase.entities.pursuer import Pursuer
from mazechase.game import Phase, Session
from mazechase.systems.collision import CollisionResult, resolve_player_pursuer_contact


def step(session: Session) -> Session:
    if session.phase is not Phase.PLAYING:
        return session

    _player_step(session)

    for pursuer in session.pursuers:
        _pursuer_step(session, pursuer)
        if session.lives <= 0:
            # 命已用完，本 tick 剩下的追兵不再结算
            break

    session.power.update()
    return session


def _player_step(session: Session) -> None:
    player = session.player
    if player.try_move(session.board):
        result = session.board.consume(player.x, player.y)
        session.score += result.score_delta
        if result.enters_power_mode:
            session.enter_power_mode()

    if session.remaining_pickups == 0:
        session.phase = Phase.WON


def _pursuer_step(session: Session, pursuer: Pursuer) -> CollisionResult:
    board = session.board
    strategy = session.strategy

    pursuer.decay_fright()
    pursuer.dir = strategy.decide_next_facing(pursuer, board)

    if not pursuer.try_move(board):
        pursuer.dir = strategy.on_blocked(pursuer, board)

    return resolve_player_pursuer_contact(session, pursuer)
