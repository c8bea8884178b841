import curses

import pytest

from mazechase.game import Phase
from mazechase.systems.controls import (
    CTRL_C,
    Quit,
    Restart,
    SetFacing,
    TogglePause,
    apply_signal,
    map_key,
)
from mazechase.systems.simulation import step
from mazechase.utils.directions import Dir


@pytest.mark.parametrize(
    "key, expected",
    [
        (curses.KEY_UP, SetFacing(Dir.UP)),
        (curses.KEY_DOWN, SetFacing(Dir.DOWN)),
        (curses.KEY_LEFT, SetFacing(Dir.LEFT)),
        (curses.KEY_RIGHT, SetFacing(Dir.RIGHT)),
        (ord("k"), SetFacing(Dir.UP)),
        (ord("j"), SetFacing(Dir.DOWN)),
        (ord("h"), SetFacing(Dir.LEFT)),
        (ord("l"), SetFacing(Dir.RIGHT)),
        (ord("p"), TogglePause()),
        (ord("r"), Restart()),
        (ord("q"), Quit()),
        (CTRL_C, Quit()),
        ("p", TogglePause()),
    ],
)
def test_map_key(key, expected):
    assert map_key(key) == expected


@pytest.mark.parametrize("key", [ord("x"), ord("Q"), 0, -1, "", "up"])
def test_unknown_keys_are_ignored(key):
    assert map_key(key) is None


def test_set_facing_changes_direction_only(fresh_session):
    same = apply_signal(fresh_session, SetFacing(Dir.DOWN))
    assert same is fresh_session
    assert fresh_session.player.dir == Dir.DOWN
    assert fresh_session.player.pos == (1, 1)


def test_pause_toggles_and_freezes(fresh_session):
    apply_signal(fresh_session, TogglePause())
    assert fresh_session.phase is Phase.PAUSED

    step(fresh_session)
    assert fresh_session.player.pos == (1, 1)

    apply_signal(fresh_session, TogglePause())
    assert fresh_session.phase is Phase.PLAYING

    step(fresh_session)
    assert fresh_session.player.pos == (2, 1)


@pytest.mark.parametrize("phase", [Phase.WON, Phase.LOST])
def test_pause_does_not_leave_terminal_phases(fresh_session, phase):
    fresh_session.phase = phase
    apply_signal(fresh_session, TogglePause())
    assert fresh_session.phase is phase


@pytest.mark.parametrize("phase", list(Phase))
def test_restart_builds_a_fresh_session(fresh_session, phase):
    for _ in range(3):
        step(fresh_session)
    fresh_session.phase = phase

    new = apply_signal(fresh_session, Restart())

    assert new is not fresh_session
    assert new.board is not fresh_session.board
    assert new.strategy is fresh_session.strategy
    assert new.phase is Phase.PLAYING
    assert new.score == 0
    assert new.lives == 3
    assert new.level == 1
    assert new.remaining_pickups == 148
    assert new.player.pos == (1, 1)
    assert not new.power_mode_active


def test_quit_leaves_session_untouched(fresh_session):
    assert apply_signal(fresh_session, Quit()) is fresh_session
    assert fresh_session.phase is Phase.PLAYING
