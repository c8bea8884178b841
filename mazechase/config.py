# Board
WIDTH = 30
HEIGHT = 20

# Timing
TICK_MS = 120  # one simulation step per tick

# Scoring
PICKUP_SCORE = 10
POWER_SCORE = 50
EAT_PURSUER_SCORE = 200

# Game
START_LIVES = 3
START_LEVEL = 1
POWER_DURATION = 20  # ticks

# Actors (x, y)
PLAYER_START = (1, 1)
PURSUER_SPAWNS = [(14, 10), (15, 10), (14, 11), (15, 11)]
RESPAWN_ORIGIN = (14, 10)  # slot i -> (x + i % 2, y + i // 2)

# Pursuers
PURSUER_TURN_CHANCE = 0.2

# Static maze: W wall, D pickup, P power pickup, anything else empty.
# Short rows are padded with empty cells up to WIDTH.
MAZE_ROWS = [
    "WWWWWWWWWWWWWWWWWWWWWWWWWWWWWW",
    "WDDDDDDDDDDDDWWDDDDDDDDDDDDDDW",
    "WDWWWWDWWWWWDWWDWWWWWDWWWWWDWW",
    "WPDWWWDWWWWWDWWDWWWWWDWWWWWDPW",
    "WDWWWWDWWWWWDWWDWWWWWDWWWWWDWW",
    "WDDDDDDDDDDDDDDDDDDDDDDDDDDDDW",
    "WDWWWWDWWDWWWWWWWWDWWDWWWWWDWW",
    "WDWWWWDWWDWWWWWWWWDWWDWWWWWDWW",
    "WDDDDDDWWDDDDWWDDDDWWDDDDDDWW",
    "WWWWWWDWWWWW WWWW WWWWDWWWWWW",
    "     WDWWWWW WWWW WWWWDW     ",
    "     WDWW          WWDW     ",
    "     WDWW WWWWWWWW WWDW     ",
    "WWWWWWDWW W      W WWDWWWWWWW",
    "      D   W      W   D      ",
    "WWWWWWDWW WWWWWWWW WWDWWWWWWW",
    "     WDWW          WWDW     ",
    "     WDWW WWWWWWWW WWDW     ",
    "WWWWWWDWW WWWWWWWW WWDWWWWWWW",
    "WDDDDDDDDDDDDWWDDDDDDDDDDDDWW",
]
