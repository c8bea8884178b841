import pytest

from mazechase.config import HEIGHT, MAZE_ROWS, WIDTH
from mazechase.map.level_loader import load_level
from mazechase.map.tilemap import Board, CellType
from mazechase.utils.directions import Dir, dir_to_delta


def _count(board, cell_type):
    return sum(row.count(cell_type) for row in board.rows())


def test_static_maze_is_full_size():
    level = load_level()
    assert level.width == WIDTH and level.height == HEIGHT
    assert len(level.grid) == HEIGHT
    assert all(len(row) == WIDTH for row in level.grid)


def test_short_rows_are_padded_with_empty_cells():
    level = load_level()
    assert len(MAZE_ROWS[14]) < WIDTH
    assert level.grid[14][WIDTH - 1] == CellType.EMPTY
    assert level.grid[8][WIDTH - 1] == CellType.EMPTY


def test_pickup_count_matches_cells():
    board = Board.from_level(load_level())
    assert board.remaining_pickups == 148
    assert board.remaining_pickups == _count(board, CellType.PICKUP)
    assert _count(board, CellType.POWER_PICKUP) == 2


def test_load_level_rejects_empty_size():
    with pytest.raises(ValueError):
        load_level([], width=0, height=5)


def test_consume_pickup():
    board = Board.from_level(load_level())
    before = board.remaining_pickups

    result = board.consume(2, 1)

    assert result.cell == CellType.PICKUP
    assert result.score_delta == 10
    assert not result.enters_power_mode
    assert board.cell_at(2, 1) == CellType.EMPTY
    assert board.remaining_pickups == before - 1


def test_consume_power_pickup_does_not_touch_pickup_count():
    board = Board.from_level(load_level())
    before = board.remaining_pickups

    result = board.consume(1, 3)

    assert result.cell == CellType.POWER_PICKUP
    assert result.score_delta == 50
    assert result.enters_power_mode
    assert board.cell_at(1, 3) == CellType.EMPTY
    assert board.remaining_pickups == before


def test_consume_twice_only_counts_once():
    board = Board.from_level(load_level())
    before = board.remaining_pickups
    board.consume(2, 1)
    again = board.consume(2, 1)
    assert again.cell == CellType.EMPTY
    assert again.score_delta == 0
    assert board.remaining_pickups == before - 1


@pytest.mark.parametrize("xy", [(0, 0), (12, 11)])
def test_consume_wall_or_empty_is_noop(xy):
    board = Board.from_level(load_level())
    cell = board.cell_at(*xy)
    before = board.remaining_pickups

    result = board.consume(*xy)

    assert result.score_delta == 0
    assert board.cell_at(*xy) == cell
    assert board.remaining_pickups == before


def test_wrapped_step_always_in_bounds():
    board = Board.from_level(load_level())
    for y in range(board.height):
        for x in range(board.width):
            for d in Dir:
                dx, dy = dir_to_delta(d)
                nx, ny = board.wrap(x + dx, y + dy)
                assert board.in_bounds(nx, ny)


def test_wrap_goes_to_opposite_edge():
    board = Board.from_level(load_level())
    assert board.wrap(-1, 5) == (WIDTH - 1, 5)
    assert board.wrap(WIDTH, 5) == (0, 5)
    assert board.wrap(3, -1) == (3, HEIGHT - 1)
    assert board.wrap(3, HEIGHT) == (3, 0)
