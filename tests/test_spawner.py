import random

from tile2048.board import Board
from tile2048.spawner import RandomTileSpawner

from conftest import LOCKED_ROWS, ScriptedRandom


def one_hole_board() -> Board:
    rows = [row[:] for row in LOCKED_ROWS]
    rows[2][1] = 0
    return Board.from_rows(rows)


def test_scenario_f_one_empty_cell_then_full():
    board = one_hole_board()
    spawner = RandomTileSpawner(seed=3)

    assert spawner.spawn(board) is True
    assert board.get(2, 1) in (2, 4)
    assert spawner.last_position == (2, 1)

    before = board.rows()
    assert spawner.spawn(board) is False
    assert board.rows() == before
    assert spawner.last_position is None


def test_exactly_one_cell_changes():
    board = Board.from_rows([[2, 0, 0, 0], [0] * 4, [0] * 4, [0, 0, 0, 4]])
    before = board.rows()
    RandomTileSpawner(seed=0).spawn(board)
    after = board.rows()
    changed = [
        (r, c) for r in range(4) for c in range(4) if before[r][c] != after[r][c]
    ]
    assert len(changed) == 1
    r, c = changed[0]
    assert before[r][c] == 0
    assert after[r][c] in (2, 4)


def test_scripted_rng_controls_value():
    board = Board()
    RandomTileSpawner(rng=ScriptedRandom([0.05])).spawn(board)
    assert board.get(0, 0) == 4

    board = Board()
    RandomTileSpawner(rng=ScriptedRandom([0.1])).spawn(board)
    assert board.get(0, 0) == 2


def test_same_seed_same_spawns():
    a, b = Board(), Board()
    sa, sb = RandomTileSpawner(seed=11), RandomTileSpawner(seed=11)
    for _ in range(6):
        sa.spawn(a)
        sb.spawn(b)
    assert a == b


def test_injected_rng_is_used():
    rng = random.Random(5)
    spawner = RandomTileSpawner(rng=rng)
    assert spawner.rng is rng


def test_four_is_rare():
    spawner = RandomTileSpawner(seed=1234)
    fours = 0
    for _ in range(2000):
        board = Board()
        spawner.spawn(board)
        fours += board.max_tile() == 4
    assert 100 < fours < 300


def test_empty_cell_is_picked_uniformly():
    rows = [row[:] for row in LOCKED_ROWS]
    holes = [(0, 0), (1, 2), (2, 3), (3, 1)]
    for r, c in holes:
        rows[r][c] = 0
    template = Board.from_rows(rows)

    spawner = RandomTileSpawner(seed=2024)
    counts = {cell: 0 for cell in holes}
    for _ in range(4000):
        spawner.spawn(template.copy())
        counts[spawner.last_position] += 1

    # expected 1000 per hole
    assert all(850 < n < 1150 for n in counts.values())
