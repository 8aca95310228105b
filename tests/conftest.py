import random
from typing import List, Sequence

import pytest

from tile2048.board import Board
from tile2048.spawner import RandomTileSpawner


class ScriptedRandom(random.Random):
    """Always picks the first empty cell; ``random()`` replays ``draws``."""

    def __init__(self, draws: Sequence[float] = (0.5,)):
        super().__init__(0)
        self.draws: List[float] = list(draws)

    def choice(self, seq):
        return seq[0]

    def random(self) -> float:
        if len(self.draws) > 1:
            return self.draws.pop(0)
        return self.draws[0]


LOCKED_ROWS = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


def rows_with(first_row: Sequence[int]) -> List[List[int]]:
    return [list(first_row)] + [[0] * 4 for _ in range(3)]


@pytest.fixture
def scripted_spawner() -> RandomTileSpawner:
    # first empty cell, value 2
    return RandomTileSpawner(rng=ScriptedRandom([0.5]))


@pytest.fixture
def locked_board() -> Board:
    return Board.from_rows(LOCKED_ROWS)
