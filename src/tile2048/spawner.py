from __future__ import annotations
import random
from typing import Optional

from .board import Board, Cell


FOUR_PROBABILITY: float = 0.1


class RandomTileSpawner:
    """Drops a 2 (90%) or a 4 (10%) on a uniformly chosen empty cell."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.last_position: Optional[Cell] = None

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def spawn(self, board: Board) -> bool:
        empties = board.empty_cells()
        if not empties:
            self.last_position = None
            return False
        r, c = self.rng.choice(empties)
        board.place(r, c, 4 if self.rng.random() < FOUR_PROBABILITY else 2)
        self.last_position = (r, c)
        return True
