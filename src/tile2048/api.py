from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional, Tuple

from . import score as score_acc
from .board import Board
from .engine import legal_directions, move
from .spawner import RandomTileSpawner
from .status import GameStatus, evaluate


class GameState(NamedTuple):
    board: Board
    score: int
    status: GameStatus


def new_game(spawner: Optional[RandomTileSpawner] = None) -> GameState:
    spawner = spawner or RandomTileSpawner()
    board = Board()
    spawner.spawn(board)
    spawner.spawn(board)
    return GameState(board, 0, GameStatus.PLAYING)


def apply_move(
    board: Board,
    score: int,
    status: GameStatus,
    direction: str,
    spawner: Optional[RandomTileSpawner] = None,
) -> Tuple[Board, int, GameStatus, bool]:
    """
    One input event. Terminal states and moves that change nothing are
    no-ops: the inputs come back unchanged with ``changed=False``.
    """
    if status.is_terminal:
        return board, score, status, False

    new_board, gained = move(board, direction)
    if new_board == board:
        return board, score, status, False

    spawner = spawner or RandomTileSpawner()
    spawner.spawn(new_board)
    return new_board, score_acc.add(score, gained), evaluate(new_board), True


class Game2048Env:
    """
    Stateful wrapper for drivers:
    - reset(seed) -> state
    - step(direction) -> (state, reward, done, info)
    - get_state() / legal_actions() / is_over()
    """

    def __init__(self, seed: Optional[int] = None, spawner: Optional[RandomTileSpawner] = None):
        self.spawner = spawner or RandomTileSpawner(seed=seed)
        self.state = GameState(Board(), 0, GameStatus.PLAYING)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def reset(self, seed: Optional[int] = None) -> List[List[int]]:
        if seed is not None:
            self.spawner.seed(seed)
        self.state = new_game(self.spawner)
        return self.get_state()

    def get_state(self) -> List[List[int]]:
        return self.state.board.rows()

    def is_over(self) -> bool:
        return self.state.status.is_terminal

    def step(self, direction: str) -> Tuple[List[List[int]], int, bool, Dict]:
        board, score, status, changed = apply_move(
            self.state.board, self.state.score, self.state.status, direction, self.spawner
        )
        reward = score - self.state.score
        self.state = GameState(board, score, status)
        info = {"score": score, "status": status.value, "changed": changed}
        return self.get_state(), reward, self.is_over(), info

    def legal_actions(self) -> List[str]:
        if self.is_over():
            return []
        return legal_directions(self.state.board)

    def max_tile(self) -> int:
        return self.state.board.max_tile()


__all__ = [
    "GameState",
    "Game2048Env",
    "apply_move",
    "new_game",
]
