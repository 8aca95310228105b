from __future__ import annotations
from enum import Enum

from .board import Board, EMPTY, GRID_SIZE, WIN_VALUE


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


def has_won(board: Board) -> bool:
    return any(WIN_VALUE in row for row in board)


def can_move(board: Board) -> bool:
    # any empty cell
    if not board.is_full():
        return True
    # any adjacent pair that could merge
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            v = board.get(r, c)
            if v == EMPTY:
                continue
            if r + 1 < GRID_SIZE and board.get(r + 1, c) == v:
                return True
            if c + 1 < GRID_SIZE and board.get(r, c + 1) == v:
                return True
    return False


def evaluate(board: Board) -> GameStatus:
    """Won takes precedence over lost; the board alone decides."""
    if has_won(board):
        return GameStatus.WON
    if not can_move(board):
        return GameStatus.LOST
    return GameStatus.PLAYING
