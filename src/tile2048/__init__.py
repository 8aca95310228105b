from .board import Board, EMPTY, GRID_SIZE, WIN_VALUE
from .engine import DIRECTIONS, MoveResult, legal_directions, merge_line, move
from .spawner import RandomTileSpawner
from .status import GameStatus, can_move, evaluate, has_won
from .api import GameState, Game2048Env, apply_move, new_game

__all__ = [
    "Board",
    "EMPTY",
    "GRID_SIZE",
    "WIN_VALUE",
    "DIRECTIONS",
    "MoveResult",
    "legal_directions",
    "merge_line",
    "move",
    "RandomTileSpawner",
    "GameStatus",
    "can_move",
    "evaluate",
    "has_won",
    "GameState",
    "Game2048Env",
    "apply_move",
    "new_game",
]
