from __future__ import annotations
from typing import List, NamedTuple, Sequence, Tuple

from .board import Board, Cell, EMPTY, GRID_SIZE


# Direction names, in the order up / right / down / left
DIRECTIONS: Tuple[str, str, str, str] = ("up", "right", "down", "left")


class MoveResult(NamedTuple):
    board: Board
    score_gained: int


def _check_direction(direction: str) -> None:
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction!r}")


def line_coords(direction: str, index: int) -> List[Cell]:
    """
    Coordinates of line ``index`` for ``direction``, near edge first.

    left/right walk row ``index``; up/down walk column ``index``.
    """
    _check_direction(direction)
    span = range(GRID_SIZE)
    if direction == "left":
        return [(index, c) for c in span]
    if direction == "right":
        return [(index, c) for c in reversed(span)]
    if direction == "up":
        return [(r, index) for r in span]
    return [(r, index) for r in reversed(span)]


def merge_line(line: Sequence[int]) -> Tuple[List[int], int]:
    """
    Compact one line toward index 0 and merge equal neighbours.

    A tile produced by a merge is never merged again in the same pass.
    Example: [2, 2, 2, 0] -> [4, 2, 0, 0], gain 4
    """
    filtered = [x for x in line if x != EMPTY]
    out: List[int] = []
    gain = 0
    i = 0
    while i < len(filtered):
        if i + 1 < len(filtered) and filtered[i] == filtered[i + 1]:
            merged = filtered[i] * 2
            out.append(merged)
            gain += merged
            i += 2
        else:
            out.append(filtered[i])
            i += 1
    out += [EMPTY] * (len(line) - len(out))
    return out, gain


def move(board: Board, direction: str) -> MoveResult:
    _check_direction(direction)
    cells = board.rows()
    total_gain = 0
    for index in range(GRID_SIZE):
        coords = line_coords(direction, index)
        new_line, gain = merge_line([board.get(r, c) for r, c in coords])
        for (r, c), value in zip(coords, new_line):
            cells[r][c] = value
        total_gain += gain
    return MoveResult(Board(cells), total_gain)


def legal_directions(board: Board) -> List[str]:
    # directions that would change the board
    return [d for d in DIRECTIONS if move(board, d).board != board]
