from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple


GRID_SIZE: int = 4
WIN_VALUE: int = 2048
EMPTY: int = 0

Cell = Tuple[int, int]


def is_tile_value(value: int) -> bool:
    # power of two, 2 or more; bool is rejected
    return type(value) is int and value >= 2 and (value & (value - 1)) == 0


def _checked_cells(rows: Sequence[Sequence[int]]) -> List[List[int]]:
    if len(rows) != GRID_SIZE:
        raise ValueError(f"board must have {GRID_SIZE} rows, got {len(rows)}")
    cells: List[List[int]] = []
    for r, row in enumerate(rows):
        if len(row) != GRID_SIZE:
            raise ValueError(f"row {r} must have {GRID_SIZE} cells, got {len(row)}")
        for c, value in enumerate(row):
            if not (type(value) is int and value == EMPTY) and not is_tile_value(value):
                raise ValueError(f"invalid tile {value!r} at ({r}, {c})")
        cells.append(list(row))
    return cells


class Board:
    """
    4x4 grid; 0 marks an empty cell.

    Boards are treated as values: the move engine always builds a new one,
    the spawner is the only writer (via ``place``). The given rows are
    validated and copied, so later changes to them do not leak in.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Sequence[Sequence[int]]] = None):
        if cells is None:
            self._cells = [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]
        else:
            self._cells = _checked_cells(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        return cls(rows)

    def get(self, row: int, col: int) -> int:
        return self._cells[row][col]

    def place(self, row: int, col: int, value: int) -> None:
        if not is_tile_value(value):
            raise ValueError(f"invalid tile {value!r}")
        if self._cells[row][col] != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is occupied")
        self._cells[row][col] = value

    def empty_cells(self) -> List[Cell]:
        return [
            (r, c)
            for r in range(GRID_SIZE)
            for c in range(GRID_SIZE)
            if self._cells[r][c] == EMPTY
        ]

    def is_full(self) -> bool:
        return not any(EMPTY in row for row in self._cells)

    def rows(self) -> List[List[int]]:
        return [row[:] for row in self._cells]

    def copy(self) -> "Board":
        return Board(self.rows())

    def max_tile(self) -> int:
        return max(max(row) for row in self._cells)

    def total(self) -> int:
        return sum(sum(row) for row in self._cells)

    def __iter__(self) -> Iterator[List[int]]:
        return iter(self.rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if self._cells[r][c] != other._cells[r][c]:
                    return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def render(self) -> str:
        width = 7
        sep = "-" * (GRID_SIZE * width + 1)
        lines = [sep]
        for row in self._cells:
            lines.append("|" + "".join(f"{(v or ''):^{width - 1}}|" for v in row))
            lines.append(sep)
        return "\n".join(lines)
