from __future__ import annotations
from enum import StrEnum
from typing import Dict, List, Sequence, Tuple

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
Pos = Tuple[int, int]

SIZE = 3
GOAL_GRID: Tuple[Tuple[int, ...], ...] = ((1, 2, 3), (4, 5, 6), (7, 8, 0))

_goal_pos: Dict[int, Pos] = {t: ((t - 1) // SIZE, (t - 1) % SIZE) for t in range(1, SIZE * SIZE)}


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# (row, col) offset of the blank for each slide
_DELTAS: Dict[Direction, Pos] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


# ---------------- Errors ----------------

class BoardError(ValueError):
    """Base class for malformed boards."""


class InvalidShapeError(BoardError):
    pass


class MissingTileError(BoardError):
    def __init__(self, tile: int):
        super().__init__(f"Tile {tile} is not on the board")
        self.tile = tile


class MissingBlankError(MissingTileError):
    def __init__(self):
        super().__init__(0)


# ---------------- Board ----------------

class Board:
    """3x3 sliding-tile board (0 is the blank).

    Equality and hashing depend only on the nine cell values, so boards can
    be used as set/dict keys. The slide_* methods mutate in place: clone with
    copy() first and never mutate a board that already sits in a set or heap.
    """

    __slots__ = ("_cells",)

    def __init__(self, grid: Sequence[Sequence[int]]):
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise InvalidShapeError(f"Expected a {SIZE}x{SIZE} grid")
        self._cells: List[List[int]] = [[int(v) for v in row] for row in grid]

    @classmethod
    def from_state(cls, state: Sequence[int]) -> Board:
        if len(state) != SIZE * SIZE:
            raise InvalidShapeError(f"Expected {SIZE * SIZE} tiles, got {len(state)}")
        return cls([state[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)])

    @property
    def grid(self) -> List[List[int]]:
        return [row[:] for row in self._cells]

    def to_state(self) -> State:
        return tuple(v for row in self._cells for v in row)

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone._cells = [row[:] for row in self._cells]
        return clone

    # ---------- Lookups ----------
    def find_tile(self, tile: int) -> Pos:
        for r, row in enumerate(self._cells):
            for c, v in enumerate(row):
                if v == tile:
                    return r, c
        if tile == 0:
            raise MissingBlankError()
        raise MissingTileError(tile)

    def find_blank(self) -> Pos:
        return self.find_tile(0)

    # ---------- Heuristics ----------
    def _positions(self) -> Dict[int, Pos]:
        pos: Dict[int, Pos] = {}
        for r, row in enumerate(self._cells):
            for c, v in enumerate(row):
                pos.setdefault(v, (r, c))
        return pos

    def manhattan_score(self) -> int:
        """Sum of city-block distances of tiles 1..8 to their goal cells."""
        pos = self._positions()
        dist = 0
        for tile, (gr, gc) in _goal_pos.items():
            if tile not in pos:
                raise MissingTileError(tile)
            r, c = pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def hamming_score(self) -> int:
        """Number of tiles 1..8 not on their goal cell."""
        pos = self._positions()
        misplaced = 0
        for tile, goal in _goal_pos.items():
            if tile not in pos:
                raise MissingTileError(tile)
            if pos[tile] != goal:
                misplaced += 1
        return misplaced

    def is_goal(self) -> bool:
        return all(tuple(row) == goal for row, goal in zip(self._cells, GOAL_GRID))

    # ---------- Moves (blank slides, in place) ----------
    def _swap_blank(self, dr: int, dc: int) -> bool:
        r, c = self.find_blank()
        r2, c2 = r + dr, c + dc
        if not (0 <= r2 < SIZE and 0 <= c2 < SIZE):
            return False
        cells = self._cells
        cells[r][c], cells[r2][c2] = cells[r2][c2], cells[r][c]
        return True

    def slide_up(self) -> bool:
        return self.slide(Direction.UP)

    def slide_down(self) -> bool:
        return self.slide(Direction.DOWN)

    def slide_left(self) -> bool:
        return self.slide(Direction.LEFT)

    def slide_right(self) -> bool:
        return self.slide(Direction.RIGHT)

    def slide(self, direction: Direction | str) -> bool:
        dr, dc = _DELTAS[Direction(direction)]
        return self._swap_blank(dr, dc)

    # ---------- Identity ----------
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self.to_state())

    def __repr__(self) -> str:
        return f"Board({self._cells!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self._cells)

    def print_board(self) -> None:
        print(self)
