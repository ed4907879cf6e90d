from __future__ import annotations
import random

from eightpuzzle.domains.board import Board, State, GOAL_GRID
from eightpuzzle.domains.moves import neighbors

GOAL: State = tuple(v for row in GOAL_GRID for v in row)


def goal_board() -> Board:
    return Board(GOAL_GRID)


def is_solvable(board: Board) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in board.to_state() if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


def scramble(depth: int, seed: int) -> Board:
    """Scramble the goal by 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    b = goal_board()
    prev = None
    for _ in range(depth):
        cand = neighbors(b)
        if prev is not None and len(cand) > 1:
            cand = [n for n in cand if n != prev]
        prev, b = b, rng.choice(cand)
    return b


def make_unsolvable_variant(board: Board) -> Board:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(board.to_state())
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return Board.from_state(lst)
