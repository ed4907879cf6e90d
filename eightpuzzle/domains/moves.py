from __future__ import annotations
from typing import List, Tuple

from eightpuzzle.domains.board import Board, Direction

# Fixed generation order; only matters for tie-breaking in the frontier.
MOVE_ORDER: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def candidates(board: Board) -> List[Tuple[Direction, Board]]:
    """Clone the board once per direction and slide the blank on each clone.

    Moves that fall off the grid leave their clone equal to the source.
    """
    out: List[Tuple[Direction, Board]] = []
    for d in MOVE_ORDER:
        child = board.copy()
        child.slide(d)
        out.append((d, child))
    return out


def neighbors(board: Board) -> List[Board]:
    """Return the (at most 4) boards one blank slide away, no-op moves dropped."""
    return [child for _, child in candidates(board) if child != board]
