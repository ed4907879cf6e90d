from __future__ import annotations
from enum import StrEnum
from typing import Callable, Dict

from eightpuzzle.domains.board import Board
from eightpuzzle.heuristics.hamming import hamming
from eightpuzzle.heuristics.manhattan import manhattan

HFun = Callable[[Board], int]


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    HAMMING = "hamming"


_EVALUATORS: Dict[Heuristic, HFun] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.HAMMING: hamming,
}


def evaluator(heuristic: Heuristic | str) -> HFun:
    """Map a heuristic choice (enum or its name) to its scoring function."""
    try:
        return _EVALUATORS[Heuristic(heuristic)]
    except ValueError:
        raise ValueError(f"Unknown heuristic: {heuristic!r}") from None
