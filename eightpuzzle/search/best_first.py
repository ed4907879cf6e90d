from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from time import perf_counter
from typing import Dict, List, Set
import heapq
import itertools

from eightpuzzle.domains.board import Board
from eightpuzzle.domains.moves import candidates
from eightpuzzle.heuristics.selector import Heuristic, evaluator

TIE_BREAKS = ("fifo", "lifo")


class SearchStatus(Enum):
    IDLE = "idle"
    EXPANDING = "expanding"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    TIMEOUT = "timeout"


@dataclass(order=True)
class Node:
    score: int
    tie: int
    board: Board = field(compare=False)


class BestFirstSolver:
    """Greedy best-first search over 8-puzzle boards.

    The frontier is ranked by the heuristic value of a board alone (no path
    cost), so this finds *a* solution, not necessarily a shortest one.
    Equal scores pop in insertion order ("fifo") or reverse ("lifo").
    """

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic | str = Heuristic.MANHATTAN,
        tie_break: str = "fifo",
        timeout_sec: float | None = None,
        verbose: bool = False,
    ):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
        self.board = board.copy()
        self.heuristic = Heuristic(heuristic)
        self.hfun = evaluator(self.heuristic)
        self.tie_break = tie_break
        self.timeout_sec = timeout_sec
        self.verbose = verbose
        self.status = SearchStatus.IDLE
        self.nodes_visited = 0

    def reset_nodes_visited(self) -> None:
        self.nodes_visited = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    def _result(self, t0: float, termination: str, **counters) -> Dict[str, object]:
        if self.verbose:
            if termination == "ok":
                print("Puzzle solved!")
            elif termination == "exhausted":
                print("No solution found.")
            else:
                print(f"Search stopped after {self.timeout_sec}s.")
        return {
            "algorithm": "GBFS",
            "heuristic": self.heuristic.value,
            "tie_break": self.tie_break,
            "solved": termination == "ok",
            **counters,
            "time": perf_counter() - t0,
            "termination": termination,
        }

    def solve(self) -> Dict[str, object]:
        t0 = perf_counter()
        counter = itertools.count()
        sign = 1 if self.tie_break == "fifo" else -1

        frontier: List[Node] = []
        visited: Set[Board] = set()

        def push(score: int, board: Board):
            heapq.heappush(frontier, Node(score, sign * next(counter), board))

        push(self.hfun(self.board), self.board)
        self.status = SearchStatus.EXPANDING

        expanded = generated = duplicates = 0
        peak_open = 1

        def counters():
            return {"expanded": expanded, "generated": generated, "duplicates": duplicates,
                    "peak_open": peak_open, "peak_closed": len(visited)}

        while frontier:
            if self.timeout_sec is not None and (perf_counter() - t0) > self.timeout_sec:
                self.status = SearchStatus.TIMEOUT
                return self._result(t0, "timeout", **counters())

            peak_open = max(peak_open, len(frontier))
            node = heapq.heappop(frontier)
            current = node.board

            if current.is_goal():
                self.status = SearchStatus.SOLVED
                return self._result(t0, "ok", **counters())

            if current in visited:
                duplicates += 1
                continue

            visited.add(current)
            expanded += 1
            self.nodes_visited += 1

            for _, child in candidates(current):
                # off-grid slides leave the clone unchanged
                if child == current:
                    continue
                generated += 1
                push(self.hfun(child), child)

        self.status = SearchStatus.EXHAUSTED
        return self._result(t0, "exhausted", **counters())


def greedy_best_first(
    start: Board,
    heuristic: Heuristic | str = Heuristic.MANHATTAN,
    tie_break: str = "fifo",
    timeout_sec: float | None = None,
):
    """One-shot search; returns the same result dict as BestFirstSolver.solve()."""
    return BestFirstSolver(start, heuristic, tie_break=tie_break, timeout_sec=timeout_sec).solve()
