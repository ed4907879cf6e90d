"""Greedy best-first search: termination, counters and tie-breaking."""

from __future__ import annotations

import pytest

from eightpuzzle.domains.board import Board, GOAL_GRID
from eightpuzzle.domains.moves import neighbors
from eightpuzzle.domains.puzzle8 import scramble
from eightpuzzle.heuristics.selector import Heuristic
from eightpuzzle.search.best_first import (
    BestFirstSolver,
    Node,
    SearchStatus,
    greedy_best_first,
)

ONE_MOVE = [[1, 2, 3], [4, 5, 0], [7, 8, 6]]
SWAPPED = [[2, 1, 3], [4, 5, 6], [7, 8, 0]]

# 9!/2 boards share the parity class of SWAPPED
HALF_STATE_SPACE = 181440


# -- termination --------------------------------------------------------------


@pytest.mark.parametrize("heuristic", list(Heuristic))
def test_goal_board_solves_immediately(heuristic) -> None:
    solver = BestFirstSolver(Board(GOAL_GRID), heuristic)
    assert solver.status is SearchStatus.IDLE
    res = solver.solve()
    assert res["solved"] is True
    assert res["termination"] == "ok"
    assert solver.status is SearchStatus.SOLVED
    assert solver.nodes_visited == 0


@pytest.mark.parametrize("heuristic", list(Heuristic))
def test_one_move_from_goal(heuristic) -> None:
    solver = BestFirstSolver(Board(ONE_MOVE), heuristic)
    res = solver.solve()
    assert solver.solved
    assert solver.nodes_visited == 1
    # children of the start board: up, down (goal), left
    assert res["generated"] == 3


@pytest.mark.parametrize("heuristic", ["manhattan", "hamming"])
@pytest.mark.parametrize("depth, seed", [(6, 1), (10, 2), (14, 3), (20, 4), (30, 5)])
def test_scrambled_boards_are_solved(heuristic: str, depth: int, seed: int) -> None:
    res = greedy_best_first(scramble(depth, seed), heuristic)
    assert res["termination"] == "ok"
    assert res["heuristic"] == heuristic
    assert res["expanded"] >= 1


def test_unsolvable_board_exhausts(capsys) -> None:
    solver = BestFirstSolver(Board(SWAPPED), Heuristic.MANHATTAN, verbose=True)
    res = solver.solve()
    assert res["solved"] is False
    assert res["termination"] == "exhausted"
    assert solver.status is SearchStatus.EXHAUSTED
    assert solver.nodes_visited == HALF_STATE_SPACE
    assert res["peak_closed"] == HALF_STATE_SPACE
    assert "No solution found." in capsys.readouterr().out


def test_verbose_solved_message(capsys) -> None:
    BestFirstSolver(Board(ONE_MOVE), verbose=True).solve()
    assert "Puzzle solved!" in capsys.readouterr().out


def test_timeout_status(capsys) -> None:
    solver = BestFirstSolver(Board(SWAPPED), timeout_sec=0.0, verbose=True)
    res = solver.solve()
    assert res["termination"] == "timeout"
    assert solver.status is SearchStatus.TIMEOUT
    assert not solver.solved
    assert "Search stopped" in capsys.readouterr().out


# -- counters -----------------------------------------------------------------


def test_counter_accumulates_and_resets() -> None:
    solver = BestFirstSolver(Board(ONE_MOVE))
    solver.solve()
    assert solver.nodes_visited == 1
    solver.solve()
    assert solver.nodes_visited == 2
    solver.reset_nodes_visited()
    assert solver.nodes_visited == 0
    solver.solve()
    assert solver.nodes_visited == 1


def test_rerun_after_reset_matches_first_run() -> None:
    solver = BestFirstSolver(scramble(16, 7), Heuristic.HAMMING)
    first = solver.solve()
    solver.reset_nodes_visited()
    second = solver.solve()
    assert solver.nodes_visited == first["expanded"] == second["expanded"]


def test_expanded_never_exceeds_unique_states() -> None:
    res = greedy_best_first(scramble(24, 11), "hamming")
    assert res["expanded"] == res["peak_closed"]
    assert res["generated"] <= 4 * res["expanded"]


# -- configuration ------------------------------------------------------------


def test_start_board_is_copied() -> None:
    b = Board(ONE_MOVE)
    solver = BestFirstSolver(b)
    b.slide_left()
    solver.solve()
    assert solver.nodes_visited == 1
    assert solver.board == Board(ONE_MOVE)


def test_bad_tie_break() -> None:
    with pytest.raises(ValueError):
        BestFirstSolver(Board(GOAL_GRID), tie_break="random")


def test_bad_heuristic() -> None:
    with pytest.raises(ValueError):
        BestFirstSolver(Board(GOAL_GRID), heuristic="euclid")


def _first_level_flat(start: Board):
    """Score every child of *start* 1 and every other board 9."""
    first = set(neighbors(start))
    return lambda b: 1 if b in first else 9


@pytest.mark.parametrize("tie_break, visited", [("fifo", 3), ("lifo", 1)])
def test_tie_break_pop_order(tie_break: str, visited: int) -> None:
    # blank at (2,1): children generated up, left, right; right is the goal
    start = Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    solver = BestFirstSolver(start, tie_break=tie_break)
    solver.hfun = _first_level_flat(start)
    res = solver.solve()
    assert res["termination"] == "ok"
    # fifo expands up and left before reaching the goal, lifo pops the goal first
    assert solver.nodes_visited == visited


def test_node_orders_by_score_then_tie() -> None:
    b = Board(GOAL_GRID)
    assert Node(1, 5, b) < Node(2, 0, b)
    assert Node(1, 0, b) < Node(1, 1, b)
    assert Node(3, 2, b) == Node(3, 2, Board(SWAPPED))


@pytest.mark.parametrize("tie_break", ["fifo", "lifo"])
def test_tie_break_is_deterministic(tie_break: str) -> None:
    start = scramble(18, 3)
    a = greedy_best_first(start, "manhattan", tie_break=tie_break)
    b = greedy_best_first(start, "manhattan", tie_break=tie_break)
    assert a["termination"] == b["termination"] == "ok"
    assert a["tie_break"] == tie_break
    assert (a["expanded"], a["generated"]) == (b["expanded"], b["generated"])
