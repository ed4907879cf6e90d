from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from eightpuzzle.domains.board import Board
from eightpuzzle.domains.puzzle8 import scramble, is_solvable, make_unsolvable_variant
from eightpuzzle.heuristics.selector import Heuristic
from eightpuzzle.search.best_first import BestFirstSolver, TIE_BREAKS

DEFAULT_DEPTHS = [4, 8, 12, 16, 20]

HEADER = [
    "algorithm", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "time_sec",
    "peak_open", "peak_closed", "tie_break",
    "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            b = scramble(d, seed)
            if is_solvable(b):
                out.append(Instance(seed=seed, depth=d, board=b))
                made += 1
            seed += 1
            attempts += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def result_row(res, inst: Instance, solvable_flag: int) -> list:
    return [
        res.get("algorithm", ""), res.get("heuristic", ""), inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_closed", ""),
        res.get("tie_break", ""), res.get("termination", "ok"), solvable_flag,
    ]

def run_batch(insts: List[Instance], heuristics: List[str], out: Path,
              tie_break: str = "fifo", timeout_sec: float | None = None,
              include_unsolvable: bool = False) -> int:
    """Solve every instance with every heuristic and write one CSV row per run."""
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            variants = [(inst.board, 1)]
            if include_unsolvable:
                variants.append((make_unsolvable_variant(inst.board), 0))
            for board, flag in variants:
                for h in heuristics:
                    r = BestFirstSolver(board, h, tie_break=tie_break, timeout_sec=timeout_sec).solve()
                    w.writerow(result_row(r, inst, flag))
                    rows += 1
    return rows

def solve_one(cells: List[int], heuristic: str, tie_break: str, timeout_sec: float | None):
    board = Board.from_state(cells)
    board.print_board()
    solver = BestFirstSolver(board, heuristic, tie_break=tie_break, timeout_sec=timeout_sec, verbose=True)
    res = solver.solve()
    print(f"Nodes visited: {solver.nodes_visited}  ({res['time']:.3f}s, {res['termination']})")
    return res

def main(argv=None):
    ap = argparse.ArgumentParser(description="Greedy best-first 8-puzzle experiment runner")
    ap.add_argument("--heuristic", nargs="+", choices=[h.value for h in Heuristic],
                    default=[h.value for h in Heuristic])
    ap.add_argument("--depths", type=int, nargs="+", default=DEFAULT_DEPTHS)
    ap.add_argument("--per_depth", type=int, default=20)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--board", type=int, nargs=9, default=None, metavar="TILE",
                    help="Solve a single row-major board instead of a batch")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    if args.board is not None:
        solve_one(args.board, args.heuristic[0], args.tie_break, args.timeout_sec)
        return

    insts = generate_instances(args.depths, args.per_depth, start_seed=args.seed)
    n = run_batch(insts, args.heuristic, args.out, tie_break=args.tie_break,
                  timeout_sec=args.timeout_sec, include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances, {n} runs)")

if __name__ == "__main__":
    main()
