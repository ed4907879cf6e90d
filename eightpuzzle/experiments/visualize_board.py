#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.board import Board, SIZE
from eightpuzzle.domains.puzzle8 import scramble

def draw_board(board: Board, out_path: Path, title: str | None = None):
    n = SIZE
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    for idx, t in enumerate(board.to_state()):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Save a board as a PNG.")
    p.add_argument("--board", type=int, nargs=9, default=None, metavar="TILE")
    p.add_argument("--depth", type=int, default=10, help="Scramble depth when --board is omitted")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--out", type=Path, default=Path("results/figs/board.png"))
    args = p.parse_args(argv)

    board = Board.from_state(args.board) if args.board else scramble(args.depth, args.seed)
    draw_board(board, args.out)
    print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()
