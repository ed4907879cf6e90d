#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Both heuristics", "python -m eightpuzzle.experiments.runner --depths 4 8 12 16 20 --per_depth 20 --out results/gbfs.csv")
    run("LIFO tie-break", "python -m eightpuzzle.experiments.runner --depths 4 8 12 16 20 --per_depth 20 --tie_break lifo --out results/gbfs_lifo.csv")
    run("Unsolvable variants", "python -m eightpuzzle.experiments.runner --depths 8 --per_depth 2 --include_unsolvable --out results/gbfs_unsolvable.csv")
    run("Summary", "python -m eightpuzzle.experiments.analyze results/gbfs.csv results/gbfs_lifo.csv")
    run("Plots", "python -m eightpuzzle.experiments.plot results/gbfs.csv --save results/plots")

if __name__ == "__main__":
    main()
