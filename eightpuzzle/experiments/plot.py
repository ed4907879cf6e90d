#!/usr/bin/env python3
import sys, os, argparse
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from eightpuzzle.experiments.analyze import load_many, termination_counts

def plot_metric(ax, df, metric):
    sub = df[df["solvable"] == 1]
    for heur, grp in sorted(sub.groupby("heuristic"), key=lambda kv: kv[0]):
        stats = grp.groupby("depth")[metric].agg(["mean", "std"]).fillna(0.0)
        ax.errorbar(stats.index, stats["mean"], yerr=stats["std"], marker="o", capsize=3, label=heur)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()

def plot_terminations(ax, df):
    counts = termination_counts(df).set_index("heuristic")
    x = np.arange(len(counts.index))
    width = 0.8 / max(len(counts.columns), 1)
    for i, term in enumerate(counts.columns):
        ax.bar(x + i * width, counts[term].to_numpy(), width, label=term)
    ax.set_xticks(x + width * (len(counts.columns) - 1) / 2)
    ax.set_xticklabels(counts.index)
    ax.set_ylabel("runs")
    ax.set_title("Termination by heuristic")
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def make_plots(df, outdir: Path, base: str):
    saved = []
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    plot_metric(axes[0], df, "expanded")
    plot_metric(axes[1], df, "time_sec")
    plot_terminations(axes[2], df)
    plt.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    for metric in ["expanded", "generated", "time_sec"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        plt.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    make_plots(df, Path(args.save), base)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
