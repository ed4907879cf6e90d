#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from typing import List

import pandas as pd

METRICS = ["expanded", "generated", "time_sec"]

def load_many(patterns: List[str]) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            try:
                df = pd.read_csv(fn)
                df["__src__"] = os.path.basename(fn)
                dfs.append(df)
            except Exception as e:
                print(f"skip {fn}: {e}")
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "time_sec"})
    if "solvable" not in df.columns:
        df["solvable"] = 1
    if "termination" not in df.columns:
        df["termination"] = "ok"
    df["termination"] = df["termination"].fillna("ok")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """mean/median/std/max of each metric per (heuristic, solvable, depth)."""
    if df.empty:
        return df
    g = df.groupby(["heuristic", "solvable", "depth"])[METRICS]
    out = g.agg(["mean", "median", "std", "max"])
    out.columns = [f"{m}_{s}" for m, s in out.columns]
    out["runs"] = g.size()
    return out.reset_index()

def heuristic_ratio(df: pd.DataFrame, metric: str = "expanded",
                    num: str = "hamming", den: str = "manhattan") -> pd.DataFrame:
    """Per depth, mean(metric | num) / mean(metric | den) on solvable runs."""
    sub = df[(df["solvable"] == 1) & (df["termination"] == "ok")]
    means = sub.pivot_table(index="depth", columns="heuristic", values=metric, aggfunc="mean")
    if num not in means.columns or den not in means.columns:
        return pd.DataFrame(columns=["depth", num, den, "ratio"])
    means = means[[num, den]].reset_index()
    means["ratio"] = means[num] / means[den].where(means[den] > 0)
    return means

def termination_counts(df: pd.DataFrame) -> pd.DataFrame:
    return (df.groupby(["heuristic", "termination"]).size()
              .unstack(fill_value=0).reset_index())

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs.")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    args = ap.parse_args(argv)

    df = load_many(args.csv)
    if df.empty:
        print("No rows to analyze.")
        return
    with pd.option_context("display.width", 160, "display.max_columns", 40):
        print("=" * 80)
        print("Per-depth summary")
        print("=" * 80)
        print(summarize(df).to_string(index=False, float_format=lambda x: f"{x:.3f}"))
        print("\nHamming / Manhattan (expanded, solvable runs)")
        print(heuristic_ratio(df).to_string(index=False, float_format=lambda x: f"{x:.2f}"))
        print("\nTerminations")
        print(termination_counts(df).to_string(index=False))

if __name__ == "__main__":
    main()
