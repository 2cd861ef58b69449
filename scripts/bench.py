#!/usr/bin/env python3
"""Generate reproducible minimax vs alpha-beta analytics CSVs."""

from __future__ import annotations

import argparse
import csv
import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nimengine.analytics import compare
from nimengine.constants import INITIAL_PILE, MAX_ANALYTIC_DEPTH

FIELDNAMES = [
    "pile",
    "depth",
    "minimax_nodes",
    "alphabeta_nodes",
    "minimax_time",
    "alphabeta_time",
    "pruned_ratio",
]


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_analytics_bench(piles: list[int], max_depth: int, seed: int) -> list[dict[str, object]]:
    rng = random.Random(seed)
    rows: list[dict[str, object]] = []
    for pile in piles:
        for row in compare(pile, rng=rng, max_depth=max_depth):
            rows.append(
                {
                    "pile": pile,
                    "depth": row.depth,
                    "minimax_nodes": row.minimax_nodes,
                    "alphabeta_nodes": row.alphabeta_nodes,
                    "minimax_time": round(row.minimax_time, 2),
                    "alphabeta_time": round(row.alphabeta_time, 2),
                    "pruned_ratio": round(1 - row.alphabeta_nodes / row.minimax_nodes, 3),
                }
            )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate Nim search analytics CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--max-pile", type=int, default=INITIAL_PILE, help="Largest pile size to analyse")
    parser.add_argument("--max-depth", type=int, default=MAX_ANALYTIC_DEPTH, help="Depth ceiling")
    parser.add_argument("--seed", type=int, default=7, help="Seed for the timing jitter")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    rows = run_analytics_bench(list(range(1, args.max_pile + 1)), args.max_depth, args.seed)
    path = metrics_dir / "analytics_metrics.csv"
    _write_csv(path, fieldnames=FIELDNAMES, rows=rows)
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
