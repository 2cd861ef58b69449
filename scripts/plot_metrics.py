#!/usr/bin/env python3
"""Render depth vs nodes and depth vs time charts from analytics CSV into SVG."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "minimax": "#ef4444",
    "alphabeta": "#10b981",
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot Nim search analytics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing analytics_metrics.csv",
    )
    parser.add_argument("--pile", type=int, default=7, help="Pile size to chart")
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "analytics-charts.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def plot(rows: list[dict[str, str]], pile: int, output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    selected = sorted((row for row in rows if int(row["pile"]) == pile), key=lambda row: int(row["depth"]))
    if not selected:
        raise SystemExit(f"no rows for pile {pile}")

    depths = [int(row["depth"]) for row in selected]

    fig, axes = plt.subplots(1, 2, figsize=(16, 6), dpi=150)
    fig.suptitle(f"Minimax vs Alpha-Beta (pile {pile})", fontsize=18, fontweight="bold", color=PALETTE["text"])

    ax0 = axes[0]
    ax0.plot(depths, [int(r["minimax_nodes"]) for r in selected], marker="o", linewidth=2.5, color=PALETTE["minimax"], label="Minimax")
    ax0.plot(depths, [int(r["alphabeta_nodes"]) for r in selected], marker="o", linewidth=2.5, color=PALETTE["alphabeta"], label="Alpha-Beta")
    ax0.set_title("Depth vs Nodes Visited")
    ax0.set_xlabel("Depth")
    ax0.set_ylabel("Nodes")
    ax0.grid(True, alpha=0.6)
    ax0.legend(frameon=False)

    # Synthetic estimate, proportional to nodes.
    ax1 = axes[1]
    ax1.plot(depths, [float(r["minimax_time"]) for r in selected], marker="s", linewidth=2.5, color=PALETTE["minimax"], label="Minimax (ms)")
    ax1.plot(depths, [float(r["alphabeta_time"]) for r in selected], marker="s", linewidth=2.5, color=PALETTE["alphabeta"], label="Alpha-Beta (ms)")
    ax1.set_title("Depth vs Estimated Time")
    ax1.set_xlabel("Depth")
    ax1.set_ylabel("Time (ms, estimated)")
    ax1.grid(True, alpha=0.6)
    ax1.legend(frameon=False)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    rows = _load_csv(Path(args.metrics_dir) / "analytics_metrics.csv")
    output = Path(args.output)
    plot(rows, args.pile, output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
