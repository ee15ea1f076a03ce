# hill_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .run_all import RESULTS_PATH


def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m hill_lab.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _label(r) -> str:
    return f"{r['algo']} {r.get('task', '')}".strip()


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    labels = [_label(r) for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(labels)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows) -> str:
    """Markdown table of the successful runs."""
    lines = [
        "| Algorithm | Task | Cost | Nodes Expanded | Starts | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) and not x.is_integer() else f"{int(x)}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {r.get('task', '')} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('starts_tried'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot results.json written by run_all.")
    ap.add_argument("results", nargs="?", type=Path, default=RESULTS_PATH)
    ap.add_argument("--out-dir", type=Path, default=None, help="default: next to results.json")
    args = ap.parse_args(argv)

    rows = _load_rows(args.results)
    out_dir = args.out_dir or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in (
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ):
        fig, ax = plt.subplots(figsize=(7, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        (out_dir / fname).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out_dir / fname}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
