# hill_lab/plots/plotting.py
# Matplotlib helpers: a heightmap with a path drawn over it, and bar charts comparing runs.
from __future__ import annotations
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..core.grid import Coord, HeightMap


def plot_heightmap(grid: HeightMap, path: Optional[Sequence[Coord]] = None, title: str = "Heightmap", ax=None):
    """imshow of the elevation levels; path as a line, start/goal as markers."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, grid.cols * 0.25), max(3, grid.rows * 0.25)))
    else:
        fig = ax.figure

    img = ax.imshow(grid.to_array(), cmap="terrain", vmin=0, vmax=25, interpolation="nearest")
    fig.colorbar(img, ax=ax, label="elevation (a=0 .. z=25)")

    if path:
        pts = np.asarray(path)
        ax.plot(pts[:, 1], pts[:, 0], color="crimson", linewidth=1.5)
        ax.scatter([pts[0, 1]], [pts[0, 0]], color="white", edgecolors="black", zorder=3, label="start")
        title = f"{title} ({len(path) - 1} steps)"
    elif grid.start is not None:
        ax.scatter([grid.start[1]], [grid.start[0]], color="white", edgecolors="black", zorder=3, label="start")

    gr, gc = grid.goal
    ax.scatter([gc], [gr], marker="*", s=120, color="gold", edgecolors="black", zorder=3, label="goal")
    ax.set_title(title)
    ax.set_xticks([]); ax.set_yticks([])
    ax.legend(loc="upper right", fontsize=8)
    return fig


def bar_compare(rows, title="Search Comparison"):
    """
    2x2 bars (expanded, cost, time, peak memory) over run_all() rows.
    Failed runs are left out.
    """
    rows = [r for r in rows if r.get("success")]
    labels = [f"{r['algo']}\n{r.get('task', '')}" for r in rows]
    panels = (
        ("nodes_expanded", "Nodes Expanded"),
        ("cost", "Path Cost (steps)"),
        ("time_s", "Time (s)"),
        ("peak_kb", "Peak Memory (KB)"),
    )

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (key, name) in zip(axs.ravel(), panels):
        ax.bar(labels, [r.get(key) or 0 for r in rows])
        ax.set_title(name)
        ax.tick_params(axis="x", rotation=45, labelsize=7)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
