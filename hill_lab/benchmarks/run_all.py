# hill_lab/benchmarks/run_all.py
# Solve a heightmap from its 'S' cell and from the best lowest cell, once per heuristic,
# then print and save the results.
#
#   python -m hill_lab.benchmarks.run_all                 # bundled sample
#   python -m hill_lab.benchmarks.run_all input.txt -H manhattan -H zero
#   cat input.txt | python -m hill_lab.benchmarks.run_all -
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..algorithms.astar import a_star_search
from ..algorithms.multi_source import search_from_any
from ..core.grid import HeightMap
from ..core.heuristics import HEURISTICS
from ..core.metrics import SearchResult
from ..problems.parsing import load_heightmap, read_heightmap
from ..problems.samples import sample_heightmap

# ---- Tunables (overridable via environment variables) -----------------------
HEURISTICS_ENV = os.getenv("HILL_LAB_HEURISTICS", "manhattan,rounded_euclidean,zero")
LOG_LEVEL = os.getenv("HILL_LAB_LOG_LEVEL", "WARNING")
RESULTS_PATH = Path(os.getenv("HILL_LAB_RESULTS", str(Path(__file__).with_name("results.json"))))

logger = logging.getLogger(__name__)


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_grid(source: Optional[str]) -> HeightMap:
    if source is None:
        return sample_heightmap()
    if source == "-":
        return read_heightmap(sys.stdin)
    path = Path(source)
    if not path.exists():
        raise SystemExit(f"Missing input file {path}")
    return load_heightmap(path)


def _failed_row(name: str, task: str, e: Exception) -> Dict[str, Any]:
    return {
        "algo": name,
        "task": task,
        "success": False,
        "cost": None,
        "nodes_expanded": None,
        "starts_tried": None,
        "time_s": None,
        "peak_kb": None,
        "error": repr(e),
    }


def _print_run(task: str, r: SearchResult) -> None:
    print(
        f"  {r.algo} [{task}]: "
        f"{'OK' if r.success else 'NO PATH'} "
        f"cost={r.cost if r.success else None} "
        f"expanded={r.nodes_expanded}, "
        f"time={_fmt_time(r.time_s)}s"
    )


def run_all(grid: HeightMap, heuristics: Sequence[str]) -> List[Dict[str, Any]]:
    """
    One row per (heuristic, task):
      - "from_start": A* from the grid's 'S' cell
      - "best_start": best over every lowest cell
    A run that raises is kept as a failed row with its error.
    """
    rows: List[Dict[str, Any]] = []
    for h in heuristics:
        print(f"→ Running A*({h}) ...")
        for task, fn in (
            ("from_start", lambda: a_star_search(grid, heuristic=h)),
            ("best_start", lambda: search_from_any(grid, heuristic=h)),
        ):
            try:
                r = fn()
            except Exception as e:
                logger.debug("A*(%s) %s failed", h, task, exc_info=True)
                print(f"  A*({h}) [{task}]: ERROR {e!r}")
                rows.append(_failed_row(f"A*({h})", task, e))
                continue
            _print_run(task, r)
            rows.append(r.to_row(task))
    return rows


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Shortest climbs over a heightmap, compared across heuristics.")
    ap.add_argument("input", nargs="?", default=None,
                    help="heightmap file, '-' for stdin (default: bundled sample)")
    ap.add_argument("-H", "--heuristic", action="append", choices=sorted(HEURISTICS),
                    help=f"heuristic to run; repeatable (default: {HEURISTICS_ENV})")
    ap.add_argument("--out", type=Path, default=RESULTS_PATH, help="where to write results.json")
    ap.add_argument("--no-save", action="store_true", help="print only, don't write results.json")
    ap.add_argument("--plot", type=Path, default=None, help="save a PNG of the heightmap with the best path")
    ap.add_argument("--compare", type=Path, default=None, help="save a PNG of bar charts comparing the runs")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        raise SystemExit(f"Unknown log level {args.log_level!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    heuristics = args.heuristic or [h.strip() for h in HEURISTICS_ENV.split(",") if h.strip()]
    if not heuristics:
        raise SystemExit("No heuristics selected; pass -H or set HILL_LAB_HEURISTICS")
    unknown = [h for h in heuristics if h not in HEURISTICS]
    if unknown:
        raise SystemExit(f"Unknown heuristic(s) {unknown}; choose from {sorted(HEURISTICS)}")

    grid = _load_grid(args.input)
    print(f"Heightmap {grid.rows}x{grid.cols}, start={grid.start}, goal={grid.goal}")

    rows = run_all(grid, heuristics)
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    if not args.no_save:
        try:
            args.out.write_text(json.dumps(out, indent=2))
            print(f"Wrote {args.out}")
        except OSError as e:
            logger.warning("could not write %s: %s", args.out, e)

    if args.plot is not None:
        from ..plots.plotting import plot_heightmap

        best = search_from_any(grid, heuristic=heuristics[0])
        fig = plot_heightmap(grid, best.path or None, title="Best climb")
        fig.savefig(args.plot, dpi=160)
        print(f"Wrote {args.plot}")

    if args.compare is not None:
        from ..plots.plotting import bar_compare

        fig = bar_compare(rows, title=f"Heuristics on a {grid.rows}x{grid.cols} heightmap")
        fig.savefig(args.compare, dpi=160)
        print(f"Wrote {args.compare}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
