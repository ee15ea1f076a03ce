# hill_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import time, tracemalloc

from .grid import Coord


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Coord]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    starts_tried: int = 1
    error: Optional[str] = None

    def to_row(self, task: str = "") -> dict:
        return {
            "algo": self.algo,
            "task": task,
            "success": self.success,
            "cost": self.cost if self.success else None,
            "nodes_expanded": self.nodes_expanded,
            "starts_tried": self.starts_tried,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Nests: an inner run resets tracemalloc's peak only after folding it into
    every enclosing run, and never stops tracing it did not start.
    """
    _active: List["MeasuredRun"] = []

    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owner: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._owner = not tracemalloc.is_tracing()
        if self._owner:
            tracemalloc.start()
        else:
            current, peak = tracemalloc.get_traced_memory()
            for run in MeasuredRun._active:
                run._peak_kb = max(run._peak_kb, peak // 1024)
            tracemalloc.reset_peak()
        MeasuredRun._active.append(self)
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        if self._owner:
            tracemalloc.stop()
        MeasuredRun._active.remove(self)
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
