"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for benchmark outputs and provides utilities
to compute aggregate statistics across per-run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]


class RunRecord(TypedDict):
    solver: str
    run: int
    solutions: int
    unique: int
    nodes: int
    time: float


class BenchmarkEntry(TypedDict, total=False):
    total_runs: int
    solutions: int
    unique: int
    nodes: int
    all_time: StatsSummary
    all_nodes: StatsSummary
    raw_runs: List[RunRecord]


BenchmarkResults = Dict[str, BenchmarkEntry]


class ProgressPrinter:
    """Print ``[label] step/total (pct%) - detail`` lines to stdout.

    With ``every > 1`` only every ``every``-th step and the final one are
    printed.
    """

    def __init__(self, total: int, label: str, every: int = 1):
        self.total = max(1, total)
        self.label = label
        self.every = max(1, every)

    def update(self, step: int, detail: str = "") -> None:
        if step % self.every and step != self.total:
            return
        line = f"[{self.label}] {step}/{self.total} ({step * 100 / self.total:.0f}%)"
        print(f"{line} - {detail}" if detail else line)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Summarize a list of measurements.

    Quartiles use the inclusive method of ``statistics.quantiles``; with a
    single value every field collapses to it and ``std`` is 0. An empty list
    gives ``count == 0`` and ``None`` everywhere else, so CSV rows keep their
    columns.
    """
    if not values:
        return {"count": 0, "mean": None, "median": None, "std": None,
                "min": None, "max": None, "q25": None, "q75": None}

    if len(values) > 1:
        q25, _, q75 = statistics.quantiles(values, n=4, method="inclusive")
        std = statistics.pstdev(values)
    else:
        q25 = q75 = values[0]
        std = 0.0

    return {
        "count": len(values),
        "mean": statistics.fmean(values),
        "median": statistics.median(values),
        "std": std,
        "min": min(values),
        "max": max(values),
        "q25": q25,
        "q75": q75,
    }


def compute_grouped_statistics(runs: List[RunRecord]) -> Dict[str, Any]:
    """Aggregate the runs of one solver into a ``BenchmarkEntry``.

    ``solutions``, ``unique`` and ``nodes`` are taken from the first run; the
    search is deterministic so every run reports the same values.
    """
    stats: Dict[str, Any] = {"total_runs": len(runs)}
    if runs:
        stats["solutions"] = runs[0]["solutions"]
        stats["unique"] = runs[0]["unique"]
        stats["nodes"] = runs[0]["nodes"]

    for metric in ["time", "nodes"]:
        values = [r[metric] for r in runs]
        stats[f"all_{metric}"] = compute_detailed_statistics(values)

    return stats
