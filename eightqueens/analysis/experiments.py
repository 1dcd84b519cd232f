"""Benchmark runners for the backtracking search variants.

Each solver labelled in ``settings.SOLVERS`` is executed a number of times;
every run records how many boards and symmetry classes it found, how many
nodes it explored and how long it took. Outputs are structured dictionaries
suitable for CSV export and plotting.

Validation hooks optionally check every returned board and the class count.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import settings
from .stats import BenchmarkResults, ProgressPrinter, RunRecord, compute_grouped_statistics
from eightqueens.backtracking import canonicalize
from eightqueens.symmetry import orbit_size
from eightqueens.utils import is_valid_solution

EXPECTED_SOLUTIONS = 92
EXPECTED_UNIQUE = 12

Solver = Callable[[], Tuple[List[int], int, float]]


def discover_solvers() -> Dict[str, Solver]:
    """Map short labels to the ``bt_queens_*`` functions of the search module."""
    import eightqueens.backtracking as bt_mod

    solvers = {}
    for name, fn in inspect.getmembers(bt_mod, inspect.isfunction):
        if name.startswith("bt_queens_"):
            solvers[name[len("bt_queens_"):]] = fn
    return solvers


def validate_run(label: str, solutions: List[int], unique: set) -> None:
    """Check a run against the known 8-Queens invariants.

    Raises
    ------
    AssertionError
        With a descriptive message on the first violated invariant.
    """
    if len(solutions) != EXPECTED_SOLUTIONS:
        raise AssertionError(f"{label}: expected {EXPECTED_SOLUTIONS} solutions, got {len(solutions)}.")
    if len(set(solutions)) != len(solutions):
        raise AssertionError(f"{label}: duplicate boards in the solution list.")
    for grid in solutions:
        if not is_valid_solution(grid):
            raise AssertionError(f"{label}: invalid board {grid:#018x}.")
    if len(unique) != EXPECTED_UNIQUE:
        raise AssertionError(f"{label}: expected {EXPECTED_UNIQUE} unique solutions, got {len(unique)}.")
    if sum(orbit_size(grid) for grid in unique) != EXPECTED_SOLUTIONS:
        raise AssertionError(f"{label}: symmetry classes do not cover all solutions.")


def run_benchmarks(
        runs: Optional[int] = None,
        solvers: Optional[List[str]] = None,
        validate: bool = False,
        progress_label: str = "Benchmark",
) -> BenchmarkResults:
    """Run every selected solver ``runs`` times and aggregate the timings.

    Parameters
    ----------
    runs : int | None
        Runs per solver; defaults to ``settings.BENCHMARK_RUNS``.
    solvers : list[str] | None
        Solver labels; defaults to ``settings.SOLVERS``.
    validate : bool
        When True, every run is checked with :func:`validate_run`.
    progress_label : str
        Prefix for progress lines.

    Returns
    -------
    BenchmarkResults
        Mapping solver label -> ``BenchmarkEntry`` including the raw runs.

    Raises
    ------
    ValueError
        If a requested solver label is unknown.
    """
    runs = settings.BENCHMARK_RUNS if runs is None else runs
    labels = list(settings.SOLVERS if solvers is None else solvers)
    available = discover_solvers()
    unknown = [label for label in labels if label not in available]
    if unknown:
        raise ValueError(f"Unknown solvers requested: {', '.join(unknown)}")

    results: BenchmarkResults = {}
    progress = ProgressPrinter(len(labels) * runs, progress_label, every=max(1, runs // 5))
    step = 0

    for label in labels:
        solver = available[label]
        records: List[RunRecord] = []
        for run in range(runs):
            solutions, nodes, elapsed = solver()
            unique = canonicalize(solutions)
            if validate:
                validate_run(label, solutions, unique)
            records.append(
                {
                    "solver": label,
                    "run": run,
                    "solutions": len(solutions),
                    "unique": len(unique),
                    "nodes": nodes,
                    "time": elapsed,
                }
            )
            step += 1
            progress.update(step, f"{label} run {run + 1}: {elapsed * 1000:.2f} ms")

        entry: Dict[str, Any] = compute_grouped_statistics(records)
        entry["raw_runs"] = records
        results[label] = entry  # type: ignore[assignment]

    return results
