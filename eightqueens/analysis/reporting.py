"""CSV export of benchmark timings and tabular views of solutions.

Benchmark helpers materialize a per-solver summary as well as full per-run
raw data for spreadsheet inspection. Filenames carry the optional run tag and
datestamp configured in ``settings``.

``solutions_frame`` builds a pandas table of boards for display; it is not
written to disk.
"""
from __future__ import annotations

import csv
import os
from typing import Iterable, List

import pandas as pd

from . import settings
from .stats import BenchmarkResults
from eightqueens.bitboard import BOARD_SIZE
from eightqueens.symmetry import canonical, orbit_size
from eightqueens.utils import grid_to_positions


def build_suffix() -> str:
    """Return the filename suffix from ``RUN_TAG`` and ``RUN_ID`` (or empty)."""
    parts: List[str] = []
    if settings.RUN_TAG:
        parts.append(str(settings.RUN_TAG))
    if settings.DATE_IN_FILENAMES and settings.RUN_ID:
        parts.append(str(settings.RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""


def save_benchmark_summary_csv(results: BenchmarkResults, out_dir: str) -> str:
    """Write one row of aggregate metrics per solver and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"benchmark_summary{build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "solver",
            "total_runs",
            "solutions",
            "unique",
            "nodes_explored",
            "time_mean",
            "time_median",
            "time_std",
            "time_min",
            "time_max",
            "time_q25",
            "time_q75",
        ])
        for label, entry in results.items():
            time_stats = entry.get("all_time", {})
            writer.writerow([
                label,
                entry.get("total_runs", 0),
                entry.get("solutions", ""),
                entry.get("unique", ""),
                entry.get("nodes", ""),
                time_stats.get("mean", ""),
                time_stats.get("median", ""),
                time_stats.get("std", ""),
                time_stats.get("min", ""),
                time_stats.get("max", ""),
                time_stats.get("q25", ""),
                time_stats.get("q75", ""),
            ])

    print(f"Benchmark summary saved to {filename}")
    return filename


def save_raw_runs_csv(results: BenchmarkResults, out_dir: str) -> str:
    """Write every individual run of every solver and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"benchmark_raw_runs{build_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["solver", "run", "solutions", "unique", "nodes_explored", "time_seconds"])
        for label, entry in results.items():
            for record in entry.get("raw_runs", []):
                writer.writerow([
                    label,
                    record["run"],
                    record["solutions"],
                    record["unique"],
                    record["nodes"],
                    record["time"],
                ])

    print(f"Raw benchmark runs saved to {filename}")
    return filename


def solutions_frame(solutions: Iterable[int]) -> pd.DataFrame:
    """Tabulate boards, one row each, sorted by value.

    Columns: ``grid`` (hex), ``row0``..``row7`` (queen column per row),
    ``canonical`` (hex of the class representative) and ``orbit_size``.
    """
    rows = []
    for grid in sorted(solutions):
        record = {"grid": f"{grid:#018x}"}
        for row, col in enumerate(grid_to_positions(grid)):
            record[f"row{row}"] = col
        record["canonical"] = f"{canonical(grid):#018x}"
        record["orbit_size"] = orbit_size(grid)
        rows.append(record)

    columns = ["grid"] + [f"row{row}" for row in range(BOARD_SIZE)] + ["canonical", "orbit_size"]
    return pd.DataFrame(rows, columns=columns)
