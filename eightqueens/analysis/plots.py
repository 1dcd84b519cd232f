"""Visualization utilities for solutions and benchmark outputs.

Charts are written as PNG files into ``out_dir`` and carry the same optional
run tag / datestamp suffix as the CSV exports. If the plotting stack
(matplotlib/numpy/seaborn) is unavailable, the public functions print a short
message and return ``None`` so the rest of the pipeline keeps working.

Chart map
---------
- unique_solutions.png: the canonical boards drawn as small chessboards,
    queens marked, each titled with its orbit size under the symmetries.
- benchmark_times.png: box plot of per-run wall-clock time per solver
    (milliseconds), with the individual runs overlaid.

Both functions only have side effects (file creation, stdout prints) and
return the path of the written file.
"""
from __future__ import annotations

import math
import os
from typing import Any, Iterable, List, Optional, cast

import pandas as pd

try:
    import matplotlib.pyplot as plt  # type: ignore
    import numpy as np  # type: ignore
    import seaborn as sns  # type: ignore
    _PLOTS_AVAILABLE = True
except ImportError:
    plt = cast(Any, None)  # type: ignore
    np = cast(Any, None)  # type: ignore
    sns = cast(Any, None)  # type: ignore
    _PLOTS_AVAILABLE = False

from .reporting import build_suffix
from .stats import BenchmarkResults
from eightqueens.bitboard import BOARD_SIZE, Grid, queen_cells
from eightqueens.symmetry import orbit_size

SKIP_MESSAGE = "Plotting skipped: matplotlib, numpy and seaborn are required."


def board_array(grid: Grid) -> np.ndarray:
    """Return an 8x8 array with 1 where ``grid`` has a set bit."""
    cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.uint8)
    for row, col in queen_cells(grid):
        cells[row, col] = 1
    return cells


def plot_unique_solutions(solutions: Iterable[Grid], out_dir: str, columns: int = 4) -> Optional[str]:
    """Draw each board on its own chessboard in a single figure.

    Parameters
    ----------
    solutions : Iterable[int]
        Boards to draw; they are sorted by value for a stable layout.
    out_dir : str
        Destination directory; will be created if missing.
    columns : int
        Boards per figure row.

    Returns
    -------
    str | None
        Path of the PNG, or None when plotting is unavailable.
    """
    if not _PLOTS_AVAILABLE:
        print(SKIP_MESSAGE)
        return None
    os.makedirs(out_dir, exist_ok=True)
    boards: List[Grid] = sorted(solutions)
    rows = max(1, math.ceil(len(boards) / columns))

    # Light/dark squares like a chessboard.
    shading = np.indices((BOARD_SIZE, BOARD_SIZE)).sum(axis=0) % 2

    fig, axes = plt.subplots(rows, columns, figsize=(3 * columns, 3 * rows), squeeze=False)
    for index, ax in enumerate(axes.flat):
        ax.set_xticks([])
        ax.set_yticks([])
        if index >= len(boards):
            ax.axis("off")
            continue
        grid = boards[index]
        ax.imshow(shading, cmap="Greys", vmin=0, vmax=3)
        queens = np.argwhere(board_array(grid) == 1)
        ax.scatter(queens[:, 1], queens[:, 0], marker="*", s=180, color="#d62728")
        ax.set_title(f"#{index + 1} (orbit {orbit_size(grid)})", fontsize=10)

    fig.suptitle("8-Queens solutions unique under symmetry", fontsize=14)
    fname = os.path.join(out_dir, f"unique_solutions{build_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved unique solutions chart: {fname}")
    return fname


def plot_benchmark_times(results: BenchmarkResults, out_dir: str) -> Optional[str]:
    """Box plot of run times per solver with the individual runs overlaid.

    Returns the path of the PNG, or None when plotting is unavailable.
    """
    if not _PLOTS_AVAILABLE:
        print(SKIP_MESSAGE)
        return None
    os.makedirs(out_dir, exist_ok=True)
    records = []
    for label, entry in results.items():
        for run in entry.get("raw_runs", []):
            records.append({"solver": label, "time_ms": run["time"] * 1000.0})
    frame = pd.DataFrame(records, columns=["solver", "time_ms"])

    plt.figure(figsize=(10, 6))
    ax = sns.boxplot(data=frame, x="solver", y="time_ms", color="#1f77b4")
    sns.stripplot(data=frame, x="solver", y="time_ms", color="black", size=3, alpha=0.6, ax=ax)
    ax.set_xlabel("Solver", fontsize=12)
    ax.set_ylabel("Time [ms]", fontsize=12)
    ax.set_title("Full enumeration time per run", fontsize=14)
    ax.grid(True, axis="y", alpha=0.5)

    fname = os.path.join(out_dir, f"benchmark_times{build_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved benchmark time chart: {fname}")
    return fname
