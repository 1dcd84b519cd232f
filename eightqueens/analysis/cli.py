"""Command-line interface and high-level pipelines for 8-Queens analysis.

This module wires together configuration loading, printing of solutions,
benchmark execution, CSV export and plotting. It isolates I/O, argument
parsing and progress reporting from the core search modules so that the rest
of the codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from . import settings
from .experiments import run_benchmarks, validate_run
from .plots import plot_benchmark_times, plot_unique_solutions
from .reporting import save_benchmark_summary_csv, save_raw_runs_csv, solutions_frame
from config_manager import ConfigManager
from eightqueens.backtracking import bt_queens_iterative, bt_queens_recursive, canonicalize, solve_all, solve_unique
from eightqueens.bitboard import parse_board, render


# ------------- Utils --------------------------------------------------------

def parse_solver_filters(solver_args: Optional[List[str]]) -> Optional[List[str]]:
    """Normalize solver filter CLI inputs into a list of labels.

    Accepts repeated flags and comma-separated lists. Valid values are those
    in ``settings.AVAILABLE_SOLVERS``. Returns None when no filter is provided
    (meaning the configured solvers are used).
    """
    if not solver_args:
        return None
    selected: List[str] = []
    for entry in solver_args:
        for token in entry.split(","):
            token = token.strip().lower()
            if token:
                if token not in settings.AVAILABLE_SOLVERS:
                    raise ValueError(
                        f"Unknown solver '{token}'. Allowed: {', '.join(settings.AVAILABLE_SOLVERS)}"
                    )
                selected.append(token)
    unique = list(dict.fromkeys(selected))  # preserve order, remove dups
    return unique or None


def apply_configuration(config_path: str, solver_filter: Optional[List[str]] = None) -> Tuple[ConfigManager, List[str]]:
    """Load configuration and apply optional solver filtering.

    This function updates the global ``settings`` module in-place to reflect
    values from ``config.json`` (or a user-specified path). It returns the
    ``ConfigManager`` used and the list of selected solver labels.
    """
    config_mgr = ConfigManager(config_path)

    benchmark_settings = config_mgr.get_benchmark_settings()
    if benchmark_settings:
        runs = int(benchmark_settings.get("runs", settings.BENCHMARK_RUNS))
        if runs <= 0:
            raise ValueError(f"benchmark_settings.runs must be positive, got {runs}")
        settings.BENCHMARK_RUNS = runs
        solvers = [str(s).lower() for s in benchmark_settings.get("solvers", settings.SOLVERS)]
        unknown = [s for s in solvers if s not in settings.AVAILABLE_SOLVERS]
        if unknown:
            raise ValueError("Unknown solvers in configuration: " + ", ".join(unknown))
        settings.SOLVERS = solvers
        settings.OUT_DIR = benchmark_settings.get("output_dir", settings.OUT_DIR)

    output_settings = config_mgr.get_output_settings()
    if output_settings:
        settings.set_output_policy(
            date_in_filenames=output_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES),
            run_tag=output_settings.get("run_tag", settings.RUN_TAG),
        )

    if solver_filter:
        selected = [s for s in solver_filter if s in settings.SOLVERS]
        if not selected:
            raise ValueError("No solvers selected after applying filters.")
        settings.SOLVERS = selected

    return config_mgr, list(settings.SOLVERS)


def export_configuration(path: str) -> str:
    """Write the effective settings to ``path`` as a configuration file.

    The result can be passed back with ``--config`` to repeat a run.
    """
    config_mgr = ConfigManager(path, must_exist=False)
    config_mgr.write_config(
        {
            "runs": settings.BENCHMARK_RUNS,
            "solvers": list(settings.SOLVERS),
            "output_dir": settings.OUT_DIR,
        },
        {
            "date_in_filenames": settings.DATE_IN_FILENAMES,
            "run_tag": settings.RUN_TAG,
        },
    )
    print(f"Configuration written to {config_mgr.config_path}")
    return str(config_mgr.config_path)


# ------------- Pipelines ----------------------------------------------------

def show_solutions(which: str) -> None:
    """Print every raw solution (``all``) or every canonical one (``unique``)."""
    boards = solve_all() if which == "all" else sorted(solve_unique())
    for index, grid in enumerate(boards, start=1):
        print(f"Solution {index} ({grid:#018x}):")
        print(render(grid))
    print(f"Total: {len(boards)}")


def show_table() -> None:
    """Print the canonical solutions as a table."""
    frame = solutions_frame(solve_unique())
    print(frame.to_string(index=False))


def main_benchmark(validate: bool = False, plots: bool = False) -> None:
    """Run benchmarks for the configured solvers, export CSVs and charts."""
    print(f"Benchmarking solvers {settings.SOLVERS} with {settings.BENCHMARK_RUNS} runs each")
    start = perf_counter()
    results = run_benchmarks(validate=validate)

    for label, entry in results.items():
        time_stats = entry["all_time"]
        print(
            f"  {label}: {entry.get('solutions')} solutions, {entry.get('unique')} unique, "
            f"{entry.get('nodes')} nodes, mean {time_stats['mean'] * 1000:.3f} ms"
        )

    save_benchmark_summary_csv(results, settings.OUT_DIR)
    save_raw_runs_csv(results, settings.OUT_DIR)
    if plots:
        plot_benchmark_times(results, settings.OUT_DIR)

    total_time = perf_counter() - start
    print(f"Total time: {total_time:.1f}s")


def main_plots() -> None:
    """Draw the gallery of canonical solutions."""
    plot_unique_solutions(solve_unique(), settings.OUT_DIR)


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic check of the whole pipeline.

    Verifies that:
    - Both search variants find the 92 valid boards and the 12 classes.
    - Both variants agree on the solutions and on the node count.
    - Every board survives a render/parse round trip.
    - The benchmark pipeline produces non-empty CSVs in a temporary folder.
    """
    print("Running quick regression tests across all solvers...")

    reference = None
    for name, solver in (("iterative", bt_queens_iterative), ("recursive", bt_queens_recursive)):
        solutions, nodes, elapsed = solver()
        validate_run(name, solutions, canonicalize(solutions))
        if reference is None:
            reference = (solutions, nodes)
        elif (solutions, nodes) != reference:
            raise AssertionError(f"{name} disagrees with the iterative search.")
        print(f"  [BT] {name}: {len(solutions)} solutions, nodes={nodes}, time={elapsed:.4f}s")

    for grid in solve_all():
        if parse_board(render(grid)) != grid:
            raise AssertionError(f"Render/parse round trip failed for {grid:#018x}.")

    results = run_benchmarks(runs=2, validate=True, progress_label="Quick regression benchmark")

    with tempfile.TemporaryDirectory() as tmpdir:
        for path in (save_benchmark_summary_csv(results, tmpdir), save_raw_runs_csv(results, tmpdir)):
            csv_path = Path(path)
            if not csv_path.exists() or csv_path.stat().st_size == 0:
                raise AssertionError(f"{csv_path.name} was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Enumerate 8-Queens solutions and benchmark the search.")
    parser.add_argument(
        "--show",
        choices=["all", "unique"],
        help="Print all 92 solutions or the 12 unique ones as boards.",
    )
    parser.add_argument("--table", action="store_true", help="Print the unique solutions as a table.")
    parser.add_argument("--benchmark", action="store_true", help="Run timed benchmarks and export CSVs.")
    parser.add_argument("--plots", action="store_true", help="Draw the unique solutions (and benchmark times with --benchmark).")
    parser.add_argument(
        "--solver",
        "-s",
        action="append",
        help="Filter solvers to benchmark: iterative, recursive (comma-separated or multiple flags).",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument(
        "--write-config",
        metavar="PATH",
        help="Write the effective settings (after --config and --solver) to PATH as a configuration file.",
    )
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate every benchmark run (extra assertions).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    if not (args.show or args.table or args.benchmark or args.plots or args.write_config):
        args.show = "unique"

    try:
        if args.show:
            show_solutions(args.show)
        if args.table:
            show_table()
        if args.benchmark or args.plots or args.write_config:
            solver_filter = parse_solver_filters(args.solver)
            apply_configuration(args.config, solver_filter)
            if args.write_config:
                export_configuration(args.write_config)
            if args.benchmark:
                main_benchmark(validate=args.validate, plots=args.plots)
            if args.plots:
                main_plots()
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
