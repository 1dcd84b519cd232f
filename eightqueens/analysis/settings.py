"""Global settings for the 8-Queens analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`eightqueens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

# Search variants that can be benchmarked (labels of bt_queens_* functions)
AVAILABLE_SOLVERS: List[str] = ["iterative", "recursive"]

# Solvers to run in benchmarks, in reporting order
SOLVERS: List[str] = ["iterative", "recursive"]

# Number of timed runs per solver (the search is deterministic; runs only
# smooth out wall-clock noise)
BENCHMARK_RUNS: int = 20

# Output directory for CSV and charts
OUT_DIR: str = "results_eightqueens"

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_output_policy(date_in_filenames: bool = True, run_tag: Optional[str] = None) -> None:
    """Configure how output files are named.

    Side effects
    - Updates module-level globals and prints a concise summary to stdout.
    """
    global DATE_IN_FILENAMES, RUN_TAG
    DATE_IN_FILENAMES = bool(date_in_filenames)
    RUN_TAG = run_tag or None

    print("Output settings configured:")
    print(f"   - Datestamp: {RUN_ID}" if DATE_IN_FILENAMES else "   - Datestamp: disabled")
    print(f"   - Run tag: {RUN_TAG}" if RUN_TAG else "   - Run tag: none")
