"""
Analysis and orchestration package for 8-Queens benchmarks.

This package contains:
- settings: global knobs and output naming policy
- stats: typed summaries and aggregation helpers
- experiments: benchmark runner over the search variants
- reporting: CSV exports and tabular views
- plots: all visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    BenchmarkEntry,
    BenchmarkResults,
    ProgressPrinter,
    RunRecord,
    StatsSummary,
    compute_detailed_statistics,
    compute_grouped_statistics,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "BenchmarkEntry",
    "BenchmarkResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
