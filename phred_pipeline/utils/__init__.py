from .summary import (
    load_read_stats,
    load_histogram,
    compute_summary_statistics,
    compute_histogram_summary,
)

__all__ = [
    "load_read_stats",
    "load_histogram",
    "compute_summary_statistics",
    "compute_histogram_summary",
]
