"""
Low-level FASTQ I/O helpers.
"""
from .fastq import (
    FastqRecord,
    get_output_paths,
    open_fastq,
    iter_fastq_records,
    format_read_stats_row,
    open_read_stats_writer,
    write_histogram,
)

__all__ = [
    "FastqRecord",
    "get_output_paths",
    "open_fastq",
    "iter_fastq_records",
    "format_read_stats_row",
    "open_read_stats_writer",
    "write_histogram",
]
