from __future__ import annotations
import gzip
import itertools
import math
import os
from typing import IO, Iterable, Iterator, NamedTuple

from ..core.analysis import ReadStats
from ..stats.histogram import QualityHistogram

READ_STATS_HEADER = "read_id,read_length,mean_phred,mean_error_rate"
HIST_HEADER = "phred_score,count"


class FastqRecord(NamedTuple):
    header: str
    sequence: str
    separator: str
    quality: str


def get_output_paths(prefix: str) -> tuple[str, str]:
    """(<prefix>_read_stats.csv.gz, <prefix>_phred_hist.csv)"""
    return f"{prefix}_read_stats.csv.gz", f"{prefix}_phred_hist.csv"


# ------------- input -------------
def open_fastq(path) -> IO[str]:
    """
    Text stream over a gzip FASTQ; concatenated gzip members are read through.
    Lines end at LF only; a bare CR stays inside the line.
    """
    return gzip.open(path, "rt", encoding="utf-8", newline="\n")


def _chomp(line: str) -> str:
    """Drop one trailing LF, then one trailing CR."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_fastq_records(lines: Iterable[str]) -> Iterator[FastqRecord]:
    """
    Group a line stream into 4-line FASTQ records.

    Stops as soon as fewer than 4 lines are left, so a truncated trailing
    record is dropped rather than reported.
    """
    it = iter(lines)
    while True:
        block = [_chomp(ln) for ln in itertools.islice(it, 4)]
        if len(block) < 4:
            return
        yield FastqRecord(*block)


# ------------- output -------------
def format_scientific(value: float) -> str:
    """2-decimal mantissa, bare exponent: 1.00e0, 2.51e-3."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    mantissa, exp = f"{value:.2e}".split("e")
    return f"{mantissa}e{int(exp)}"


def format_fixed(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.2f}"


def format_read_stats_row(stats: ReadStats) -> str:
    # the space before mean_phred is part of the output format
    return (f"{stats.read_id},{stats.read_length}, "
            f"{format_fixed(stats.mean_phred)},"
            f"{format_scientific(stats.mean_error_probability)}")


def open_read_stats_writer(path, compresslevel: int = 1) -> IO[str]:
    handle = gzip.open(path, "wt", compresslevel=compresslevel)
    handle.write(READ_STATS_HEADER + "\n")
    return handle


def write_histogram(hist: QualityHistogram, path) -> str:
    """Plain CSV, one row per bucket, zero counts included."""
    hist.to_frame().to_csv(path, index=False, lineterminator="\n")
    return os.fspath(path)
