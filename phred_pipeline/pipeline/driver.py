"""
High-level drivers used by CLI & notebooks.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from ..core.analysis import analyse_read
from ..io import (
    get_output_paths, open_fastq, iter_fastq_records,
    format_read_stats_row, open_read_stats_writer, write_histogram,
)
from ..stats import QualityHistogram
from ..viz import plot_phred_histogram

DEFAULT_CFG = {
    "output_prefix": "output",
    "compresslevel": 1,
    "plot": False,
}


def resolve_config(cfg: Optional[dict] = None, **overrides) -> dict:
    """DEFAULT_CFG ← cfg ← overrides (None values in overrides are ignored)."""
    merged = {**DEFAULT_CFG, **(cfg or {})}
    merged.update({k: v for k, v in overrides.items() if v is not None})
    unknown = set(merged) - set(DEFAULT_CFG)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")
    return merged


# ──────────────────────────────────────────────────────────────────────────────
# Single FASTQ
# ──────────────────────────────────────────────────────────────────────────────
def run_quality_pipeline(
    input_file,
    output_prefix: str = "output",
    *,
    compresslevel: int = 1,
    plot: bool = False,
    quiet: bool = False,
) -> dict:
    """
    Per-read stats + global Phred histogram for one gzipped FASTQ.

    Phase 1 streams records into <prefix>_read_stats.csv.gz while filling the
    histogram; phase 2 writes <prefix>_phred_hist.csv.  Any I/O error is
    raised as-is and leaves whatever was already written on disk.
    """
    say = (lambda *a: None) if quiet else print
    stats_path, hist_path = get_output_paths(output_prefix)
    say(f"🔬 {os.fspath(input_file)} → {output_prefix}_*")

    hist = QualityHistogram()
    n_reads = 0

    # --- phase 1: per-read table ---
    with open_fastq(input_file) as reader, \
            open_read_stats_writer(stats_path, compresslevel=compresslevel) as writer:
        for rec in iter_fastq_records(reader):
            hist.record(rec.quality)
            stats = analyse_read(rec.header, rec.quality)
            writer.write(format_read_stats_row(stats) + "\n")
            n_reads += 1
    say(f"💾 Read stats written → {stats_path}")

    # --- phase 2: histogram ---
    write_histogram(hist, hist_path)
    say(f"💾 Phred histogram written → {hist_path}")

    plot_path = None
    if plot:
        plot_path = plot_phred_histogram(
            hist.to_frame(),
            title=Path(os.fspath(input_file)).name,
            save_path=f"{output_prefix}_phred_hist.svg",
        )

    summary = {
        "reads": n_reads,
        "bases": hist.total,
        "read_stats": stats_path,
        "histogram": hist_path,
        "plot": plot_path,
    }
    say(f"✅ Finished: {n_reads} reads, {hist.total} bases")
    return summary
