"""
QC digests over finished outputs.  Used by `pipeline.cli summarize`.
"""
from __future__ import annotations
import pandas as pd
import numpy as np


def load_read_stats(path) -> pd.DataFrame:
    # mean_phred is written with a leading space
    return pd.read_csv(path, skipinitialspace=True, keep_default_na=False,
                       na_values={"mean_phred": ["NaN"], "mean_error_rate": ["NaN"]},
                       dtype={"read_id": str})


def load_histogram(path) -> pd.DataFrame:
    return pd.read_csv(path, dtype={"phred_score": int, "count": np.uint64})


# ───────────────────────────────────────────────────────────────────────────
def compute_summary_statistics(reads_df: pd.DataFrame) -> pd.DataFrame:
    """Read-length and mean-Phred summary (Min / Max / Mean / Median)."""
    cols = ["read_length", "mean_phred"]
    if reads_df.empty:
        return pd.DataFrame(index=cols, columns=["Min", "Max", "Mean", "Median"], dtype=float)
    tbl = pd.DataFrame({
        "Min":    reads_df[cols].min(),
        "Max":    reads_df[cols].max(),
        "Mean":   reads_df[cols].mean(),
        "Median": reads_df[cols].median(),
    })
    tbl.attrs["n_reads"] = len(reads_df)
    return tbl


# ───────────────────────────────────────────────────────────────────────────
def compute_histogram_summary(hist_df: pd.DataFrame) -> dict:
    """Total bases, mean per-base Phred and Q20+/Q30+ fractions."""
    scores = hist_df["phred_score"].to_numpy()
    counts = hist_df["count"].to_numpy(dtype=float)
    total = counts.sum()
    if total == 0:
        return {"total_bases": 0, "mean_base_phred": np.nan,
                "frac_q20": np.nan, "frac_q30": np.nan}
    return {
        "total_bases": int(total),
        "mean_base_phred": float((scores * counts).sum() / total),
        "frac_q20": float(counts[scores >= 20].sum() / total),
        "frac_q30": float(counts[scores >= 30].sum() / total),
    }
