"""
Phred+33 score ↔ error-probability conversions.
"""
from __future__ import annotations
import numpy as np

PHRED_OFFSET = 33          # Sanger / Illumina 1.8+
PHRED_TABLE_SIZE = 100     # scores 0..99; ASCII 33-126 only needs 0..93


# ──────────────────────────────────────────────────────────────────────────────
# Lookup table
# ──────────────────────────────────────────────────────────────────────────────
def build_error_prob_table(size: int = PHRED_TABLE_SIZE) -> np.ndarray:
    """P(error) = 10^(-Q/10) for Q in [0, size). Returned read-only."""
    table = np.array([10.0 ** (-q / 10.0) for q in range(size)], dtype=np.float64)
    table.flags.writeable = False
    return table


PHRED_TO_ERROR_PROB = build_error_prob_table()


def check_phred_range(phred) -> None:
    """Raise IndexError if any score in `phred` (int or array) is off the table."""
    # negative indices would silently wrap in numpy
    scores = np.atleast_1d(phred)
    bad = (scores < 0) | (scores >= PHRED_TO_ERROR_PROB.size)
    if bad.any():
        q = int(scores[bad][0])
        raise IndexError(f"Phred score {q} outside table [0, {PHRED_TO_ERROR_PROB.size})")


def lookup(phred: int) -> float:
    check_phred_range(phred)
    return float(PHRED_TO_ERROR_PROB[phred])


def quality_to_phred(quality: str, offset: int = PHRED_OFFSET) -> np.ndarray:
    """Integer Phred scores for every character of `quality` (no filtering)."""
    return np.fromiter(map(ord, quality), dtype=np.int64, count=len(quality)) - offset


def error_probability_to_phred(prob: float) -> float:
    """
    Q = -10·log10(p).  p == 0 gives +inf; p == 1 gives 0.0 (not -0.0).
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        q = -10.0 * np.log10(prob)
    return float(q) + 0.0
