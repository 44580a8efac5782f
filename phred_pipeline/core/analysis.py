from __future__ import annotations
from typing import NamedTuple, Tuple

import numpy as np

from .phred import (
    PHRED_TO_ERROR_PROB, check_phred_range, error_probability_to_phred, quality_to_phred,
)

MISSING_READ_ID = "NaN"


class ReadStats(NamedTuple):
    read_id: str
    read_length: int
    mean_phred: float
    mean_error_probability: float


# --------------------------------------------------------------------------
def extract_read_id(header: str) -> str:
    """
    Identifier token of a FASTQ header line.

    "@read1 extra info" -> "read1"   (marker stripped, metadata dropped)
    "@read1"            -> "@read1"  (no space: line returned as-is)
    " extra"            -> "NaN"     (empty token before the space)
    """
    token, sep, _ = header.partition(" ")
    if not sep:
        return header
    if not token:
        return MISSING_READ_ID
    return token[1:]


# --------------------------------------------------------------------------
def compute_statistics(quality: str) -> Tuple[float, int]:
    """
    Return (mean error probability, read length) for a Phred+33 string.

    Every character is scored, unlike the histogram which skips codes outside
    the printable range.  A score outside the lookup table raises IndexError.
    An empty string gives (nan, 0).
    """
    phred = quality_to_phred(quality)
    n = int(phred.size)
    if n == 0:
        return float("nan"), 0

    check_phred_range(phred)
    # sequential left-to-right sum
    total = float(np.cumsum(PHRED_TO_ERROR_PROB[phred])[-1])
    return total / n, n


# ------------- per-read analysis ----------
def analyse_read(header: str, quality: str) -> ReadStats:
    """Identifier, length, mean-equivalent Phred and mean error probability."""
    mean_err, read_len = compute_statistics(quality)
    return ReadStats(
        read_id=extract_read_id(header),
        read_length=read_len,
        mean_phred=error_probability_to_phred(mean_err),
        mean_error_probability=mean_err,
    )
