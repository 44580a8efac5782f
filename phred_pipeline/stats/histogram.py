from __future__ import annotations
import numpy as np
import pandas as pd

from ..core.phred import PHRED_OFFSET, PHRED_TABLE_SIZE

PRINTABLE_MIN, PRINTABLE_MAX = 0x21, 0x7F


class QualityHistogram:
    """
    Global per-base Phred counts, one uint64 bucket per score.

    Only characters in [0x21, 0x7f] are counted; anything else is skipped
    without error.
    """

    def __init__(self, size: int = PHRED_TABLE_SIZE):
        self.counts = np.zeros(size, dtype=np.uint64)

    def __len__(self) -> int:
        return int(self.counts.size)

    def record(self, quality: str) -> None:
        codes = np.fromiter(map(ord, quality), dtype=np.int64, count=len(quality))
        codes = codes[(codes >= PRINTABLE_MIN) & (codes <= PRINTABLE_MAX)]
        if codes.size:
            self.counts += np.bincount(codes - PHRED_OFFSET,
                                       minlength=self.counts.size).astype(np.uint64)

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "phred_score": np.arange(self.counts.size),
            "count": self.counts,
        })
