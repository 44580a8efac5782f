from .phred import (
    PHRED_OFFSET,
    PHRED_TABLE_SIZE,
    PHRED_TO_ERROR_PROB,
    lookup,
    error_probability_to_phred,
)
from .analysis import ReadStats, extract_read_id, compute_statistics, analyse_read

__all__ = [
    "PHRED_OFFSET",
    "PHRED_TABLE_SIZE",
    "PHRED_TO_ERROR_PROB",
    "lookup",
    "error_probability_to_phred",
    "ReadStats",
    "extract_read_id",
    "compute_statistics",
    "analyse_read",
]
