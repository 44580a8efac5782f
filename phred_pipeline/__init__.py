"""
Top-level namespace 
"""
from importlib.metadata import version as _ver, PackageNotFoundError

try:          
    __version__ = _ver("phredstats")
except PackageNotFoundError:
    __version__ = "0+local"

# ----- high-level API ------------------------------------------------
from .pipeline.driver import run_quality_pipeline
from .core.analysis import analyse_read, extract_read_id, compute_statistics
from .core.phred import PHRED_TO_ERROR_PROB, error_probability_to_phred
from .stats.histogram import QualityHistogram

__all__ = [
    "run_quality_pipeline",
    "analyse_read",
    "extract_read_id",
    "compute_statistics",
    "error_probability_to_phred",
    "PHRED_TO_ERROR_PROB",
    "QualityHistogram",
]
