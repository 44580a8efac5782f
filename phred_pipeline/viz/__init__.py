from .plots import plot_phred_histogram

__all__ = ["plot_phred_histogram"]
