from .histogram import QualityHistogram

__all__ = ["QualityHistogram"]
