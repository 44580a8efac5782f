from .driver import run_quality_pipeline, resolve_config

__all__ = ["run_quality_pipeline", "resolve_config"]
