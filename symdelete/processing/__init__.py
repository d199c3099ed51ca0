"""Processing pipeline for symdelete."""

from symdelete.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
