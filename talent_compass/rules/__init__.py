"""Retention and succession rules over classified employees."""

from .recommendations import development_plan, recommend
from .retention import RetentionCase, retention_spotlight, retention_summary, retention_watchlist
from .succession import PipelineEntry, SuccessionPipeline, succession_pipeline

__all__ = [
    "PipelineEntry",
    "RetentionCase",
    "SuccessionPipeline",
    "development_plan",
    "recommend",
    "retention_spotlight",
    "retention_summary",
    "retention_watchlist",
    "succession_pipeline",
]
