"""Release aggregation engine."""

from .aggregator import ReleaseAggregator
from .progress import NullReleaseProgress, ReleaseProgress

__all__ = ["NullReleaseProgress", "ReleaseAggregator", "ReleaseProgress"]
