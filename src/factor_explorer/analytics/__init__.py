"""Alignment engine and client-side factor metrics."""

from .alignment import AlignedPoint, AlignmentResult, align, cumulative_on_axis, master_axis
from .factor_metrics import annualized_stats, compute_stats_frame, rank_metric

__all__ = [
    "AlignedPoint",
    "AlignmentResult",
    "align",
    "annualized_stats",
    "compute_stats_frame",
    "cumulative_on_axis",
    "master_axis",
    "rank_metric",
]
