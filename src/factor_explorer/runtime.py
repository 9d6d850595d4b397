from __future__ import annotations

import logging

from factor_explorer.analytics.factor_metrics import compute_stats_frame
from factor_explorer.configs import MetricSpec, load_metric_set
from factor_explorer.data_pipeline.loader import DashboardData, load_dashboard_data
from factor_explorer.observability.logging import configure_logging
from factor_explorer.settings import DashboardSettings

logger = logging.getLogger(__name__)


def setup_logging(settings: DashboardSettings) -> None:
    configure_logging(settings.log_level, json_format=settings.log_json, log_file=settings.log_file)


def load_for_settings(settings: DashboardSettings) -> DashboardData:
    """Run the startup load with the stats source and filters from *settings*."""
    logger.info(
        "Loading dashboard data from %s (stats=%s, duplicates=%s)",
        settings.data_dir,
        settings.stats_source,
        settings.duplicate_policy,
    )
    return load_dashboard_data(
        settings.paths,
        location=settings.location,
        weighting=settings.weighting,
        duplicate_policy=settings.duplicate_policy,  # type: ignore[arg-type]
        stats_builder=compute_stats_frame if settings.computes_stats else None,
    )


def table_columns(settings: DashboardSettings) -> tuple[MetricSpec, ...]:
    return load_metric_set(settings.metric_set)
