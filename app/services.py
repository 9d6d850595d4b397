"""
Singleton service layer for the Factor Explorer dashboard.

The startup snapshots are loaded once per server process via
@st.cache_resource and shared across all pages and sessions.
"""

from __future__ import annotations

import logging

import streamlit as st

from factor_explorer.configs import ConfigError, MetricSpec
from factor_explorer.data_pipeline.errors import StartupLoadError
from factor_explorer.data_pipeline.loader import DashboardData
from factor_explorer.observability import log_event
from factor_explorer.runtime import load_for_settings, setup_logging, table_columns
from factor_explorer.settings import DashboardSettings

logger = logging.getLogger(__name__)


# ── service factories ─────────────────────────────────────────────────────────


@st.cache_resource(show_spinner=False)
def get_settings() -> DashboardSettings:
    """Read the environment once and configure logging from it."""
    settings = DashboardSettings.from_env()
    setup_logging(settings)
    logger.info("Settings: data_dir=%s stats_source=%s", settings.data_dir, settings.stats_source)
    return settings


@st.cache_resource(show_spinner="Loading factor data…")
def get_dashboard_data() -> DashboardData:
    """
    Return the cached startup load.

    Raises:
        StartupLoadError: A snapshot could not be read or parsed.  Streamlit
            does not cache exceptions, so the next rerun retries the load.
    """
    data = load_for_settings(get_settings())
    log_event(
        logger,
        "startup_load",
        series=len(data.series),
        names=len(data.names),
        stats=len(data.stats),
    )
    return data


def require_dashboard_data() -> DashboardData:
    """Return the loaded data, or show one blocking error and halt the page."""
    try:
        return get_dashboard_data()
    except StartupLoadError as exc:
        logger.error("Startup load failed: %s", exc)
        st.error(exc.user_message)
        st.stop()
        raise


def require_table_columns() -> tuple[MetricSpec, ...]:
    """Return the configured metric column set, or halt the page on a bad name."""
    try:
        return table_columns(get_settings())
    except ConfigError as exc:
        logger.error("Metric set error: %s", exc)
        st.error(str(exc))
        st.stop()
        raise


__all__ = [
    "get_settings",
    "get_dashboard_data",
    "require_dashboard_data",
    "require_table_columns",
]
