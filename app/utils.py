"""
Utility helpers for the Factor Explorer dashboard.
"""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from factor_explorer.data_pipeline.loader import DashboardData
from factor_explorer.presentation.state import DashboardState

logger = logging.getLogger(__name__)

STATE_KEY = "factor_explorer_state"


# ── selector options ──────────────────────────────────────────────────────────


def factor_options(data: DashboardData) -> list[str]:
    """
    Factor ids offered by every selector, ordered by display name.

    Every factor in the name mapping is offered; when the mapping is empty the
    raw ids from the returns file are used instead.
    """
    entries = data.names.entries_sorted_by_display_name()
    if entries:
        return [entry.factor_id for entry in entries]
    return list(data.series.factor_ids)


# ── session state ─────────────────────────────────────────────────────────────


def get_state(default_factor: str | None) -> DashboardState:
    """Return this session's dashboard state, creating it with one row on first use."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DashboardState.initial(default_factor)
        logger.debug("New dashboard session (default factor %s)", default_factor)
    return st.session_state[STATE_KEY]


def set_state(state: DashboardState) -> None:
    st.session_state[STATE_KEY] = state


# ── formatting ────────────────────────────────────────────────────────────────


def fmt_date(value: date | None) -> str:
    if value is None:
        return "—"
    return value.strftime("%Y-%m")


__all__ = [
    "STATE_KEY",
    "factor_options",
    "fmt_date",
    "get_state",
    "set_state",
]
