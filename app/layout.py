"""
Shared sidebar and page-level layout helpers for the Factor Explorer dashboard.
"""

from __future__ import annotations

import streamlit as st

from app.services import get_dashboard_data, get_settings
from app.ui import inject_global_css, sidebar_footer
from app.utils import fmt_date
from factor_explorer import __version__
from factor_explorer.data_pipeline.errors import StartupLoadError

# ── navigation pages ──────────────────────────────────────────────────────────
_PAGES = [
    ("📈", "Explorer", "main.py"),
    ("🏆", "Leaderboard", "pages/1_Leaderboard.py"),
]


def _data_status_lines() -> list[str]:
    settings = get_settings()
    lines = [
        f"📂 **Data dir:** `{settings.data_dir}`",
        f"🧮 **Stats:** `{settings.stats_source}` · columns `{settings.metric_set}`",
        f"🌍 **Universe:** `{settings.location} / {settings.weighting}`",
    ]
    try:
        data = get_dashboard_data()
    except StartupLoadError:
        # The page body reports the failure; the sidebar only shows it is offline.
        lines.append("⚫ **Snapshots:** not loaded")
        return lines

    last_dates = [series[-1].date for series in (data.series.get(f) for f in data.series) if series]
    last = max(last_dates) if last_dates else None
    lines.append(f"🟢 **Factors:** {len(data.series)} series · {len(data.stats)} with stats")
    lines.append(f"📅 **Last return:** `{fmt_date(last)}`")
    return lines


# ── public API ────────────────────────────────────────────────────────────────


def render_sidebar() -> None:
    """Render the shared sidebar: title, navigation, data status."""
    inject_global_css()
    with st.sidebar:
        st.markdown("### Factor Explorer")
        st.caption("Developed markets · value-weighted (capped)")

        st.divider()

        st.markdown("**Navigation**")
        for icon, name, page_path in _PAGES:
            st.page_link(page_path, label=f"{icon} {name}")

        st.divider()

        with st.expander("Data Status", expanded=False):
            for line in _data_status_lines():
                st.markdown(line)

        sidebar_footer(f"v{__version__}")


__all__ = ["render_sidebar"]
