"""
Factor Explorer entry point.

Launch with:
    streamlit run app/main.py
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

# ── make the repo root and src/ importable ────────────────────────────────────
_REPO_ROOT = Path(__file__).parent.parent
for _path in (_REPO_ROOT, _REPO_ROOT / "src"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

# ── streamlit page config (must be first st call) ─────────────────────────────
import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Factor Explorer",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── shared helpers ─────────────────────────────────────────────────────────────
from app.charts import cumulative_wealth_chart  # noqa: E402
from app.layout import render_sidebar  # noqa: E402
from app.services import require_dashboard_data, require_table_columns  # noqa: E402
from app.ui import ACCENT, PURPLE, empty_state, metric_row, page_header, section_label  # noqa: E402
from app.utils import factor_options, fmt_date, get_state, set_state  # noqa: E402
from factor_explorer.presentation import (  # noqa: E402
    add_row,
    audio_expired,
    audio_failed,
    audio_started,
    build_performance_rows,
    clip_duration,
    load_audio,
    performance_frame,
    plot,
    remove_row,
    set_factor,
    toggle_audio,
)
from factor_explorer.presentation.performance_table import CODE_COLUMN  # noqa: E402

# ── sidebar ────────────────────────────────────────────────────────────────────
render_sidebar()

page_header(
    "📈 Factor Explorer",
    "Cumulative returns and performance of equity factors",
)

data = require_dashboard_data()
columns = require_table_columns()
options = factor_options(data)
state = get_state(options[0] if options else None)

# ── selector rows ─────────────────────────────────────────────────────────────
section_label(f"Series ({len(state.rows)}/{state.rows.limit})")

for row in state.rows.rows:
    pick_col, remove_col = st.columns([8, 1])
    with pick_col:
        index = options.index(row.factor_id) if row.factor_id in options else None
        picked = st.selectbox(
            f"Factor {row.row_id}",
            options,
            index=index,
            format_func=data.names.display_name,
            key=f"factor_row_{row.row_id}",
            label_visibility="collapsed",
            placeholder="Choose a factor",
        )
    if picked != row.factor_id:
        state = set_factor(state, row.row_id, picked)
        set_state(state)
    with remove_col:
        if st.button("✕", key=f"remove_row_{row.row_id}", help="Remove this series"):
            set_state(remove_row(state, row.row_id))
            st.rerun()

add_col, plot_col, _ = st.columns([1, 1, 4])
with add_col:
    if st.button("＋ Add series", disabled=state.rows.is_full, use_container_width=True):
        set_state(add_row(state, options[0] if options else None))
        st.rerun()
with plot_col:
    if st.button("Plot", type="primary", use_container_width=True):
        state = plot(state, data.series)
        set_state(state)
        if state.prompt:
            st.warning(state.prompt)

# ── chart ─────────────────────────────────────────────────────────────────────
alignment = state.alignment
if alignment is None:
    empty_state("Nothing plotted yet", "Pick up to five factors and press Plot.")
    st.stop()

metric_row([
    {"label": "Factors plotted", "value": str(len(alignment.factor_ids)), "color": ACCENT},
    {"label": "First date", "value": fmt_date(alignment.axis[0] if alignment.axis else None), "color": PURPLE},
    {"label": "Last date", "value": fmt_date(alignment.axis[-1] if alignment.axis else None), "color": PURPLE},
])
if alignment.skipped:
    st.info(
        "No return series for: "
        + ", ".join(data.names.display_name(f) for f in alignment.skipped)
    )

st.plotly_chart(
    cumulative_wealth_chart(alignment, data.names),
    use_container_width=True,
)

# ── performance table ─────────────────────────────────────────────────────────
section_label("Performance")
table = performance_frame(state.plotted, data.stats, data.names, columns)
if table.empty:
    st.info("No performance statistics for the plotted factors.")
else:
    st.dataframe(table, hide_index=True, use_container_width=True)

# ── audio previews ────────────────────────────────────────────────────────────

@st.fragment(run_every=1.0)
def _watch_playback_end() -> None:
    """Reset the Stop button to Play once the active clip has run out."""
    current = get_state(None)
    expired = audio_expired(current, time.time())
    if expired is not current:
        set_state(expired)
        st.rerun(scope="app")


rows_with_stats = build_performance_rows(state.plotted, data.stats, data.names, columns)
if rows_with_stats:
    section_label("Audio previews")
    button_cols = st.columns(len(rows_with_stats))
    for col, table_row in zip(button_cols, rows_with_stats):
        factor_id = table_row[CODE_COLUMN]
        with col:
            label = f"{state.audio.label_for(factor_id)}  {data.names.display_name(factor_id)}"
            if st.button(label, key=f"audio_{factor_id}", use_container_width=True):
                set_state(toggle_audio(state, factor_id))
                st.rerun()

if state.audio.active is not None:
    playback, payload = load_audio(state.audio.active, state.audio, data.paths.audio_dir)
    if payload is None:
        state = audio_failed(state, playback.last_error or "audio unavailable")
        set_state(state)
    else:
        if state.audio.ends_at is None:
            duration = clip_duration(payload)
            if duration is not None:
                state = audio_started(state, time.time() + duration)
                set_state(state)
        st.audio(payload, format="audio/wav", autoplay=True)
        if state.audio.ends_at is not None:
            _watch_playback_end()

if state.audio.last_error:
    st.error(state.audio.last_error, icon="🔇")
    st.caption(f"Audio previews are read from `{data.paths.audio_dir}`.")
