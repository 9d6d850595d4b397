"""Leaderboard: every factor ranked by one metric of the stats snapshot."""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).parent.parent.parent
for _path in (_REPO_ROOT, _REPO_ROOT / "src"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

import streamlit as st

st.set_page_config(page_title="Leaderboard · Factor Explorer", page_icon="🏆", layout="wide")

from app.charts import leaderboard_bar  # noqa: E402
from app.layout import render_sidebar  # noqa: E402
from app.services import get_settings, require_dashboard_data, require_table_columns  # noqa: E402
from app.ui import empty_state, page_header, section_label  # noqa: E402
from factor_explorer.configs import is_lower_better  # noqa: E402
from factor_explorer.presentation import leaderboard, metric_spec, top_n_bounds  # noqa: E402

render_sidebar()
page_header("🏆 Leaderboard", "All factors ranked by a single metric")

settings = get_settings()
data = require_dashboard_data()
columns = require_table_columns()

metrics = list(data.stats.metric_names)
if not metrics:
    empty_state("No metrics available", "The stats snapshot has no metric columns.")
    st.stop()

labels = {spec.name: spec.label for spec in columns}
configured = [spec.name for spec in columns if spec.name in metrics]
default_metric = configured[0] if configured else metrics[0]

# ── controls ──────────────────────────────────────────────────────────────────
metric_col, order_col, size_col = st.columns([3, 2, 3])
with metric_col:
    metric = st.selectbox(
        "Metric",
        metrics,
        index=metrics.index(default_metric),
        format_func=lambda m: labels.get(m, m),
    )
with order_col:
    order = st.radio("Order", ["Best first", "Worst first"], horizontal=True)
with size_col:
    max_rows, initial = top_n_bounds(len(data.stats), settings.leaderboard_top_n)
    if max_rows == 1:
        top_n = 1
        st.caption("Only one factor in the snapshot.")
    else:
        top_n = st.slider("Factors shown", min_value=1, max_value=max_rows, value=initial)

lower_better = is_lower_better(metric, columns)
if lower_better:
    st.caption("Lower values rank better for this metric.")

board = leaderboard(
    data.stats,
    metric,
    names=data.names,
    descending=order == "Best first",
    top_n=top_n,
    specs=columns,
)

if board.empty:
    empty_state("No values", f"No factor has a value for {labels.get(metric, metric)}.")
    st.stop()

# ── results ───────────────────────────────────────────────────────────────────
section_label(f"Top {len(board)} of {len(data.stats)}")
st.plotly_chart(
    leaderboard_bar(board, metric_spec(metric, columns).label, lower_is_better=lower_better),
    use_container_width=True,
)
st.dataframe(
    board.drop(columns=["Value"]).rename(columns={"Display": "Value"}),
    hide_index=True,
    use_container_width=True,
)
