"""
Plotly chart builders for the Factor Explorer dashboard.

All figures use `plotly.graph_objects` and follow the design system defined
in `app.ui`.
"""

from __future__ import annotations

import plotly.graph_objects as go
import pandas as pd

from app.ui import ACCENT, BORDER_DEFAULT, DANGER, SERIES_COLORS, SUCCESS, base_fig
from factor_explorer.analytics.alignment import AlignmentResult
from factor_explorer.data_pipeline.name_resolver import NameResolver


def cumulative_wealth_chart(
    alignment: AlignmentResult,
    names: NameResolver,
    title: str = "Cumulative Returns",
    height: int = 520,
) -> go.Figure:
    """
    Growth of $1 for every plotted factor on a logarithmic y axis.

    Absent values (before a factor's first observation) are passed as ``None``
    so Plotly leaves a gap instead of drawing from zero.

    Args:
        alignment: Output of :func:`factor_explorer.analytics.align`.
        names: Resolver for legend labels.
        title: Chart title.
        height: Figure height in pixels.

    Returns:
        A :class:`plotly.graph_objects.Figure`.
    """
    fig = base_fig(title, height=height)
    dates = pd.to_datetime(list(alignment.axis))

    for i, factor_id in enumerate(alignment.factor_ids):
        fig.add_trace(
            go.Scatter(
                x=dates,
                y=alignment.values(factor_id),
                mode="lines",
                name=names.display_name(factor_id),
                line=dict(color=SERIES_COLORS[i % len(SERIES_COLORS)], width=1.8),
                connectgaps=False,
                hovertemplate="%{y:.3f}",
            )
        )

    fig.update_xaxes(title_text="Date")
    fig.update_yaxes(type="log", title_text="Growth of $1 (Log Scale)")
    return fig


def leaderboard_bar(
    board: pd.DataFrame,
    metric_label: str,
    lower_is_better: bool = False,
    height: int | None = None,
) -> go.Figure:
    """
    Horizontal bar chart of a leaderboard frame, best factor on top.

    Args:
        board: Frame returned by :func:`factor_explorer.presentation.leaderboard`.
        metric_label: Axis title for the values.
        lower_is_better: Colour bars for inverted polarity.
        height: Optional fixed height; defaults to one band per row.

    Returns:
        A :class:`plotly.graph_objects.Figure`.
    """
    rows = len(board)
    fig = base_fig(metric_label, height=height or max(260, 28 * rows + 80))
    if rows == 0:
        return fig

    values = board["Value"].astype(float).tolist()
    if lower_is_better:
        colors = [ACCENT for _ in values]
    else:
        colors = [SUCCESS if v >= 0 else DANGER for v in values]

    fig.add_trace(
        go.Bar(
            x=values,
            y=board["Factor"].tolist(),
            orientation="h",
            marker_color=colors,
            text=board["Display"].tolist(),
            textposition="outside",
            hovertemplate="%{y}: %{x:.2f}<extra></extra>",
        )
    )

    fig.add_vline(x=0, line_color=BORDER_DEFAULT, line_width=1)
    fig.update_layout(hovermode="closest", showlegend=False)
    # Position 1 at the top.
    fig.update_yaxes(autorange="reversed", showgrid=False)
    return fig


__all__ = [
    "cumulative_wealth_chart",
    "leaderboard_bar",
]
