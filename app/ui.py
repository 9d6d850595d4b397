"""
Design-system helpers for the Factor Explorer dashboard.

Provides:
    - inject_global_css()  — single CSS injection for every page
    - page_header()        — standard page header with optional right slot
    - section_label()      — small uppercase section label
    - metric_row()         — row of styled summary tiles
    - empty_state()        — placeholder shown before the first plot
    - PLOTLY_TEMPLATE      — Plotly layout dict matching the design system
    - apply_chart_style()  — apply the template to any go.Figure
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go
import streamlit as st

# ═══════════════════════════════════════════════════════════════════════════════
# DESIGN TOKENS
# ═══════════════════════════════════════════════════════════════════════════════

# Backgrounds
BG_BASE = "#FFFFFF"
BG_SURFACE = "#FFFFFF"
BG_MUTED = "#F7F8FA"

# Borders
BORDER_DEFAULT = "#E0E0E0"

# Text
TEXT_PRIMARY = "#111827"
TEXT_SECONDARY = "#6B7280"
TEXT_MUTED = "#9CA3AF"

# Accent
ACCENT = "#2563EB"

# Semantic
SUCCESS = "#10B981"
WARNING = "#F59E0B"
DANGER = "#EF4444"
PURPLE = "#8B5CF6"

# One colour per selector row, in row order (at most five series are plotted).
SERIES_COLORS: tuple[str, ...] = (ACCENT, "#E4572E", SUCCESS, PURPLE, WARNING)

# Typography
FONT_SANS = "'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"
FONT_MONO = "'Roboto Mono', 'Fira Code', 'SF Mono', monospace"


# ═══════════════════════════════════════════════════════════════════════════════
# GLOBAL CSS INJECTION
# ═══════════════════════════════════════════════════════════════════════════════

_GLOBAL_CSS = f"""
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

html, body, [class*="css"], .stApp {{
    font-family: {FONT_SANS} !important;
    color: {TEXT_PRIMARY} !important;
}}

.block-container {{
    padding-top: 2rem !important;
    padding-bottom: 2rem !important;
    max-width: 1280px !important;
}}

h3 {{
    font-size: 0.75rem !important;
    font-weight: 600 !important;
    text-transform: uppercase !important;
    letter-spacing: 1.2px !important;
    color: {TEXT_MUTED} !important;
}}

[data-testid="stSidebarNav"] {{ display: none !important; }}

[data-testid="stDataFrame"] td, code, pre {{
    font-family: {FONT_MONO} !important;
}}

.stButton > button {{
    border-radius: 4px !important;
    font-size: 0.85rem !important;
}}

/* ── Custom utilities ──────────────────────────────────────────────────────── */
.fx-page-header {{
    display: flex;
    align-items: baseline;
    justify-content: space-between;
    border-bottom: 1px solid {BORDER_DEFAULT};
    padding-bottom: 14px;
    margin-bottom: 20px;
}}
.fx-page-header .fx-title {{
    font-size: 1.6rem;
    font-weight: 600;
    color: {TEXT_PRIMARY};
}}
.fx-page-header .fx-subtitle {{
    font-size: 0.8rem;
    color: {TEXT_MUTED};
    margin-top: 4px;
}}
.fx-section-label {{
    font-size: 0.7rem;
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 1.2px;
    color: {TEXT_MUTED};
    margin: 8px 0 10px 0;
}}
.fx-metric-strip {{ display: flex; gap: 16px; flex-wrap: wrap; }}
.fx-metric-tile {{
    border: 1px solid {BORDER_DEFAULT};
    border-left: 3px solid var(--accent-color, {ACCENT});
    border-radius: 4px;
    padding: 12px 16px;
    flex: 1;
    min-width: 140px;
}}
.fx-metric-label {{
    font-size: 0.7rem;
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 1px;
    color: {TEXT_MUTED};
}}
.fx-metric-value {{
    font-family: {FONT_MONO};
    font-size: 1.3rem;
    font-weight: 600;
    color: {TEXT_PRIMARY};
}}
.fx-empty-state {{
    padding: 40px 24px;
    text-align: center;
    border: 1px dashed {BORDER_DEFAULT};
    border-radius: 4px;
    background: {BG_MUTED};
    margin-bottom: 16px;
}}
.fx-empty-title {{ font-size: 1rem; font-weight: 600; color: {TEXT_SECONDARY}; }}
.fx-empty-hint {{ font-size: 0.85rem; color: {TEXT_MUTED}; margin-top: 6px; }}
.fx-sidebar-footer {{
    text-align: center;
    color: {TEXT_MUTED};
    font-size: 0.72rem;
    margin-top: 1rem;
    padding-top: 0.5rem;
    border-top: 1px solid {BORDER_DEFAULT};
    font-family: {FONT_MONO};
}}
</style>
"""


def inject_global_css() -> None:
    """Inject the global design-system CSS. Called from render_sidebar()."""
    st.markdown(_GLOBAL_CSS, unsafe_allow_html=True)


# ═══════════════════════════════════════════════════════════════════════════════
# PAGE COMPONENTS
# ═══════════════════════════════════════════════════════════════════════════════


def page_header(title: str, subtitle: str = "", right_slot: str = "") -> None:
    """
    Render a standardised page header.

    Args:
        title: Page title (may include leading emoji).
        subtitle: Gray subtitle text below the title.
        right_slot: Optional HTML for the right-aligned slot.
    """
    right_html = f"<div>{right_slot}</div>" if right_slot else ""
    st.markdown(
        f'<div class="fx-page-header">'
        f'<div><div class="fx-title">{title}</div><div class="fx-subtitle">{subtitle}</div></div>'
        f"{right_html}"
        f"</div>",
        unsafe_allow_html=True,
    )


def section_label(title: str) -> None:
    st.markdown(f'<div class="fx-section-label">{title}</div>', unsafe_allow_html=True)


def metric_row(metrics: list[dict[str, str]]) -> None:
    """
    Render a horizontal row of summary tiles.

    Each item needs ``label`` and ``value``; ``color`` sets the accent strip.
    """
    tiles = ""
    for m in metrics:
        accent = m.get("color", "")
        style = f'style="--accent-color: {accent};"' if accent else ""
        tiles += (
            f'<div class="fx-metric-tile" {style}>'
            f'<div class="fx-metric-label">{m["label"]}</div>'
            f'<div class="fx-metric-value">{m["value"]}</div>'
            f"</div>"
        )
    st.markdown(f'<div class="fx-metric-strip">{tiles}</div>', unsafe_allow_html=True)


def empty_state(title: str = "Nothing plotted yet", hint: str = "") -> None:
    hint_html = f'<div class="fx-empty-hint">{hint}</div>' if hint else ""
    st.markdown(
        f'<div class="fx-empty-state"><div class="fx-empty-title">{title}</div>{hint_html}</div>',
        unsafe_allow_html=True,
    )


def sidebar_footer(version: str) -> None:
    st.markdown(
        f'<div class="fx-sidebar-footer">{version} &nbsp;·&nbsp; factor_explorer</div>',
        unsafe_allow_html=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PLOTLY CHART THEME
# ═══════════════════════════════════════════════════════════════════════════════

PLOTLY_TEMPLATE: dict[str, Any] = dict(
    template="plotly_white",
    margin=dict(l=16, r=16, t=40, b=16),
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family=FONT_SANS, color=TEXT_SECONDARY, size=12),
    legend=dict(
        bgcolor="rgba(0,0,0,0)",
        font=dict(family=FONT_SANS, size=11, color=TEXT_SECONDARY),
        orientation="h",
        y=-0.15,
    ),
    hovermode="x unified",
    hoverlabel=dict(
        bgcolor=BG_SURFACE,
        bordercolor=BORDER_DEFAULT,
        font=dict(family=FONT_MONO, size=11, color=TEXT_PRIMARY),
    ),
    colorway=list(SERIES_COLORS),
)

_AXIS_STYLE = dict(
    showgrid=True,
    gridcolor="#F1F3F5",
    zeroline=False,
    linecolor=BORDER_DEFAULT,
    tickfont=dict(family=FONT_MONO, size=10, color=TEXT_MUTED),
)


def apply_chart_style(fig: go.Figure, height: int | None = None) -> go.Figure:
    """Apply the design-system template to *fig* in place and return it."""
    layout_update = dict(PLOTLY_TEMPLATE)
    if height is not None:
        layout_update["height"] = height
    fig.update_layout(**layout_update)
    fig.update_xaxes(**_AXIS_STYLE)
    fig.update_yaxes(**_AXIS_STYLE)
    return fig


def base_fig(title: str = "", height: int | None = None) -> go.Figure:
    """Create a new empty Figure pre-styled with the design-system theme."""
    fig = apply_chart_style(go.Figure(), height=height)
    fig.update_layout(title=dict(text=title, x=0))
    return fig


__all__ = [
    "inject_global_css",
    "page_header",
    "section_label",
    "metric_row",
    "empty_state",
    "sidebar_footer",
    "PLOTLY_TEMPLATE",
    "apply_chart_style",
    "base_fig",
    "ACCENT",
    "BORDER_DEFAULT",
    "DANGER",
    "PURPLE",
    "SERIES_COLORS",
    "SUCCESS",
    "TEXT_MUTED",
    "TEXT_PRIMARY",
    "TEXT_SECONDARY",
    "WARNING",
]
