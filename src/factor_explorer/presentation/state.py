"""
Session state of the dashboard and the transitions the UI handlers apply.

The Streamlit pages keep one :class:`DashboardState` in ``st.session_state``
and replace it with the return value of a handler on every interaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from factor_explorer.analytics.alignment import AlignmentResult, align
from factor_explorer.data_pipeline.series_store import SeriesStore
from factor_explorer.presentation.audio import AudioPlayback
from factor_explorer.presentation.selection import MAX_SERIES, SelectionRows

logger = logging.getLogger(__name__)

EMPTY_SELECTION_PROMPT = "Please select at least one factor."


@dataclass(frozen=True)
class DashboardState:
    rows: SelectionRows = field(default_factory=SelectionRows)
    audio: AudioPlayback = field(default_factory=AudioPlayback)
    plotted: tuple[str, ...] = ()
    alignment: AlignmentResult | None = None
    prompt: str | None = None

    @classmethod
    def initial(cls, default_factor: str | None = None, limit: int = MAX_SERIES) -> "DashboardState":
        return cls(rows=SelectionRows.initial(default_factor, limit=limit))


def add_row(state: DashboardState, default_factor: str | None = None) -> DashboardState:
    return replace(state, rows=state.rows.add_row(default_factor))


def remove_row(state: DashboardState, row_id: int) -> DashboardState:
    return replace(state, rows=state.rows.remove_row(row_id))


def set_factor(state: DashboardState, row_id: int, factor_id: str | None) -> DashboardState:
    return replace(state, rows=state.rows.set_factor(row_id, factor_id))


def plot(state: DashboardState, store: SeriesStore) -> DashboardState:
    """Rebuild the chart data from the current rows.

    An empty selection leaves the previous chart and table untouched and sets
    a prompt instead.
    """
    selection = state.rows.selection()
    if not selection:
        return replace(state, prompt=EMPTY_SELECTION_PROMPT)
    alignment = align(selection, store)
    logger.info("Plotted %s (%d dates)", list(alignment.factor_ids), len(alignment.axis))
    return replace(state, plotted=selection, alignment=alignment, prompt=None)


def toggle_audio(state: DashboardState, control: str) -> DashboardState:
    return replace(state, audio=state.audio.toggle(control))


def audio_finished(state: DashboardState) -> DashboardState:
    return replace(state, audio=state.audio.finished())


def audio_failed(state: DashboardState, error: str) -> DashboardState:
    return replace(state, audio=state.audio.failed(error))


def audio_started(state: DashboardState, ends_at: float) -> DashboardState:
    return replace(state, audio=state.audio.started(ends_at))


def audio_expired(state: DashboardState, now: float) -> DashboardState:
    """Apply the natural end of the active clip once *now* passes its end time."""
    audio = state.audio.expire(now)
    if audio is state.audio:
        return state
    return replace(state, audio=audio)
