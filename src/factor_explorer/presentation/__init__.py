"""UI-independent presentation logic: selection, playback, table and leaderboard."""

from .audio import PLAY_LABEL, STOP_LABEL, AudioPlayback, audio_path, clip_duration, load_audio
from .leaderboard import leaderboard, metric_spec, top_n_bounds
from .performance_table import NOT_AVAILABLE, build_performance_rows, format_cell, performance_frame
from .selection import MAX_SERIES, SelectionRows, SelectorRow
from .state import (
    EMPTY_SELECTION_PROMPT,
    DashboardState,
    add_row,
    audio_expired,
    audio_failed,
    audio_finished,
    audio_started,
    plot,
    remove_row,
    set_factor,
    toggle_audio,
)

__all__ = [
    "AudioPlayback",
    "DashboardState",
    "EMPTY_SELECTION_PROMPT",
    "MAX_SERIES",
    "NOT_AVAILABLE",
    "PLAY_LABEL",
    "STOP_LABEL",
    "SelectionRows",
    "SelectorRow",
    "add_row",
    "audio_expired",
    "audio_failed",
    "audio_finished",
    "audio_path",
    "audio_started",
    "build_performance_rows",
    "clip_duration",
    "format_cell",
    "leaderboard",
    "load_audio",
    "metric_spec",
    "performance_frame",
    "plot",
    "remove_row",
    "set_factor",
    "toggle_audio",
    "top_n_bounds",
]
