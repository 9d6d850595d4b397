"""
Single-instance audio preview playback.

At most one control is ever playing.  The state is either idle
(``active is None``) or playing one control; every transition returns a new
:class:`AudioPlayback`:

* ``toggle(c)`` while idle                -> playing ``c``
* ``toggle(c)`` while playing ``c``       -> idle (manual stop)
* ``toggle(d)`` while playing ``c``       -> idle, then playing ``d``
* ``stop()`` / ``finished()`` / ``failed()`` -> idle
* ``expire(now)`` past the clip's end        -> idle (natural end)
"""

from __future__ import annotations

import io
import logging
import wave
from dataclasses import dataclass, replace
from pathlib import Path

logger = logging.getLogger(__name__)

AUDIO_SUBDIR = "audio_portfolios"
PLAY_LABEL = "▶ Play"
STOP_LABEL = "⏸ Stop"


def audio_path(factor_id: str, base_dir: Path | str | None = None) -> Path:
    """Per-factor preview file; existence is not checked before playback."""
    filename = f"portfolio_{factor_id}.wav"
    if base_dir is None:
        return Path(AUDIO_SUBDIR) / filename
    return Path(base_dir) / filename


@dataclass(frozen=True)
class AudioPlayback:
    active: str | None = None
    last_error: str | None = None
    ends_at: float | None = None

    @property
    def is_playing(self) -> bool:
        return self.active is not None

    def is_active(self, control: str) -> bool:
        return self.active == control

    def label_for(self, control: str) -> str:
        return STOP_LABEL if self.is_active(control) else PLAY_LABEL

    def toggle(self, control: str) -> "AudioPlayback":
        if self.active == control:
            return self.stop()
        if self.is_playing:
            logger.debug("audio: stop %s", self.active)
        logger.debug("audio: start %s", control)
        return AudioPlayback(active=control)

    def stop(self) -> "AudioPlayback":
        if self.active is not None:
            logger.debug("audio: stop %s", self.active)
        return AudioPlayback(active=None, last_error=None)

    def finished(self) -> "AudioPlayback":
        """Natural end of playback resets exactly like a manual stop."""
        return self.stop()

    def failed(self, error: str) -> "AudioPlayback":
        logger.warning("audio: playback of %s failed: %s", self.active, error)
        return AudioPlayback(active=None, last_error=error)

    def started(self, ends_at: float) -> "AudioPlayback":
        """Record when the active clip runs out; ignored while idle."""
        if self.active is None:
            return self
        return replace(self, ends_at=ends_at)

    def expire(self, now: float) -> "AudioPlayback":
        if self.active is not None and self.ends_at is not None and now >= self.ends_at:
            logger.debug("audio: %s reached its end", self.active)
            return self.finished()
        return self


def clip_duration(payload: bytes) -> float | None:
    """Length of a WAV clip in seconds, or ``None`` when it cannot be read as WAV."""
    try:
        with wave.open(io.BytesIO(payload), "rb") as clip:
            rate = clip.getframerate()
            return clip.getnframes() / rate if rate else None
    except (wave.Error, EOFError) as exc:
        logger.debug("audio: no duration for clip: %s", exc)
        return None


def load_audio(control: str, playback: AudioPlayback, base_dir: Path | str | None) -> tuple[AudioPlayback, bytes | None]:
    """Read the active preview's bytes, moving to idle with an error on failure."""
    if not playback.is_active(control):
        return playback, None
    path = audio_path(control, base_dir)
    try:
        return playback, path.read_bytes()
    except OSError as exc:
        return playback.failed(f"Could not load audio for {control}: {exc}"), None
