"""Frame-based animation with play, pause, end and cooldown states."""

from __future__ import annotations

import enum
import logging
from typing import Sequence

logger = logging.getLogger(__name__)


class AnimationState(enum.Enum):
    PLAY = enum.auto()
    PAUSE = enum.auto()
    COOLDOWN = enum.auto()
    ENDED = enum.auto()


class Animation:
    """A sequence of frames advanced by elapsed time."""

    def __init__(
        self,
        frames: Sequence[str],
        play: bool,
        interval: float,
        looping: bool,
        cooldown: float,
    ) -> None:
        self.frames = list(frames)
        self.state = AnimationState.PLAY if play else AnimationState.PAUSE
        self.interval = interval
        self.looping = looping
        self.cooldown = cooldown
        self.index = 0
        self._time_since_frame = 0.0
        self._cooldown_end = 0.0
        self._frame_changed = False

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def current_frame(self) -> str:
        return self.frames[self.index]

    @property
    def is_playing(self) -> bool:
        return self.state is AnimationState.PLAY

    def set_current_frame(self, index: int) -> None:
        """Jump to a frame; after ending, playing resumes from here."""
        self.index = index
        if self.state in (AnimationState.ENDED, AnimationState.COOLDOWN):
            self._frame_changed = True

    def play(self) -> None:
        if self.state is AnimationState.PLAY:
            return
        if self.state in (AnimationState.ENDED, AnimationState.COOLDOWN):
            self.index = self.index if self._frame_changed else 0
            self._frame_changed = False
        self.state = AnimationState.PLAY

    def pause(self) -> None:
        if self.state in (AnimationState.PLAY, AnimationState.COOLDOWN):
            self.state = AnimationState.PAUSE

    def update(self, now_ms: float, delta_ms: float) -> None:
        """Advance by ``delta_ms``; ``now_ms`` is the current elapsed time."""
        if self.state in (AnimationState.PAUSE, AnimationState.ENDED):
            logger.debug("animation is paused")
            return
        if self.state is AnimationState.COOLDOWN:
            if now_ms >= self._cooldown_end:
                self.play()
            return

        self._time_since_frame += delta_ms
        steps = int(self._time_since_frame / self.interval)
        if steps <= 0:
            return
        self.index += steps
        self._time_since_frame = 0.0

        if self.index >= self.frame_count:
            if self.looping:
                self._cooldown_end = now_ms + self.cooldown
            self.state = AnimationState.COOLDOWN if self.looping else AnimationState.ENDED
            self.index = self.frame_count - 1