"""
sound cues for moves, wins and draws.

players never raise: a missing audio device is logged once and the game
carries on silently.
"""
import logging
from enum import Enum

import numpy as np

from .config import SAMPLE_RATE, START_MUTED, TONE_FLOOR, TONE_GAIN, TONES

logger = logging.getLogger(__name__)


class AudioUnavailable(RuntimeError):
    """no usable audio output"""


class SoundCue(Enum):
    MOVE = "move"
    WIN = "win"
    DRAW = "draw"

    @property
    def frequency(self) -> int:
        return TONES[self.value][0]

    @property
    def duration_ms(self) -> int:
        return TONES[self.value][1]


def synthesize_tone(frequency, duration_ms, sample_rate=SAMPLE_RATE,
                    gain=TONE_GAIN, floor=TONE_FLOOR) -> np.ndarray:
    """
    mono int16 sine tone whose amplitude decays exponentially
    from gain to floor over the tone's length
    """
    n = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(n, dtype=np.float64) / sample_rate
    envelope = gain * np.power(floor / gain, np.linspace(0.0, 1.0, n))
    wave = np.sin(2 * np.pi * frequency * t) * envelope
    return (wave * np.iinfo(np.int16).max).astype(np.int16)


class CuePlayer:
    """
    base player: handles muting and swallows AudioUnavailable.
    subclasses implement _emit(cue).
    """

    def __init__(self, muted=START_MUTED):
        self.muted = muted
        self._warned = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        logger.debug("sound %s", "muted" if self.muted else "on")
        return self.muted

    def play(self, cue: SoundCue):
        if self.muted:
            return
        try:
            self._emit(cue)
        except AudioUnavailable as e:
            if not self._warned:
                logger.warning("audio not supported: %s", e)
                self._warned = True
            else:
                logger.debug("audio not supported: %s", e)

    def _emit(self, cue: SoundCue):
        raise NotImplementedError


class SilentPlayer(CuePlayer):
    """used when no audio backend is wanted (tests, --muted runs without qt audio)"""

    def _emit(self, cue):
        pass
