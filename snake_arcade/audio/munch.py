"""
Munch Sound - a short synthesized chirp played when food is eaten.

The waveform is a square wave whose pitch sweeps up from 280 Hz to
480 Hz under a fast attack / exponential decay envelope. Nothing is read
from disk. If no audio device is available the cue silently turns off.
"""
import logging
from typing import Optional

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
DURATION = 0.30             # seconds
SWEEP_END = 0.18            # pitch reaches its peak here
ATTACK_END = 0.02
DECAY_END = 0.25
START_FREQ = 280.0
END_FREQ = 480.0
PEAK_GAIN = 0.2
FLOOR_GAIN = 0.0001


def _exp_ramp(t: np.ndarray, t0: float, t1: float, v0: float, v1: float) -> np.ndarray:
    """Exponential interpolation from v0 at t0 to v1 at t1, clamped outside."""
    frac = np.clip((t - t0) / (t1 - t0), 0.0, 1.0)
    return v0 * (v1 / v0) ** frac


def synthesize_munch(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Build the munch waveform.

    Args:
        sample_rate: Samples per second

    Returns:
        float32 array of samples in [-1, 1]
    """
    n = int(DURATION * sample_rate)
    t = np.arange(n) / sample_rate

    freq = _exp_ramp(t, 0.0, SWEEP_END, START_FREQ, END_FREQ)
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    square = np.where(np.sin(phase) >= 0, 1.0, -1.0)

    gain = np.where(
        t < ATTACK_END,
        _exp_ramp(t, 0.0, ATTACK_END, FLOOR_GAIN, PEAK_GAIN),
        _exp_ramp(t, ATTACK_END, DECAY_END, PEAK_GAIN, FLOOR_GAIN),
    )
    gain[t > DECAY_END] = 0.0

    return (square * gain).astype("float32")


class MunchSound:
    """
    Fire-and-forget food cue.

    The mixer is opened lazily on the first unlock() or play(), which the
    front end calls from user input.
    """

    def __init__(self, enabled: bool = True, volume: float = 1.0):
        self.enabled = enabled
        self.volume = volume
        self._sound: Optional["pygame.mixer.Sound"] = None

    def unlock(self) -> bool:
        """
        Open the audio device and build the sound if not done yet.

        Returns:
            True if the cue is ready to play
        """
        if not self.enabled:
            return False
        if self._sound is not None:
            return True

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)

            frequency, _size, channels = pygame.mixer.get_init()
            samples = (synthesize_munch(frequency) * (2 ** 15 - 1)).astype(np.int16)
            if channels > 1:
                samples = np.repeat(samples[:, np.newaxis], channels, axis=1)

            self._sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
            self._sound.set_volume(self.volume)
        except pygame.error as e:
            logger.warning("Audio unavailable, munch sound disabled: %s", e)
            self.enabled = False
            return False

        return True

    def play(self) -> None:
        if self.unlock():
            self._sound.play()
