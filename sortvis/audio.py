"""Tone synthesis for the value under the cursor."""

from __future__ import annotations

import math
from array import array
from collections.abc import Callable
from dataclasses import dataclass

from .settings import Settings
from .utilities import map_range

SAMPLE_RATE = 44100
_INT16_MAX = 32767
_INT16_MIN = -32768


def _to_int16(value: float) -> int:
    return max(_INT16_MIN, min(_INT16_MAX, int(value)))


def sine_wave(time: int, freq: float, amplitude: float) -> int:
    """Return one 16-bit sample of a sine wave at sample index ``time``."""
    ticks_per_cycle = SAMPLE_RATE / freq
    cycles = time / ticks_per_cycle
    return _to_int16(math.sin(2 * math.pi * cycles) * (_INT16_MAX * amplitude))


def square_wave(time: int, freq: float, amplitude: float) -> int:
    """Return one 16-bit sample of a square wave at sample index ``time``."""
    ticks_per_cycle = int(SAMPLE_RATE / freq)
    if ticks_per_cycle <= 0:
        raise ValueError(f"frequency {freq} is too high for {SAMPLE_RATE} Hz")
    if time % ticks_per_cycle < ticks_per_cycle // 2:
        return _to_int16(_INT16_MAX * amplitude)
    return 0


@dataclass(frozen=True)
class Tone:
    """One second of mono 16-bit audio ready for playback."""

    samples: array
    pitch: float
    volume: float
    sample_rate: int = SAMPLE_RATE
    channels: int = 1


class Audio:
    """Turns values into tones and hands them to a playback sink."""

    def __init__(
        self,
        settings: Settings,
        sink: Callable[[Tone], None] | None = None,
    ) -> None:
        self.settings = settings
        self.sink = sink
        self.enabled = True
        self.volume = 10.0

    def render(self, value: int) -> Tone:
        """Synthesise the tone for ``value`` using the current settings."""
        s = self.settings
        x = float(value)
        freq = map_range(
            x, 0, s.SHUFFLE_MAX_COUNT, s.audio_min_frequency, s.audio_max_frequency
        )
        amp = map_range(x, 0, s.SHUFFLE_MAX_VALUE, s.audio_min_amp, s.audio_max_amp)
        pitch = map_range(
            x, 0, s.SHUFFLE_MAX_VALUE, s.audio_min_pitch, s.audio_max_pitch
        )
        wave = sine_wave if s.audio_wave_type == 0 else square_wave
        samples = array("h", (wave(i, freq, amp) for i in range(SAMPLE_RATE)))
        return Tone(samples=samples, pitch=pitch, volume=self.volume)

    def play(self, value: int) -> Tone | None:
        """Render and emit the tone for ``value``; nothing happens when disabled."""
        if not self.enabled:
            return None
        tone = self.render(value)
        if self.sink is not None:
            self.sink(tone)
        return tone