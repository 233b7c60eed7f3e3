"""Note and frequency helpers shared by the spectral and pitch analysers."""
from __future__ import annotations

import math

from .profiles import NOTES_SHARP

A4_MIDI = 69
A4_FREQUENCY_HZ = 440.0


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity (0.5 -> 1, -0.5 -> 0)."""

    return int(math.floor(value + 0.5))


def frequency_to_midi(frequency_hz: float) -> float:
    """Return the fractional MIDI note number for ``frequency_hz``."""

    if frequency_hz <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency_hz!r}")
    return A4_MIDI + 12.0 * math.log2(frequency_hz / A4_FREQUENCY_HZ)


def nearest_midi(frequency_hz: float) -> int:
    return round_half_up(frequency_to_midi(frequency_hz))


def midi_to_frequency(midi: float) -> float:
    return A4_FREQUENCY_HZ * 2.0 ** ((midi - A4_MIDI) / 12.0)


def midi_to_pitch_class(midi: int) -> int:
    """Map a MIDI note to 0 (C) .. 11 (B)."""

    return ((midi % 12) + 12) % 12


def note_from_midi(midi: int) -> str:
    """Return note name with octave, e.g. ``69 -> "A4"``."""

    name = NOTES_SHARP[midi_to_pitch_class(midi)]
    octave = midi // 12 - 1
    return f"{name}{octave}"


__all__ = [
    "A4_MIDI",
    "A4_FREQUENCY_HZ",
    "round_half_up",
    "frequency_to_midi",
    "nearest_midi",
    "midi_to_frequency",
    "midi_to_pitch_class",
    "note_from_midi",
]
