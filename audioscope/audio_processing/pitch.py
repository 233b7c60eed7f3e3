"""Monophonic pitch detection by waveform self-similarity.

This is deliberately separate from :mod:`.periodicity`: it compares a frame
with shifted copies of itself through mean absolute difference rather than
products, so it responds to waveform shape instead of energy.

Known limitation: the scan stops at the first offset where similarity falls
after having climbed above :data:`GOOD_CORRELATION`. A later, better match
(for instance a cleaner repetition at twice the period) is never considered,
so the result can be a local rather than a global optimum.
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from .notes import midi_to_pitch_class, nearest_midi
from .spectrum import SPECTRUM_FRAME_SIZE

logger = logging.getLogger(__name__)

PITCH_FRAME_SIZE = SPECTRUM_FRAME_SIZE
SILENCE_RMS = 0.01
GOOD_CORRELATION = 0.9
MIN_CORRELATION = 0.01


def auto_correlate_pitch(frame: Sequence[float] | np.ndarray, sample_rate: float) -> Optional[float]:
    """Estimate the fundamental frequency of ``frame`` in Hz, or ``None``."""

    buf = np.asarray(frame, dtype=float)
    size = buf.size
    if size == 0:
        return None

    rms = math.sqrt(float(np.mean(buf * buf)))
    if rms < SILENCE_RMS:
        return None

    max_samples = size // 2
    if max_samples == 0:
        return None
    head = buf[:max_samples]

    best_offset = -1
    best_correlation = 0.0
    last_correlation = 1.0
    found_good = False

    for offset in range(max_samples):
        diff = float(np.sum(np.abs(head - buf[offset : offset + max_samples])))
        correlation = 1.0 - diff / max_samples
        if correlation > GOOD_CORRELATION and correlation > last_correlation:
            found_good = True
            if correlation > best_correlation:
                best_correlation = correlation
                best_offset = offset
        elif found_good:
            return sample_rate / best_offset
        last_correlation = correlation

    if best_correlation > MIN_CORRELATION:
        return sample_rate / best_offset
    return None


def compute_pitch_histogram(
    samples: Sequence[float] | np.ndarray,
    sample_rate: float,
    frame_size: int = PITCH_FRAME_SIZE,
) -> List[float]:
    """Count detected pitches per pitch class over full non-overlapping frames."""

    if frame_size <= 0:
        raise ValueError(f"frame_size must be positive, got {frame_size}")

    data = np.asarray(samples, dtype=float)
    histogram = [0.0] * 12
    voiced = 0
    for start in range(0, data.size - frame_size + 1, frame_size):
        frequency = auto_correlate_pitch(data[start : start + frame_size], sample_rate)
        if frequency is None:
            continue
        histogram[midi_to_pitch_class(nearest_midi(frequency))] += 1
        voiced += 1

    logger.debug("Pitch detected in %d frames", voiced)
    return histogram


__all__ = [
    "PITCH_FRAME_SIZE",
    "SILENCE_RMS",
    "GOOD_CORRELATION",
    "auto_correlate_pitch",
    "compute_pitch_histogram",
]
