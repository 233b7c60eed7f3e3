"""Tempo estimation from the loudness envelope."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .envelope import ENVELOPE_FRAME_SIZE
from .notes import round_half_up
from .periodicity import autocorrelate

logger = logging.getLogger(__name__)

BPM_MIN = 60
BPM_MAX = 180


def tempo_lag_window(
    sample_rate: float,
    frame_size: int = ENVELOPE_FRAME_SIZE,
    *,
    bpm_min: int = BPM_MIN,
    bpm_max: int = BPM_MAX,
) -> tuple[int, int]:
    """Return the inclusive envelope lag bounds for ``bpm_max`` .. ``bpm_min``."""

    rate = sample_rate / frame_size
    return round_half_up(rate * 60 / bpm_max), round_half_up(rate * 60 / bpm_min)


def estimate_bpm(
    envelope: Sequence[float] | np.ndarray,
    sample_rate: float,
    frame_size: int = ENVELOPE_FRAME_SIZE,
    *,
    bpm_min: int = BPM_MIN,
    bpm_max: int = BPM_MAX,
) -> Optional[int]:
    """Pick the envelope lag with the strongest autocorrelation and convert it to BPM.

    Returns ``None`` when the tempo is indeterminate: the envelope is too
    short, the lag window is empty, or no lag in it correlates positively.
    """

    if sample_rate <= 0 or frame_size <= 0:
        raise ValueError("sample_rate and frame_size must be positive")
    if bpm_min <= 0 or bpm_max < bpm_min:
        raise ValueError(f"Invalid BPM range {bpm_min}..{bpm_max}")

    data = np.asarray(envelope, dtype=float)
    n = data.size
    if n < 2:
        logger.debug("Envelope of %d frames is too short for tempo estimation", n)
        return None

    rate = sample_rate / frame_size
    min_lag, max_lag = tempo_lag_window(
        sample_rate, frame_size, bpm_min=bpm_min, bpm_max=bpm_max
    )
    first = max(min_lag, 1)
    last = min(max_lag, n - 1)
    if first > last:
        logger.debug("Empty lag window %d..%d for %d envelope frames", min_lag, max_lag, n)
        return None

    ac = autocorrelate(data, last + 1)

    best_lag = 0
    best_value = 0.0
    for lag in range(first, last + 1):
        if ac[lag] > best_value:
            best_value = float(ac[lag])
            best_lag = lag

    if best_lag == 0:
        logger.debug("No positive correlation in lag window %d..%d", first, last)
        return None

    bpm = round_half_up(60 * rate / best_lag)
    logger.debug("Tempo lag %d (corr %.4f) -> %d BPM", best_lag, best_value, bpm)
    return bpm


__all__ = ["BPM_MIN", "BPM_MAX", "tempo_lag_window", "estimate_bpm"]
