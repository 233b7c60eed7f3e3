"""Loudness envelope and dynamic range of a mono buffer."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

ENVELOPE_FRAME_SIZE = 1024


@dataclass(slots=True, frozen=True)
class DynamicRange:
    min: float
    max: float
    range: float


def compute_envelope(
    samples: Sequence[float] | np.ndarray,
    frame_size: int = ENVELOPE_FRAME_SIZE,
    *,
    fixed_divisor: bool = True,
) -> np.ndarray:
    """Return the RMS of each consecutive ``frame_size`` block of ``samples``.

    The trailing block may be shorter than ``frame_size``. With
    ``fixed_divisor`` (the default) its mean square is still taken over
    ``frame_size`` so a short tail reads quieter than a full frame of the
    same amplitude; pass ``fixed_divisor=False`` to divide by the number of
    samples actually present.
    """

    if frame_size <= 0:
        raise ValueError(f"frame_size must be positive, got {frame_size}")

    data = np.asarray(samples, dtype=float)
    if data.size == 0:
        return np.zeros(0, dtype=float)

    frames = -(-data.size // frame_size)
    padded = np.zeros(frames * frame_size, dtype=float)
    padded[: data.size] = data
    energy = np.sum(padded.reshape(frames, frame_size) ** 2, axis=1)

    divisors = np.full(frames, float(frame_size))
    if not fixed_divisor:
        tail = data.size - (frames - 1) * frame_size
        divisors[-1] = float(tail)

    return np.sqrt(energy / divisors)


def compute_dynamic_range(samples: Sequence[float] | np.ndarray) -> Optional[DynamicRange]:
    """Track minimum and maximum raw amplitude over the whole buffer.

    Returns ``None`` for an empty buffer, where the scan would otherwise
    report the meaningless ``(1, -1, -2)`` starting point.
    """

    data = np.asarray(samples, dtype=float)
    if data.size == 0:
        logger.debug("Dynamic range requested for an empty buffer")
        return None

    low = min(1.0, float(data.min()))
    high = max(-1.0, float(data.max()))
    return DynamicRange(min=low, max=high, range=high - low)


__all__ = [
    "ENVELOPE_FRAME_SIZE",
    "DynamicRange",
    "compute_envelope",
    "compute_dynamic_range",
]
