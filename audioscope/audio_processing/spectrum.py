"""Frame-wise magnitude spectra and their musical reductions."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .notes import midi_to_pitch_class, nearest_midi, note_from_midi

logger = logging.getLogger(__name__)

SPECTRUM_FRAME_SIZE = 2048
LOW_BAND_LIMIT_HZ = 250.0
HIGH_BAND_START_HZ = 4000.0
NOTE_WINDOW_HZ: Tuple[float, float] = (27.0, 4200.0)
TOP_NOTES = 8
SPECTRUM_METHODS = ("dft", "fft")


@dataclass(slots=True, frozen=True)
class BandEnergy:
    low: float
    mid: float
    high: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.low, self.mid, self.high


@dataclass(slots=True)
class FrequencyAnalysis:
    """Spectral summary of a whole buffer."""

    key_distribution: List[float]
    dominant_notes: List[Tuple[str, float]]
    band_energy: BandEnergy


@lru_cache(maxsize=1)
def _dft_basis(size: int) -> Tuple[np.ndarray, np.ndarray]:
    k = np.arange(size // 2)[:, None]
    n = np.arange(size)[None, :]
    angle = 2.0 * np.pi * k * n / size
    return np.cos(angle), np.sin(angle)


def compute_spectrum(frame: Sequence[float] | np.ndarray, *, method: str = "dft") -> np.ndarray:
    """Return ``N/2`` bin magnitudes of an ``N``-sample frame.

    ``method="dft"`` evaluates the transform directly in O(N^2):
    ``re = sum s[n] cos(2 pi k n / N)``, ``im = -sum s[n] sin(2 pi k n / N)``.
    ``method="fft"`` computes the same magnitudes with :func:`numpy.fft.rfft`.
    """

    data = np.asarray(frame, dtype=float)
    size = data.size
    if method == "fft":
        return np.abs(np.fft.rfft(data))[: size // 2]
    if method != "dft":
        raise ValueError(f"Unknown spectrum method {method!r}; expected one of {SPECTRUM_METHODS}")

    cos_basis, sin_basis = _dft_basis(size)
    re = cos_basis @ data
    im = -(sin_basis @ data)
    return np.sqrt(re * re + im * im)


def _normalize(values: np.ndarray, scale: float) -> np.ndarray:
    total = float(values.sum()) or 1.0
    return values / total * scale


def analyze_frequency(
    samples: Sequence[float] | np.ndarray,
    sample_rate: int,
    frame_size: int = SPECTRUM_FRAME_SIZE,
    *,
    method: str = "fft",
    top_n: int = TOP_NOTES,
) -> FrequencyAnalysis:
    """Accumulate band energy, pitch-class energy and per-note energy.

    The buffer is walked in non-overlapping ``frame_size`` windows starting
    at 0 while the window start is below ``len(samples) - frame_size``.
    Notes that gathered no energy are left out of ``dominant_notes``.
    """

    if frame_size <= 0:
        raise ValueError(f"frame_size must be positive, got {frame_size}")

    data = np.asarray(samples, dtype=float)
    bins = np.arange(frame_size // 2)
    freqs = bins * sample_rate / frame_size

    low_mask = freqs < LOW_BAND_LIMIT_HZ
    mid_mask = (freqs >= LOW_BAND_LIMIT_HZ) & (freqs < HIGH_BAND_START_HZ)
    high_mask = freqs >= HIGH_BAND_START_HZ

    lo, hi = NOTE_WINDOW_HZ
    note_bins = np.flatnonzero((freqs > lo) & (freqs < hi))
    bin_midi = [nearest_midi(float(freqs[k])) for k in note_bins]
    bin_class = np.array([midi_to_pitch_class(m) for m in bin_midi], dtype=int)
    bin_name = [note_from_midi(m) for m in bin_midi]

    pitch_classes = np.zeros(12, dtype=float)
    band = np.zeros(3, dtype=float)
    note_strength: Dict[str, float] = {}

    frames = 0
    for start in range(0, max(data.size - frame_size, 0), frame_size):
        spectrum = compute_spectrum(data[start : start + frame_size], method=method)
        band += (
            float(spectrum[low_mask].sum()),
            float(spectrum[mid_mask].sum()),
            float(spectrum[high_mask].sum()),
        )
        note_mags = spectrum[note_bins]
        np.add.at(pitch_classes, bin_class, note_mags)
        for name, mag in zip(bin_name, note_mags):
            note_strength[name] = note_strength.get(name, 0.0) + float(mag)
        frames += 1

    logger.debug("Spectral analysis over %d frames of %d samples", frames, frame_size)

    audible = [(name, energy) for name, energy in note_strength.items() if energy > 0]
    dominant = sorted(audible, key=lambda item: item[1], reverse=True)[:top_n]
    low, mid, high = (float(v) for v in _normalize(band, 1.0))
    return FrequencyAnalysis(
        key_distribution=[float(v) for v in _normalize(pitch_classes, 100.0)],
        dominant_notes=dominant,
        band_energy=BandEnergy(low=low, mid=mid, high=high),
    )


__all__ = [
    "SPECTRUM_FRAME_SIZE",
    "SPECTRUM_METHODS",
    "TOP_NOTES",
    "BandEnergy",
    "FrequencyAnalysis",
    "compute_spectrum",
    "analyze_frequency",
]
