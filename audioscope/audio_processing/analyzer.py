"""Run every descriptor over one mono buffer and collect the results."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import Settings
from .envelope import DynamicRange, compute_dynamic_range, compute_envelope
from .errors import AnalysisError
from .keys import best_key, detect_keys, format_key_display
from .loader import load_signal
from .pitch import compute_pitch_histogram
from .spectrum import BandEnergy, analyze_frequency
from .tempo import estimate_bpm

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """Structured descriptor set for one buffer."""

    filename: str
    sample_rate: int
    duration_seconds: float
    duration: str
    bpm: Optional[int]
    dynamic_range: Optional[DynamicRange]
    key: Optional[str]
    key_source: str
    key_scores: Dict[str, float]
    key_distribution: List[float]
    pitch_histogram: List[float]
    dominant_notes: List[Tuple[str, float]]
    band_energy: BandEnergy
    envelope: List[float] = field(default_factory=list)

    @property
    def key_display(self) -> str:
        if not self.key:
            return "0"
        return format_key_display(self.key)


def analyze_signal(
    samples: Sequence[float] | np.ndarray,
    sample_rate: int,
    *,
    settings: Optional[Settings] = None,
    filename: str = "",
) -> AnalysisResult:
    """Compute all descriptors for ``samples`` recorded at ``sample_rate``.

    The pitch-event histogram is always computed because it is part of the
    result, even when keys are scored from the spectrum. It is the slowest
    step, roughly 0.2 s per second of audio, so long tracks pay for it in
    full.
    """

    if sample_rate <= 0:
        raise AnalysisError(f"Sample rate must be positive, got {sample_rate}")
    cfg = settings or Settings()

    data = np.asarray(samples, dtype=float)
    if data.ndim != 1:
        raise AnalysisError(f"Expected a mono buffer, got shape {data.shape}")

    envelope = compute_envelope(
        data, cfg.envelope_frame_size, fixed_divisor=cfg.fixed_rms_divisor
    )
    bpm = estimate_bpm(
        envelope,
        sample_rate,
        cfg.envelope_frame_size,
        bpm_min=cfg.bpm_min,
        bpm_max=cfg.bpm_max,
    )
    dynamic = compute_dynamic_range(data)
    frequency = analyze_frequency(
        data,
        sample_rate,
        cfg.spectrum_frame_size,
        method=cfg.spectrum_method,
        top_n=cfg.top_notes,
    )
    pitch_histogram = compute_pitch_histogram(data, sample_rate, cfg.pitch_frame_size)

    if cfg.key_source == "pitch":
        key_scores = detect_keys(pitch_histogram)
    else:
        key_scores = detect_keys(frequency.key_distribution)
    key = best_key(key_scores)

    duration_seconds = data.size / sample_rate
    result = AnalysisResult(
        filename=filename,
        sample_rate=int(sample_rate),
        duration_seconds=duration_seconds,
        duration=format_duration_seconds(duration_seconds),
        bpm=bpm,
        dynamic_range=dynamic,
        key=key,
        key_source=cfg.key_source,
        key_scores=key_scores,
        key_distribution=frequency.key_distribution,
        pitch_histogram=pitch_histogram,
        dominant_notes=frequency.dominant_notes,
        band_energy=frequency.band_energy,
        envelope=[float(v) for v in envelope],
    )

    logger.info(
        "Analyzed %s: key=%s (%s), bpm=%s, duration=%s, bands=%.2f/%.2f/%.2f",
        filename or "<buffer>",
        result.key_display,
        cfg.key_source,
        bpm,
        result.duration,
        *result.band_energy.as_tuple(),
    )
    return result


def analyze_file(path: str | Path, *, settings: Optional[Settings] = None) -> AnalysisResult:
    """Decode the audio file and return its descriptors."""

    cfg = settings or Settings()
    signal = load_signal(path, max_bytes=cfg.max_file_bytes)
    return analyze_signal(
        signal.samples,
        signal.sample_rate,
        settings=cfg,
        filename=Path(path).name,
    )


def format_duration_seconds(total_seconds: float) -> str:
    """Return mm:ss formatted duration for a given number of seconds."""

    total_seconds_int = int(round(total_seconds))
    minutes, seconds = divmod(total_seconds_int, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


__all__ = [
    "AnalysisResult",
    "AnalysisError",
    "analyze_signal",
    "analyze_file",
    "format_duration_seconds",
]
