"""Decode audio files into the mono buffer consumed by the analysers."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

import librosa
import numpy as np
import soundfile as sf

from ..utils.files import exceeds_limit, is_supported
from .errors import AnalysisError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Signal:
    """Read-only view of one decoded channel and its sample rate."""

    samples: np.ndarray
    sample_rate: int
    path: Optional[Path] = None

    @property
    def duration_seconds(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.samples.size / self.sample_rate


def _first_channel(y: np.ndarray, *, channels_first: bool) -> np.ndarray:
    if y.ndim <= 1:
        return y
    return y[0] if channels_first else y[:, 0]


def _decode(audio_path: Path) -> tuple[np.ndarray, int]:
    """Decode with librosa, falling back to soundfile if needed."""

    try:
        y, sr = librosa.load(audio_path, sr=None, mono=False)
        y = _first_channel(np.asarray(y), channels_first=True)
    except Exception as first_exc:
        logger.debug(
            "librosa.load failed for %s (%s); trying soundfile fallback",
            audio_path,
            first_exc,
        )
        try:
            y, sr = sf.read(audio_path, always_2d=False)
        except Exception as sf_exc:
            raise RuntimeError(
                "librosa.load failed: "
                f"{first_exc}; soundfile.read failed: {sf_exc}"
            ) from sf_exc
        y = _first_channel(np.asarray(y), channels_first=False)

    return np.asarray(y, dtype=np.float32), int(sr)


def load_signal(path: str | Path, *, max_bytes: Optional[int] = None) -> Signal:
    """Decode ``path`` and keep its first channel."""

    audio_path = Path(path)
    if not is_supported(audio_path):
        raise AnalysisError(f"Unsupported audio format: {audio_path.suffix or audio_path.name}")
    if not audio_path.is_file():
        raise AnalysisError(f"Audio file not found: {audio_path}")
    if exceeds_limit(audio_path, max_bytes):
        raise AnalysisError(f"Audio file {audio_path.name} exceeds {max_bytes} bytes")

    logger.info("Loading audio file %s", audio_path)
    try:
        samples, sample_rate = _decode(audio_path)
    except Exception as exc:
        raise AnalysisError(f"Failed to load audio file: {exc}") from exc

    if samples.size == 0:
        raise AnalysisError("Empty audio stream received.")

    return Signal(samples=samples, sample_rate=sample_rate, path=audio_path)


__all__ = ["Signal", "load_signal"]
