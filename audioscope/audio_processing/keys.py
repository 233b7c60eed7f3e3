"""Key estimation by correlating a pitch-class histogram with tonal profiles."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .profiles import ENHARMONIC, MAJOR_PROFILE, MINOR_PROFILE, MODES, NOTES_SHARP

logger = logging.getLogger(__name__)

KEY_NAMES: List[str] = [f"{note} {mode}" for note in NOTES_SHARP for mode in MODES]


def _rotation_indices(tonic: int) -> np.ndarray:
    return (12 + np.arange(12) - tonic) % 12


def detect_keys(histogram: Sequence[float] | np.ndarray) -> Dict[str, float]:
    """Score all 24 major/minor keys against ``histogram``.

    ``histogram`` holds 12 non-negative weights ordered C .. B. The result
    maps ``"<Note> Major"`` / ``"<Note> Minor"`` to a share of 100; it is
    all zero when the histogram carries no weight. Ranking is left to the
    caller (see :func:`rank_keys`).
    """

    values = np.asarray(histogram, dtype=float)
    if values.shape != (12,):
        raise ValueError(f"Expected 12 pitch classes, got shape {values.shape}")

    total = float(values.sum()) or 1.0
    norm = values / total

    raw: Dict[str, float] = {}
    for tonic, note in enumerate(NOTES_SHARP):
        rotation = _rotation_indices(tonic)
        raw[f"{note} Major"] = float(norm @ MAJOR_PROFILE[rotation])
        raw[f"{note} Minor"] = float(norm @ MINOR_PROFILE[rotation])

    score_total = sum(raw.values()) or 1.0
    return {name: score / score_total * 100.0 for name, score in raw.items()}


def rank_keys(scores: Dict[str, float]) -> List[Tuple[str, float]]:
    """Sort key scores descending; exact ties keep their original order."""

    return sorted(scores.items(), key=lambda item: item[1], reverse=True)


def best_key(scores: Dict[str, float]) -> Optional[str]:
    """Return the highest-scoring key name, or ``None`` if nothing scored."""

    ranked = rank_keys(scores)
    if not ranked or ranked[0][1] <= 0:
        return None
    logger.debug(
        "Key candidates: %s",
        ", ".join(f"{key}={value:.2f}" for key, value in ranked[:3]),
    )
    return ranked[0][0]


def format_key_display(name: str) -> str:
    """Compose a key name with its flat spelling, e.g. ``"A# Minor (Bb Minor)"``."""

    note, _, mode = name.partition(" ")
    enharmonic = ENHARMONIC.get(note)
    if enharmonic:
        return f"{name} ({enharmonic} {mode})"
    return name


__all__ = ["KEY_NAMES", "detect_keys", "rank_keys", "best_key", "format_key_display"]
