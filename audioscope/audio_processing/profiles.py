"""Tonal profiles and note naming tables used by the key estimator."""
from __future__ import annotations

from typing import Dict, List

import numpy as np

KRUMHANSL_MAJOR: List[float] = [
    6.35,
    2.23,
    3.48,
    2.33,
    4.38,
    4.09,
    2.52,
    5.19,
    2.39,
    3.66,
    2.29,
    2.88,
]

KRUMHANSL_MINOR: List[float] = [
    6.33,
    2.68,
    3.52,
    5.38,
    2.60,
    3.53,
    2.54,
    4.75,
    3.98,
    2.69,
    3.34,
    3.17,
]

NOTES_SHARP: List[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

ENHARMONIC: Dict[str, str] = {
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
}

MODES: tuple[str, str] = ("Major", "Minor")

# Scaled to unit sum.
MAJOR_PROFILE = np.asarray(KRUMHANSL_MAJOR, dtype=float) / sum(KRUMHANSL_MAJOR)
MINOR_PROFILE = np.asarray(KRUMHANSL_MINOR, dtype=float) / sum(KRUMHANSL_MINOR)

__all__ = [
    "KRUMHANSL_MAJOR",
    "KRUMHANSL_MINOR",
    "NOTES_SHARP",
    "ENHARMONIC",
    "MODES",
    "MAJOR_PROFILE",
    "MINOR_PROFILE",
]
