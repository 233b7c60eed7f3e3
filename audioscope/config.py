"""Application configuration loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from dotenv import load_dotenv

# Load environment variables from .env file if present.
load_dotenv()

logger = logging.getLogger(__name__)

KEY_SOURCES = ("spectrum", "pitch")
SPECTRUM_METHODS = ("dft", "fft")

ENVELOPE_FRAME_SIZE = 1024
SPECTRUM_FRAME_SIZE = 2048
PITCH_FRAME_SIZE = 2048
BPM_MIN = 60
BPM_MAX = 180
TOP_NOTES = 8

DEFAULT_SPECTRUM_METHOD = "fft"
DEFAULT_KEY_SOURCE = "spectrum"
DEFAULT_FIXED_RMS_DIVISOR = True
DEFAULT_MAX_FILE_MB = 200
DEFAULT_ANALYSIS_CONCURRENCY = 2


def _bool_from_env(value: Optional[str], default: bool) -> bool:
    """Parse boolean flag from environment variables."""

    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    logger.warning("Unknown boolean env value '%s', using default=%s", value, default)
    return default


def _int_from_env(value: Optional[str], default: int, *, minimum: int | None = None) -> int:
    """Parse integer configuration value from environment."""

    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Invalid integer env value '%s', using default=%s", value, default)
        return default
    if minimum is not None and parsed < minimum:
        logger.warning(
            "Configuration value %s below minimum %s, using minimum", parsed, minimum
        )
        return minimum
    return parsed


def _choice_from_env(value: Optional[str], default: str, choices: Sequence[str]) -> str:
    """Parse a value that must be one of ``choices``."""

    if value is None or not value.strip():
        return default
    cleaned = value.strip().lower()
    if cleaned in choices:
        return cleaned
    logger.warning(
        "Unknown env value '%s' (expected one of %s), using default=%s",
        value,
        ", ".join(choices),
        default,
    )
    return default


@dataclass(slots=True)
class Settings:
    """Dataclass storing analysis configuration."""

    envelope_frame_size: int = ENVELOPE_FRAME_SIZE
    spectrum_frame_size: int = SPECTRUM_FRAME_SIZE
    pitch_frame_size: int = PITCH_FRAME_SIZE
    bpm_min: int = BPM_MIN
    bpm_max: int = BPM_MAX
    top_notes: int = TOP_NOTES
    spectrum_method: str = DEFAULT_SPECTRUM_METHOD
    fixed_rms_divisor: bool = DEFAULT_FIXED_RMS_DIVISOR
    key_source: str = DEFAULT_KEY_SOURCE
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    analysis_concurrency: int = DEFAULT_ANALYSIS_CONCURRENCY

    @property
    def max_file_bytes(self) -> int:
        """Return maximum allowed file size in bytes."""

        return self.max_file_mb * 1024 * 1024


def load_settings() -> Settings:
    """Load and validate analysis settings from environment variables."""

    bpm_min = _int_from_env(os.getenv("BPM_MIN"), BPM_MIN, minimum=1)
    bpm_max = _int_from_env(os.getenv("BPM_MAX"), BPM_MAX, minimum=1)
    if bpm_max < bpm_min:
        logger.warning(
            "BPM_MAX %s below BPM_MIN %s, using defaults %s..%s",
            bpm_max,
            bpm_min,
            BPM_MIN,
            BPM_MAX,
        )
        bpm_min, bpm_max = BPM_MIN, BPM_MAX

    settings = Settings(
        envelope_frame_size=_int_from_env(
            os.getenv("AUDIOSCOPE_ENVELOPE_FRAME"), ENVELOPE_FRAME_SIZE, minimum=1
        ),
        spectrum_frame_size=_int_from_env(
            os.getenv("AUDIOSCOPE_SPECTRUM_FRAME"), SPECTRUM_FRAME_SIZE, minimum=2
        ),
        pitch_frame_size=_int_from_env(
            os.getenv("AUDIOSCOPE_PITCH_FRAME"), PITCH_FRAME_SIZE, minimum=2
        ),
        bpm_min=bpm_min,
        bpm_max=bpm_max,
        top_notes=_int_from_env(os.getenv("AUDIOSCOPE_TOP_NOTES"), TOP_NOTES, minimum=1),
        spectrum_method=_choice_from_env(
            os.getenv("AUDIOSCOPE_SPECTRUM_METHOD"), DEFAULT_SPECTRUM_METHOD, SPECTRUM_METHODS
        ),
        fixed_rms_divisor=_bool_from_env(
            os.getenv("AUDIOSCOPE_FIXED_RMS_DIVISOR"), DEFAULT_FIXED_RMS_DIVISOR
        ),
        key_source=_choice_from_env(
            os.getenv("AUDIOSCOPE_KEY_SOURCE"), DEFAULT_KEY_SOURCE, KEY_SOURCES
        ),
        max_file_mb=_int_from_env(os.getenv("MAX_FILE_MB"), DEFAULT_MAX_FILE_MB, minimum=1),
        analysis_concurrency=_int_from_env(
            os.getenv("ANALYSIS_CONCURRENCY"), DEFAULT_ANALYSIS_CONCURRENCY, minimum=1
        ),
    )
    return settings


__all__ = ["KEY_SOURCES", "Settings", "load_settings"]
