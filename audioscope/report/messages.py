"""Text messages and formatting helpers for analysis reports."""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..audio_processing.profiles import NOTES_SHARP

if TYPE_CHECKING:
    from ..audio_processing.analyzer import AnalysisResult


def unsupported_file(name: str) -> str:
    return (
        f"Cannot analyse {name}: unsupported format. Supported formats:"
        " aif, aiff, flac, m4a, mp3, ogg, opus, wav, webm."
    )


def processing_error(name: str, reason: str) -> str:
    return f"Cannot analyse {name}: {reason}"


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def format_analysis_result(result: "AnalysisResult") -> str:
    """Format analysis result into a plain-text report."""

    lines = [f"File: {result.filename}", f"Duration: {result.duration}"]

    if result.bpm is None:
        lines.append("Tempo: not detected")
    else:
        lines.append(f"Tempo: {result.bpm} BPM")

    dynamic = result.dynamic_range
    if dynamic is None:
        lines.append("Dynamic range: not detected")
    else:
        lines.append(
            f"Dynamic range: {dynamic.min:.2f} / {dynamic.max:.2f} (range {dynamic.range:.2f})"
        )

    if not result.key:
        lines.append("Key: not detected")
    else:
        score = result.key_scores.get(result.key, 0.0)
        lines.append(f"Key: {result.key_display} ({score:.1f}%)")

    band = result.band_energy
    lines.append(
        "Bands: low {low} • mid {mid} • high {high}".format(
            low=_percent(band.low),
            mid=_percent(band.mid),
            high=_percent(band.high),
        )
    )

    if result.dominant_notes:
        lines.append("Dominant notes: " + ", ".join(name for name, _ in result.dominant_notes))

    if any(result.key_distribution):
        lines.append(
            "Pitch classes: "
            + " ".join(
                f"{note} {value:.1f}%"
                for note, value in zip(NOTES_SHARP, result.key_distribution)
            )
        )

    return "\n".join(lines)


__all__ = [
    "unsupported_file",
    "processing_error",
    "format_analysis_result",
]
